"""Small vector helpers for 2D and 3D points stored as tuples of floats."""

from __future__ import annotations

import math
from typing import Optional, Sequence

Vector = tuple[float, ...]


def _check_same_dim(a: Sequence[float], b: Sequence[float]) -> None:
    if len(a) != len(b):
        raise ValueError(f"dimension mismatch: {len(a)} and {len(b)}")


def add(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Component-wise sum."""
    _check_same_dim(a, b)
    return tuple(x + y for x, y in zip(a, b))


def sub(a: Sequence[float], b: Sequence[float]) -> Vector:
    """Component-wise difference ``a - b``."""
    _check_same_dim(a, b)
    return tuple(x - y for x, y in zip(a, b))


def scale(v: Sequence[float], s: float) -> Vector:
    """Multiply every component by ``s``."""
    return tuple(x * s for x in v)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product."""
    _check_same_dim(a, b)
    return sum(x * y for x, y in zip(a, b))


def norm(v: Sequence[float]) -> float:
    """Euclidean length."""
    return math.sqrt(dot(v, v))


def distance_squared(a: Sequence[float], b: Sequence[float]) -> float:
    """Squared distance between two points."""
    d = sub(a, b)
    return dot(d, d)


def lerp(a: Sequence[float], b: Sequence[float], t: float) -> Vector:
    """Linear interpolation from ``a`` (t=0) to ``b`` (t=1)."""
    _check_same_dim(a, b)
    return tuple(x + (y - x) * t for x, y in zip(a, b))


def normalize_or_none(
    v: Sequence[float], eps: float
) -> Optional[tuple[Vector, float]]:
    """Return ``(unit_vector, length)``, or None when the length is at most ``eps``."""
    length = norm(v)
    if length <= eps:
        return None
    return scale(v, 1.0 / length), length


def gcross_matrix(v: Sequence[float]):
    """The cross-product matrix of ``v``.

    In 2D this is the row vector ``(-y, x)``; in 3D the 3x3 skew-symmetric matrix.
    """
    if len(v) == 2:
        x, y = v
        return (-y, x)
    if len(v) == 3:
        x, y, z = v
        return (
            (0.0, -z, y),
            (z, 0.0, -x),
            (-y, x, 0.0),
        )
    raise ValueError(f"cross matrix needs a 2D or 3D vector, got {len(v)} components")