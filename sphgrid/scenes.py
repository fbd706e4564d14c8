"""Demo selection and the particle layouts and ground heights used by the demo scenes."""

from __future__ import annotations

import itertools
import math
import re
from typing import Iterable, Optional, Sequence

from sphgrid.vectors import Vector

_WORD = re.compile(r"[A-Z]+(?![a-z])|[A-Z]?[a-z]+|[0-9]+")


def camel_case(name: str) -> str:
    """Convert ``name`` to lower camel case: ``"Surface tension"`` becomes ``surfaceTension``.

    Words are split on anything that is not a letter or digit and on case changes.
    """
    words = _WORD.findall(name)
    if not words:
        return ""
    first, *rest = words
    return first.lower() + "".join(word.capitalize() for word in rest)


def demo_name_from_args(argv: Iterable[str]) -> Optional[str]:
    """The argument that follows the first ``--example`` flag, or None."""
    args = iter(argv)
    for arg in args:
        if arg == "--example":
            return next(args, None)
    return None


def sort_demo_names(names: Iterable[str]) -> list[str]:
    """Sort demo names lexicographically, moving names in parentheses to the end."""
    return sorted(names, key=lambda name: (name.startswith("("), name))


def select_demo(names: Sequence[str], requested: Optional[str]) -> int:
    """Index of the demo whose camel-cased name matches ``requested``, or 0."""
    wanted = camel_case(requested or "")
    return next(
        (index for index, name in enumerate(names) if camel_case(name) == wanted),
        0,
    )


def cube_points(counts: Sequence[int], particle_radius: float) -> list[Vector]:
    """Particle centres of a block of ``counts`` particles per axis, centred on the origin.

    ``counts`` has two entries for a 2D block or three for a 3D one; the last axis
    varies fastest.
    """
    if len(counts) not in (2, 3):
        raise ValueError(f"a block needs 2 or 3 particle counts, got {len(counts)}")
    if any(count < 0 for count in counts):
        raise ValueError(f"particle counts must be non-negative, got {tuple(counts)}")
    diameter = particle_radius * 2.0
    half_extents = [count * particle_radius for count in counts]
    return [
        tuple(
            index * diameter + particle_radius - half
            for index, half in zip(indices, half_extents)
        )
        for indices in itertools.product(*(range(count) for count in counts))
    ]


def _check_subdivisions(nsubdivs: int) -> None:
    if nsubdivs < 0:
        raise ValueError(f"number of subdivisions must be non-negative, got {nsubdivs}")


def heightfield_heights_2d(nsubdivs: int, width: float) -> list[float]:
    """Heights of a wavy 2D ground with raised walls at both ends.

    There are ``nsubdivs + 1`` samples; the end samples are 20, the others follow a
    cosine of amplitude 0.5 over ``width``.
    """
    _check_subdivisions(nsubdivs)
    return [
        20.0 if i in (0, nsubdivs) else math.cos(i * width / nsubdivs) * 0.5
        for i in range(nsubdivs + 1)
    ]


def heightfield_heights_3d(
    nsubdivs: int, size_x: float, size_z: float
) -> list[list[float]]:
    """Heights of a bumpy 3D ground, rows along x and columns along z.

    The grid has ``nsubdivs + 1`` samples per side; border samples are 3, the
    others are ``sin(x) + cos(z)``.
    """
    _check_subdivisions(nsubdivs)

    def height(i: int, j: int) -> float:
        if i in (0, nsubdivs) or j in (0, nsubdivs):
            return 3.0
        x = i * size_x / nsubdivs
        z = j * size_z / nsubdivs
        return math.sin(x) + math.cos(z)

    return [[height(i, j) for j in range(nsubdivs + 1)] for i in range(nsubdivs + 1)]