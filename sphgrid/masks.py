"""Helpers for pruning collections with boolean masks."""

from __future__ import annotations

from typing import Sequence, TypeVar

T = TypeVar("T")


def filter_from_mask(mask: Sequence[bool], items: Sequence[T]) -> list[T]:
    """Return the items whose matching mask entry is false, keeping their order.

    The mask must cover every item; extra mask entries are ignored.
    """
    if len(mask) < len(items):
        raise IndexError(
            f"mask has {len(mask)} entries but {len(items)} items were given"
        )
    return [item for item, delete in zip(items, mask) if not delete]