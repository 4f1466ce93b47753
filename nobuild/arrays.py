"""Helpers for growable sequences that lists do not provide directly."""

from __future__ import annotations

from typing import MutableSequence, Sequence, TypeVar

T = TypeVar("T")


def resize(items: MutableSequence[T], size: int, fill: T | None = None) -> None:
    """Grow or shrink ``items`` in place to exactly ``size`` elements.

    New slots are set to ``fill``; surplus elements are dropped from the end.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    current = len(items)
    if size < current:
        del items[size:]
    elif size > current:
        items.extend([fill] * (size - current))  # type: ignore[list-item]


def remove_unordered(items: MutableSequence[T], index: int) -> T:
    """Remove the element at ``index`` by moving the last element into its place.

    This does not preserve order. Returns the removed element.
    """
    if not 0 <= index < len(items):
        raise IndexError(f"index {index} out of range for {len(items)} items")
    removed = items[index]
    tail = items.pop()
    if index < len(items):
        items[index] = tail
    return removed


def last(items: Sequence[T]) -> T:
    """Return the last element of a non-empty sequence."""
    if not items:
        raise IndexError("last() of an empty sequence")
    return items[-1]