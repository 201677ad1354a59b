"""Vertical list motions and find-character motions."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol


class _Titled(Protocol):
    title: str


def _inclusive(a: int, b: int) -> list[int]:
    low, high = min(a, b), max(a, b)
    return list(range(low, high + 1))


def _line_target(count: int, max_idx: int, default: int) -> int:
    return default if count == 0 else min(count - 1, max_idx)


def get_nav_target(current: int, total: int, motion: str, count: int) -> int | None:
    """Return the index a plain navigation motion moves to, or None if unknown.

    For ``G`` a count of 0 means "no explicit count" and goes to the last item.
    """
    max_idx = max(total - 1, 0)
    match motion:
        case "j":
            return min(current + count, max_idx)
        case "k":
            return max(current - count, 0)
        case "g":
            return 0 if count <= 1 else min(count - 1, max_idx)
        case "G":
            return _line_target(count, max_idx, max_idx)
        case "0":
            return 0
        case "$":
            return max_idx
    return None


def get_motion_range(
    current: int, total: int, motion: str, count: int
) -> list[int] | None:
    """Return the inclusive list of indices a motion covers for an operator."""
    max_idx = max(total - 1, 0)
    match motion:
        case "j":
            return list(range(current, min(current + count, max_idx) + 1))
        case "k":
            return list(range(max(current - count, 0), current + 1))
        case "G":
            return _inclusive(current, _line_target(count, max_idx, max_idx))
        case "g":
            target = 0 if count <= 1 else min(count - 1, max_idx)
            return _inclusive(current, target)
        case "0":
            return list(range(0, current + 1))
        case "$":
            return list(range(current, max_idx + 1))
    return None


def _title_starts_with(book: _Titled, char: str) -> bool:
    return book.title.lower().startswith(char)


def get_find_char_target(
    books: Sequence[_Titled], current: int, motion: str, target_char: str, count: int
) -> int | None:
    """Return the target of an f/F/t/T motion over book titles.

    Matching compares the first letter of each title, ignoring case; the
    ``count``-th match in the motion's direction is used.
    """
    if current >= len(books):
        return None
    char = target_char.lower()[:1] or target_char

    if motion in ("f", "t"):
        candidates = range(current + 1, len(books))
    elif motion in ("F", "T"):
        candidates = range(current - 1, -1, -1)
    else:
        return None

    matches = (i for i in candidates if _title_starts_with(books[i], char))
    for found, index in enumerate(matches, start=1):
        if found == count:
            if motion == "f" or motion == "F":
                return index
            if motion == "t":
                return max(index - 1, current)
            return min(index + 1, current)
    return None


def get_find_char_range(
    books: Sequence[_Titled], current: int, motion: str, target_char: str, count: int
) -> list[int] | None:
    """Return the inclusive range an operator covers with a find-char motion."""
    target = get_find_char_target(books, current, motion, target_char, count)
    if target is None:
        return None
    return _inclusive(current, target)