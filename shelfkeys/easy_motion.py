"""EasyMotion label assignment for jumping straight to a book."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from shelfkeys.books import BookView

LABELS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

Target = tuple[str, int]


def _label(indices: Iterable[int]) -> list[Target]:
    return list(zip(LABELS, indices))


def labels_around(current: int, total: int) -> list[Target]:
    """Label up to 26 books on each side of ``current``."""
    start = max(current - 26, 0)
    end = min(current + 26, total)
    return _label(range(start, end))


def labels_below(current: int, total: int) -> list[Target]:
    """Label books from ``current`` downwards."""
    end = min(current + len(LABELS), total)
    return _label(range(current, end))


def labels_above(current: int, total: int) -> list[Target]:
    """Label books above ``current``, nearest first."""
    start = max(current - len(LABELS), 0)
    return _label(reversed(range(start, current)))


def targets_by_char(books: Sequence[BookView], filter_char: str) -> list[Target]:
    """Label books whose title starts with ``filter_char``, ignoring case."""
    char = filter_char.lower()[:1] or filter_char
    return _label(i for i, book in enumerate(books) if book.title.lower().startswith(char))