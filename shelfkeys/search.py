"""Repeatable '/' and '?' search over the book list (n / N)."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass

from shelfkeys.books import BookView


class SearchDirection(enum.Enum):
    """Direction of the last search."""

    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass(frozen=True)
class SearchHit:
    """A search match: the book's index and how it was found."""

    index: int
    query: str
    forward: bool
    total: int

    @property
    def status(self) -> str:
        """Status-line text such as ``/query [3/10]``."""
        prefix = "/" if self.forward else "?"
        return f"{prefix}{self.query} [{self.index + 1}/{self.total}]"


def _haystack(book: BookView) -> str:
    return f"{book.title} {' '.join(book.authors)}".lower()


def search_next(
    books: Sequence[BookView],
    current: int,
    query: str | None,
    direction: SearchDirection,
    reverse: bool,
) -> SearchHit | None:
    """Find the next book whose title or authors contain ``query``, wrapping.

    ``reverse`` flips ``direction`` (as ``N`` does). Returns None for an empty
    list. Raises ValueError without a query and LookupError when nothing matches.
    """
    if not query:
        raise ValueError("No previous search")
    total = len(books)
    if total == 0:
        return None

    needle = query.lower()
    forward = (direction is SearchDirection.FORWARD) != reverse
    step = 1 if forward else -1
    for offset in range(1, total + 1):
        idx = (current + step * offset) % total
        if needle in _haystack(books[idx]):
            return SearchHit(idx, query, forward, total)
    raise LookupError(f"Pattern not found: {query}")