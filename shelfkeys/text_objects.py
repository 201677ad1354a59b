"""Text objects that select groups of books (book, library, author, tag, ...)."""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence

from shelfkeys.books import BookView

LibrariesOf = Callable[[BookView], "Sequence[str] | None"]


class TextObjectKind(enum.Enum):
    """Inner (``i``) or around (``a``) variant of a text object."""

    INNER = "inner"
    AROUND = "around"


def _indices(books: Sequence[BookView], keep: Callable[[BookView], bool]) -> list[int] | None:
    found = [i for i, book in enumerate(books) if keep(book)]
    return found or None


def _library_range(
    books: Sequence[BookView], current_book: BookView, libraries_of: LibrariesOf | None
) -> list[int] | None:
    if libraries_of is None:
        return None
    libraries = libraries_of(current_book)
    if not libraries:
        return None
    target = libraries[0]

    def in_library(book: BookView) -> bool:
        libs = libraries_of(book)
        return libs is not None and target in libs

    return _indices(books, in_library)


def get_text_object_range(
    books: Sequence[BookView],
    current: int,
    obj: str,
    kind: TextObjectKind,
    libraries_of: LibrariesOf | None = None,
) -> list[int] | None:
    """Return the indices a text object covers, or None when it covers nothing.

    ``libraries_of`` maps a book to its libraries, or to None when the book's
    card cannot be loaded; it is only needed for the library object ``l``.
    """
    if not 0 <= current < len(books):
        return None
    current_book = books[current]

    match obj:
        case "b":
            return [current]
        case "l":
            return _library_range(books, current_book, libraries_of)
        case "a":
            if not current_book.authors:
                return None
            primary = current_book.authors[0]
            return _indices(books, lambda b: primary in b.authors)
        case "t":
            tags = current_book.tags
            if not tags:
                return None
            combine = all if kind is TextObjectKind.INNER else any
            return _indices(books, lambda b: combine(t in b.tags for t in tags))
        case "f":
            return list(range(len(books))) or None
        case "y":
            year = current_book.year
            return _indices(books, lambda b: b.year == year)
    return None