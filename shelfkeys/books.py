"""Summary view of a book as shown in the list."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class BookView:
    """A book as displayed in the book list."""

    id: str
    title: str
    authors: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    year: int | None = None
    rating: int | None = None
    read_status: str = "unread"
    format: str | None = None
    frecency_score: float = 0.0
    has_file: bool = False

    def search_text(self) -> str:
        """Return title, authors and tags joined into one searchable string."""
        return f"{self.title} {' '.join(self.authors)} {' '.join(self.tags)}"