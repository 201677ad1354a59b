"""Jump list of previously visited positions (Ctrl+o / Ctrl+i)."""

from __future__ import annotations

from dataclasses import dataclass, field

_MAX_JUMPS = 100


@dataclass
class JumpLoc:
    """A remembered position: list index plus book id as a fallback."""

    index: int
    book_id: str


@dataclass
class JumpList:
    """History of jump positions with a cursor for moving back and forward."""

    jumps: list[JumpLoc] = field(default_factory=list)
    current: int = 0

    def push(self, index: int, book_id: str) -> None:
        """Record a jump, dropping forward history and keeping at most 100."""
        if self.current < len(self.jumps):
            del self.jumps[self.current + 1 :]

        loc = JumpLoc(index, book_id)
        if self.jumps and self.jumps[-1] == loc:
            return

        self.jumps.append(loc)
        if len(self.jumps) > _MAX_JUMPS:
            del self.jumps[0]
        self.current = len(self.jumps)

    def back(self) -> JumpLoc | None:
        """Step back one entry; return it, or None at the start."""
        if self.current == 0:
            return None
        self.current -= 1
        return self.jumps[self.current] if self.current < len(self.jumps) else None

    def forward(self) -> JumpLoc | None:
        """Step forward one entry; return it, or None at the end."""
        if self.current + 1 >= len(self.jumps):
            return None
        self.current += 1
        return self.jumps[self.current]