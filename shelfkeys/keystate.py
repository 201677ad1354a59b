"""Editing modes, operators and the modal key state of the book list."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from shelfkeys.macro_recorder import MacroRecorder


class Mode(enum.Enum):
    """The modal state the key handler is in."""

    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"
    VISUAL_LINE = "visual_line"
    VISUAL_BLOCK = "visual_block"
    PENDING = "pending"
    COMMAND = "command"
    SEARCH = "search"


_VISUAL_MODES = frozenset({Mode.VISUAL, Mode.VISUAL_LINE, Mode.VISUAL_BLOCK})


class Operator(enum.Enum):
    """Operators that act on a range of books."""

    DELETE = "delete"
    YANK = "yank"
    CHANGE = "change"
    MOVE = "move"
    PUT = "put"
    ADD_TAG = "add_tag"
    REMOVE_TAG = "remove_tag"
    NORMALIZE = "normalize"
    FILTER = "filter"

    def key_char(self) -> str | None:
        """Return the key that starts this operator, or None if it has none.

        Pressing that key a second time applies the operator linewise.
        """
        return _OPERATOR_KEYS.get(self)


_OPERATOR_KEYS = {
    Operator.DELETE: "d",
    Operator.YANK: "y",
    Operator.CHANGE: "c",
    Operator.ADD_TAG: ">",
    Operator.REMOVE_TAG: "<",
}


@dataclass
class KeyState:
    """Modal key-handling state: mode, pending prefixes, count and macros."""

    mode: Mode = Mode.NORMAL
    pending_key: str | None = None
    pending_operator: Operator | None = None
    pending_register_select: bool = False
    vim_register: str | None = None
    vim_count: int = 0
    has_explicit_count: bool = False
    macro_recorder: MacroRecorder = field(default_factory=MacroRecorder)

    def is_visual(self) -> bool:
        """Return True in any of the visual modes."""
        return self.mode in _VISUAL_MODES