"""Context-sensitive key hints for the status bar."""

from __future__ import annotations

from dataclasses import dataclass

from shelfkeys.keystate import KeyState, Operator


@dataclass(frozen=True)
class KeyHint:
    """A key (or key pattern) and a short description of what it does."""

    key: str
    desc: str


def _hints(*pairs: tuple[str, str]) -> list[KeyHint]:
    return [KeyHint(key, desc) for key, desc in pairs]


_REGISTER_HINTS = (
    ("0-9", "numbered"),
    ("a-z", "named"),
    ("+", "sys clipboard"),
    ("*", "sys selection"),
    ("_", "black hole"),
)

_RECORDING_HINTS = (
    ("q", "stop recording"),
    ("", ""),
)

_MOTION_HINTS = (
    ("j", "down"),
    ("k", "up"),
    ("G", "bottom"),
    ("gg", "top"),
    ("0", "first"),
    ("$", "last"),
    ("f<c>", "find char"),
)

_CHANGE_HINTS = (
    ("a", "author"),
    ("t", "tags"),
    ("r", "rating"),
    ("s", "status"),
    ("y", "year"),
    ("n", "notes"),
)

_TEXT_OBJECT_HINTS = (
    ("ib", "inner book"),
    ("ab", "a book"),
    ("il", "inner library"),
    ("al", "a library"),
    ("it", "inner tag"),
    ("at", "a tag"),
    ("ia", "inner author"),
    ("aa", "a author"),
    ("iy", "inner year"),
    ("if", "inner folder"),
)

_VISUAL_HINTS = (
    ("y", "yank"),
    ("d", "delete"),
    ("x", "delete"),
    ("c", "change"),
    ("o", "swap anchor"),
    ("Space", "toggle"),
    ("C-a", "select all"),
    ("C-q", "quickfix"),
)

_FIND_CHAR_HINTS = (("<char>", "jump to char"),)

_PENDING_HINTS: dict[str, tuple[tuple[str, str], ...]] = {
    "S": (
        ("y", "year desc"),
        ("Y", "year asc"),
        ("t", "title asc"),
        ("r", "rating desc"),
        ("f", "frecency"),
        ("u", "updated (default)"),
    ),
    "g": (
        ("g", "top"),
        ("h", "home (all)"),
        ("l", "last jump"),
        ("p", "parent"),
        ("r", "root"),
        ("s", "cycle status"),
        ("t", "edit title"),
        ("f", "open file"),
        ("F", "goto folder"),
        ("I", "open in $EDITOR"),
        ("v", "reselect visual"),
        ("z", "center view"),
        ("*", "search author"),
        ("b", "buffers"),
        ("B", "prev buffer"),
    ),
    "z": (
        ("z", "center"),
        ("t", "top"),
        ("b", "bottom"),
        ("a", "toggle fold"),
        ("o", "open fold"),
        ("c", "close fold"),
        ("R", "open all"),
        ("M", "close all"),
    ),
    "m": (
        ("a-z", "set local mark"),
        ("A-Z", "set global mark"),
    ),
    "'": (
        ("a-z", "jump to mark"),
        ("'", "last position"),
        ("<", "visual start"),
        (">", "visual end"),
    ),
    "[": (("[", "prev group"),),
    "]": (("]", "next group"),),
    " ": (
        ("Space", "all labels"),
        ("j", "labels below"),
        ("k", "labels above"),
        ("/", "by first letter"),
    ),
    "f": _FIND_CHAR_HINTS,
    "F": _FIND_CHAR_HINTS,
    "t": _FIND_CHAR_HINTS,
    "T": _FIND_CHAR_HINTS,
    "Q": (("a-z", "register to record"),),
    "@": (
        ("a-z", "play macro"),
        ("@", "replay last"),
    ),
}

_NORMAL_HINTS = (
    ("j/k", "up/down"),
    ("h/l", "focus panel"),
    ("gg/G", "top/bottom"),
    ("d", "delete"),
    ("y", "yank"),
    ("c", "change"),
    ("v/V", "visual"),
    ("o/Enter", "open"),
    ("/", "search"),
    ("Z", "telescope"),
    (":", "command"),
    ("u", "undo"),
    ("S", "sort"),
    ("Space", "easymotion"),
    ("g", "g-commands"),
    ("z", "viewport"),
)


def get_hints(state: KeyState) -> list[KeyHint]:
    """Return the key hints that apply to the current key state."""
    if state.pending_register_select:
        return _hints(*_REGISTER_HINTS)

    if state.macro_recorder.is_recording():
        return _hints(*_RECORDING_HINTS)

    if state.pending_operator is not None:
        pairs = list(_MOTION_HINTS)
        if state.pending_operator is Operator.CHANGE:
            pairs = list(_CHANGE_HINTS) + pairs
        return _hints(*pairs, *_TEXT_OBJECT_HINTS)

    if state.is_visual():
        return _hints(*_VISUAL_HINTS)

    if state.pending_key is not None:
        pending = _PENDING_HINTS.get(state.pending_key)
        if pending is not None:
            return _hints(*pending)

    return _hints(*_NORMAL_HINTS)