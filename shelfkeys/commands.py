"""Parsing of ':' command-line input into command actions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from itertools import islice

_SUGGESTION_LIMIT = 10

COMMANDS: tuple[str, ...] = (
    "q",
    "quit",
    "qa",
    "q!",
    "w",
    "write",
    "wq",
    "add",
    "open",
    "tags",
    "help",
    "search",
    "refresh",
    "sort title",
    "sort year",
    "sort year_asc",
    "sort rating",
    "sort frecency",
    "sort updated",
    "lib",
    "library",
    "tag",
    "marks",
    "reg",
    "registers",
    "delmarks",
    "doctor",
    "macros",
    "copen",
    "cclose",
    "cnext",
    "cprev",
    "cn",
    "cp",
    "undolist",
    "earlier",
    "later",
)


class CommandKind(enum.Enum):
    """The kind of action a command line asks for."""

    QUIT = enum.auto()
    WRITE = enum.auto()
    WRITE_QUIT = enum.auto()
    ADD = enum.auto()
    OPEN = enum.auto()
    TAGS = enum.auto()
    HELP = enum.auto()
    SEARCH = enum.auto()
    GLOBAL = enum.auto()
    SUBSTITUTE = enum.auto()
    REFRESH = enum.auto()
    UNDO_LIST = enum.auto()
    EARLIER = enum.auto()
    LATER = enum.auto()
    QUICKFIX_OPEN = enum.auto()
    QUICKFIX_CLOSE = enum.auto()
    QUICKFIX_DO = enum.auto()
    QUICKFIX_NEXT = enum.auto()
    QUICKFIX_PREV = enum.auto()
    SORT = enum.auto()
    LIBRARY = enum.auto()
    FILTER_TAG = enum.auto()
    MARKS = enum.auto()
    REGISTERS = enum.auto()
    DELETE_MARKS = enum.auto()
    DOCTOR = enum.auto()
    MACROS = enum.auto()
    UNKNOWN = enum.auto()


@dataclass(frozen=True)
class CommandAction:
    """A parsed command.

    ``argument`` carries the single string payload (search query, sort field,
    library, tag, time span, marks, quickfix command or unknown text).
    ``pattern``/``command`` describe ``:g``; ``pattern``/``replacement``/
    ``is_global`` describe ``:s``; ``register`` is the register for ``:reg``.
    """

    kind: CommandKind
    argument: str = ""
    pattern: str = ""
    replacement: str = ""
    command: str = ""
    is_global: bool = False
    register: str | None = None


def get_command_suggestions(prefix: str) -> list[str]:
    """Return up to ten known commands starting with ``prefix``."""
    prefix = prefix.strip()
    matches = (cmd for cmd in COMMANDS if cmd.startswith(prefix))
    return list(islice(matches, _SUGGESTION_LIMIT))


def _parse_pattern_command(cmd_str: str) -> CommandAction | None:
    if cmd_str.startswith(("g/", "v/")):
        pieces = cmd_str.split("/", 2)
        if len(pieces) >= 3:
            return CommandAction(
                CommandKind.GLOBAL, pattern=pieces[1], command=pieces[2]
            )

    if cmd_str.startswith(("%s/", "s/")):
        pieces = cmd_str.split("/")
        if len(pieces) >= 3:
            flags = pieces[3] if len(pieces) > 3 else ""
            return CommandAction(
                CommandKind.SUBSTITUTE,
                pattern=pieces[1],
                replacement=pieces[2],
                is_global="g" in flags,
            )
    return None


def parse_command(cmd: str) -> CommandAction:
    """Parse a raw command-line string into a :class:`CommandAction`."""
    parts = cmd.split()
    if not parts:
        return CommandAction(CommandKind.UNKNOWN)

    match parts:
        case ["q" | "quit" | "qa" | "q!"]:
            return CommandAction(CommandKind.QUIT)
        case ["w" | "write"]:
            return CommandAction(CommandKind.WRITE)
        case ["wq"]:
            return CommandAction(CommandKind.WRITE_QUIT)
        case ["add"]:
            return CommandAction(CommandKind.ADD)
        case ["open"]:
            return CommandAction(CommandKind.OPEN)
        case ["tags"]:
            return CommandAction(CommandKind.TAGS)
        case ["help"]:
            return CommandAction(CommandKind.HELP)
        case ["search" | "find", *rest]:
            return CommandAction(CommandKind.SEARCH, " ".join(rest))
        case ["refresh"]:
            return CommandAction(CommandKind.REFRESH)
        case ["undolist"]:
            return CommandAction(CommandKind.UNDO_LIST)
        case ["earlier", span]:
            return CommandAction(CommandKind.EARLIER, span)
        case ["later", span]:
            return CommandAction(CommandKind.LATER, span)
        case ["copen"]:
            return CommandAction(CommandKind.QUICKFIX_OPEN)
        case ["cclose"]:
            return CommandAction(CommandKind.QUICKFIX_CLOSE)
        case ["cnext" | "cn"]:
            return CommandAction(CommandKind.QUICKFIX_NEXT)
        case ["cprev" | "cp"]:
            return CommandAction(CommandKind.QUICKFIX_PREV)
        case ["cdo", *rest]:
            return CommandAction(CommandKind.QUICKFIX_DO, " ".join(rest))
        case ["sort", field, *_]:
            return CommandAction(CommandKind.SORT, field)
        case ["lib" | "library", name, *_]:
            return CommandAction(CommandKind.LIBRARY, name)
        case ["tag", name, *_]:
            return CommandAction(CommandKind.FILTER_TAG, name)
        case ["marks"]:
            return CommandAction(CommandKind.MARKS)
        case ["reg" | "registers"]:
            return CommandAction(CommandKind.REGISTERS)
        case ["reg" | "registers", reg]:
            return CommandAction(CommandKind.REGISTERS, register=reg[0])
        case ["delmarks", marks]:
            return CommandAction(CommandKind.DELETE_MARKS, marks)
        case ["doctor"]:
            return CommandAction(CommandKind.DOCTOR)
        case ["macros"]:
            return CommandAction(CommandKind.MACROS)
        case ["tabnew", *_]:
            return CommandAction(CommandKind.UNKNOWN, "tabnew (tabs not implemented)")
        case ["bnext" | "bn"]:
            return CommandAction(CommandKind.UNKNOWN, "bnext (buffers not implemented)")
        case ["bprev" | "bp"]:
            return CommandAction(CommandKind.UNKNOWN, "bprev (buffers not implemented)")

    action = _parse_pattern_command(" ".join(parts))
    if action is not None:
        return action
    return CommandAction(CommandKind.UNKNOWN, cmd)