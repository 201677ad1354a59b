"""Vim-style key handling for a book list: commands, motions, text objects, search, jumps, macros and hints."""

__version__ = "0.1.0"

__all__ = [
    "books",
    "commands",
    "easy_motion",
    "hints",
    "jump_list",
    "keystate",
    "macro_recorder",
    "motions",
    "search",
    "text_objects",
]