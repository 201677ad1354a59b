# shelfkeys

Vim-style key handling for a list of books: the parsing, motions and
bookkeeping behind a modal, keyboard-driven library browser. Every piece
works on plain Python values (indices, lists of `BookView`, strings), so it
can be driven from any front end or tested on its own.

The package has no dependencies outside the standard library and supports
Python 3.10 and later. The `test` extra installs pytest for the test suite.

## Modules

### `shelfkeys.commands`

- `parse_command(cmd)` splits a `:` command line on whitespace and returns a
  frozen `CommandAction`. Its `kind` is a `CommandKind`; `argument` holds the
  single string payload (search query, sort field, library, tag, time span,
  marks, quickfix command, or the text of an unknown command).
  - `:g/pattern/command` and `:v/pattern/command` give `CommandKind.GLOBAL`
    with `pattern` and `command`.
  - `:s/foo/bar/g` and `:%s/foo/bar/` give `CommandKind.SUBSTITUTE` with
    `pattern`, `replacement` and `is_global` (true when the flags contain `g`).
  - `:reg a` gives `CommandKind.REGISTERS` with `register == "a"`; plain
    `:reg` leaves `register` as `None`.
  - Empty input and anything not recognised give `CommandKind.UNKNOWN`.
- `get_command_suggestions(prefix)` returns up to ten entries of `COMMANDS`
  that start with the stripped prefix, in table order.

### `shelfkeys.books`

`BookView` is a dataclass for one book in the list: `id`, `title`,
`authors`, `tags`, `year`, `rating`, `read_status`, `format`,
`frecency_score` and `has_file`. `search_text()` joins title, authors and
tags into one string.

### `shelfkeys.motions`

- `get_nav_target(current, total, motion, count)` gives the index that `j`,
  `k`, `g` (for `gg`), `G`, `0` or `$` moves to, clamped to the list, or
  `None` for any other motion. For `G` a count of 0 means "no explicit count"
  and goes to the last item; `[count]G` goes to line `count`.
- `get_motion_range(current, total, motion, count)` gives the inclusive list
  of indices the same motions cover when an operator is applied.
- `get_find_char_target(books, current, motion, target_char, count)` handles
  `f`/`t` (forward) and `F`/`T` (backward), matching the first letter of each
  title case-insensitively and taking the `count`-th match. `t` stops one
  item before the match and `T` one item after it.
- `get_find_char_range(...)` gives the inclusive range from the cursor to
  that target, or `None` if there is none.

### `shelfkeys.jump_list`

`JumpList` holds `JumpLoc(index, book_id)` entries. `push` drops any
forward history, skips a repeat of the newest entry and keeps at most 100;
`back` and `forward` move through the history and return the entry, or
`None` at either end.

### `shelfkeys.macro_recorder`

`MacroRecorder` records keys (any hashable code and modifiers) into named
registers: `start_recording`, `record_key`, `stop_recording`,
`is_recording`, `get_macro` and `list_macros`, which returns
`(register, key count)` pairs sorted by register. `last_played` is free for
a caller to remember the register used by `@@`.

### `shelfkeys.keystate`

`Mode` (normal, insert, visual, visual line, visual block, pending, command,
search), `Operator` (with `key_char()`, the key that starts it and that
applies it linewise when pressed twice) and `KeyState`, a dataclass holding
the mode, pending key, pending operator, register selection, count and a
`MacroRecorder`. `KeyState.is_visual()` is true in any visual mode.

### `shelfkeys.text_objects`

`get_text_object_range(books, current, obj, kind, libraries_of=None)`
returns the indices a text object covers, or `None`:

- `b`: the current book only;
- `l`: books sharing the current book's first library, looked up through the
  `libraries_of` callable (without it, `None`);
- `a`: books sharing the current book's first author;
- `t`: with `TextObjectKind.INNER`, books carrying all of the current book's
  tags; with `TextObjectKind.AROUND`, books carrying any of them;
- `f`: every book in the list;
- `y`: books of the same year.

### `shelfkeys.easy_motion`

Labels are the 52 letters `a`–`z` then `A`–`Z`. `labels_around`,
`labels_below` and `labels_above` pair labels with indices near the cursor
(above: nearest first); `targets_by_char(books, char)` labels books whose
title starts with `char`, ignoring case.

### `shelfkeys.search`

`search_next(books, current, query, direction, reverse)` looks for the next
book whose title or authors contain the query, case-insensitively, wrapping
around the list; `reverse` flips the `SearchDirection` as `N` does. It
returns a `SearchHit` (with a `status` such as `/query [3/10]`), `None` for
an empty list, and raises `ValueError` when there is no query and
`LookupError` when nothing matches.

### `shelfkeys.hints`

`get_hints(state)` returns the `KeyHint`s that fit a `KeyState`, checked in
this order: register selection, macro recording, pending operator (motions
and text objects, plus quick edits for change), visual modes, pending
prefix keys (`S`, `g`, `z`, `m`, `'`, `[`, `]`, Space, `f`/`F`/`t`/`T`, `Q`,
`@`), and finally the normal-mode hints.

## Example

```python
from shelfkeys.commands import parse_command, CommandKind
from shelfkeys.motions import get_nav_target, get_motion_range

action = parse_command("sort title")
assert action.kind is CommandKind.SORT
assert action.argument == "title"

# 10 books, cursor on the fourth: "5G" goes to index 4, "dG" covers 3..9
assert get_nav_target(3, 10, "G", 5) == 4
assert get_motion_range(3, 10, "G", 0) == [3, 4, 5, 6, 7, 8, 9]
```

```python
from shelfkeys.macro_recorder import MacroRecorder

rec = MacroRecorder()
rec.start_recording("a")
rec.record_key("j", frozenset())
rec.record_key("j", frozenset())
rec.stop_recording()
assert rec.list_macros() == [("a", 2)]
```

## What it does not do

shelfkeys decides what a key or command means; it does not carry it out.
There is no terminal screen, no event loop and no key dispatcher that feeds
keys through the modes. It does not run parsed commands, replay macros,
store book cards, keep registers or marks, or delete, yank or retag books:
a front end supplies the book list and acts on the indices, actions and hints
these functions return.