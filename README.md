# reedkeys

reedkeys turns raw terminal input events into the events a line editor acts
on. It does this with Emacs-style keybindings or with vi-style keybindings,
which cover normal, insert and visual mode.

You pass it input events: `KeyEvent`, `MouseEvent`, `ResizeEvent`,
`FocusEvent` and `PasteEvent`, all from `reedkeys.events`. It returns a
`ReedlineEvent`. Each `ReedlineEvent` has an `EventKind`, for example
`EDIT`, `ENTER`, `CTRL_C`, `UP`, `MULTIPLE` or `UNTIL_FOUND`. Edit events
carry a tuple of `EditCommand` values, and each of those has an `EditKind`.

## Installation

```
pip install reedkeys
```

The package has no runtime dependencies. To run the tests, install the
`test` extra, which adds pytest.

## Modules

- `reedkeys.events` holds the input event types, `KeyCode`, `KeyModifiers`
  (a flag enum), `EditKind`/`EditCommand`, `EventKind`/`ReedlineEvent`, and
  `PromptEditMode`, `PromptViMode`, `CursorStyle` and `CursorConfig`. It also
  defines the abstract base class `EditMode`, with its two methods
  `parse_event` and `edit_mode`.
- `reedkeys.keybindings` holds `KeyCombination` and `Keybindings`, plus the
  common binding sets listed under "Keybindings" below.
- `reedkeys.emacs` holds `Emacs` and `default_emacs_keybindings()`.
- `reedkeys.vi` holds `Vi`.
- `reedkeys.vi_keybindings` holds `default_vi_normal_keybindings()` and
  `default_vi_insert_keybindings()`.
- `reedkeys.vi_parser`, `reedkeys.vi_command` and `reedkeys.vi_motion` parse
  vi normal-mode key sequences.

## Emacs mode

```python
from reedkeys.emacs import Emacs
from reedkeys.events import KeyCode, KeyEvent, KeyModifiers

emacs = Emacs()

emacs.parse_event(KeyEvent(KeyCode.char("l"), KeyModifiers.CONTROL))
# ReedlineEvent(kind=EventKind.CLEAR_SCREEN, ...)

emacs.parse_event(KeyEvent(KeyCode.char("l"), KeyModifiers.SHIFT))
# an EDIT event holding EditCommand(EditKind.INSERT_CHAR, char="L")
```

A character key is handled in the following steps:

1. When any modifier is held, the character is lowercased if it is ASCII.
2. The key is looked up in the keybindings, and a binding wins if one exists.
3. An unbound character inserts itself when the modifiers are none, Shift,
   Ctrl+Alt or Ctrl+Alt+Shift. With Shift, an ASCII character is inserted in
   upper case.
4. Any other unbound combination gives an `EventKind.NONE` event.

Other input events are handled as follows:

- A paste becomes an `INSERT_STRING` edit, with `\r\n` and `\r` changed to `\n`.
- A resize becomes a `RESIZE` event with `size=(width, height)`.
- A mouse event becomes `MOUSE`.
- A focus change becomes `NONE`.

`edit_mode()` returns `PromptEditMode("emacs")`.

## Keybindings

```python
from reedkeys.emacs import Emacs, default_emacs_keybindings
from reedkeys.events import EventKind, KeyCode, KeyModifiers, ReedlineEvent

kb = default_emacs_keybindings()
kb.add_binding(
    KeyModifiers.CONTROL,
    KeyCode.char("l"),
    ReedlineEvent(EventKind.HISTORY_HINT_COMPLETE),
)
emacs = Emacs(kb)
```

`Keybindings` has these methods:

- `add_binding` replaces any earlier binding for the same key combination.
  It raises `ValueError` for an `UNTIL_FOUND` event that holds no events.
- `find_binding` returns the bound event, or `None`.
- `remove_binding` returns the event that was bound, or `None`.
- `get_keybindings` returns a read-only view of all bindings.
- `Keybindings.empty()` returns a table with nothing bound.

To build your own tables, combine `edit_bind` with the common sets:

- `add_common_control_bindings`: Esc, Ctrl-C, Ctrl-D, Ctrl-L, Ctrl-R, Ctrl-O
- `add_common_navigation_bindings`: arrow keys, Home/End and their Ctrl
  variants, Ctrl-A, Ctrl-E, Ctrl-P, Ctrl-N
- `add_common_edit_bindings`: Backspace, Delete and their word-wise variants,
  Ctrl-H, Ctrl-W
- `add_common_selection_bindings`: Shift-moves that extend the selection, and
  Ctrl-Shift-A to select all

## Vi mode

```python
from reedkeys.events import KeyCode, KeyEvent, KeyModifiers
from reedkeys.vi import Vi

vi = Vi()  # starts in insert mode
vi.parse_event(KeyEvent(KeyCode.ESC))        # MULTIPLE [ESC, REPAINT]; now normal mode
vi.parse_event(KeyEvent(KeyCode.char("d")))  # NONE: waiting for a motion
vi.parse_event(KeyEvent(KeyCode.char("w")))
# MULTIPLE [EDIT [CUT_WORD_RIGHT_TO_NEXT]]
```

`Vi(insert_keybindings=None, normal_keybindings=None, *, mode=ViMode.INSERT)`
uses the default vi tables when no keybindings are given.

In normal mode, typed characters are collected until they form a complete
sequence of the shape `[multiplier] command [count] motion`. A character
that makes the sequence invalid clears what has been collected. The
multiplier and the count multiply each other.

The following keys have special meanings:

- In normal mode, `v` switches to visual mode. In visual mode, motions
  extend the selection.
- `Esc` returns to normal mode from any mode.
- `Enter` returns to insert mode and gives `ENTER`.

The vi parser also remembers earlier input:

- Character searches (`f`, `F`, `t`, `T`) are remembered. After one, `;`
  repeats it and `,` repeats it in the other direction.
- `.` repeats the last command that produced an event.

`edit_mode()` returns `PromptEditMode("vi", PromptViMode.INSERT)` in insert
mode. In normal and visual mode it returns
`PromptEditMode("vi", PromptViMode.NORMAL)`.

You can also run the parsing step on its own:

```python
from reedkeys.vi_parser import parse

seq = parse("2dw")
seq.multiplier          # 2
seq.command.kind        # CommandKind.DELETE
seq.motion.value.kind   # MotionKind.NEXT_WORD
seq.is_valid()          # True
```

## Cursor shapes

`CursorConfig(vi_insert=..., vi_normal=..., emacs=...)` stores an optional
`CursorStyle` for each mode. Each `CursorStyle` value is the escape sequence
that selects that shape. The package stores these settings but never writes
them to a terminal.

## What this package does not do

reedkeys only translates events. It has no line editor of its own, so the
following are left to the program that uses it:

- reading input from a terminal or switching the terminal to raw mode
- keeping a line buffer, or carrying out `EditCommand`s and undo
- history, completion menus and hints
- painting a prompt