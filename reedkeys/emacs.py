"""Emacs-style edit mode and its default keybindings."""

from __future__ import annotations

from typing import Optional

from reedkeys.events import (
    EditCommand,
    EditKind,
    EditMode,
    EventKind,
    FocusEvent,
    InputEvent,
    KeyCode,
    KeyEvent,
    KeyModifiers,
    MouseEvent,
    PasteEvent,
    PromptEditMode,
    ReedlineEvent,
    ResizeEvent,
)
from reedkeys.keybindings import (
    Keybindings,
    add_common_control_bindings,
    add_common_edit_bindings,
    add_common_navigation_bindings,
    add_common_selection_bindings,
    edit_bind,
)

_INSERTING_MODIFIERS = (
    KeyModifiers.NONE,
    KeyModifiers.SHIFT,
    KeyModifiers.CONTROL | KeyModifiers.ALT,
    KeyModifiers.CONTROL | KeyModifiers.ALT | KeyModifiers.SHIFT,
)


def _ascii_lower(c: str) -> str:
    return c.lower() if c.isascii() else c


def _ascii_upper(c: str) -> str:
    return c.upper() if c.isascii() else c


def default_emacs_keybindings() -> Keybindings:
    """The default emacs keybindings."""
    ctrl, alt, none = KeyModifiers.CONTROL, KeyModifiers.ALT, KeyModifiers.NONE
    ev = ReedlineEvent

    def simple(kind: EditKind) -> ReedlineEvent:
        return edit_bind(EditCommand.simple(kind))

    word_left = edit_bind(EditCommand(EditKind.MOVE_WORD_LEFT, select=False))
    word_right = ev.until_found(
        [
            ev(EventKind.HISTORY_HINT_WORD_COMPLETE),
            edit_bind(EditCommand(EditKind.MOVE_WORD_RIGHT, select=False)),
        ]
    )

    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    add_common_edit_bindings(kb)
    add_common_selection_bindings(kb)

    # In vi, Enter also changes the mode, so it is not a common binding.
    kb.add_binding(none, KeyCode.ENTER, ev(EventKind.ENTER))

    kb.add_binding(
        ctrl,
        KeyCode.char("b"),
        ev.until_found([ev(EventKind.MENU_LEFT), ev(EventKind.LEFT)]),
    )
    kb.add_binding(
        ctrl,
        KeyCode.char("f"),
        ev.until_found(
            [
                ev(EventKind.HISTORY_HINT_COMPLETE),
                ev(EventKind.MENU_RIGHT),
                ev(EventKind.RIGHT),
            ]
        ),
    )
    kb.add_binding(ctrl, KeyCode.char("g"), simple(EditKind.REDO))
    kb.add_binding(ctrl, KeyCode.char("z"), simple(EditKind.UNDO))
    kb.add_binding(ctrl, KeyCode.char("y"), simple(EditKind.PASTE_CUT_BUFFER_BEFORE))
    kb.add_binding(ctrl, KeyCode.char("w"), simple(EditKind.CUT_WORD_LEFT))
    kb.add_binding(ctrl, KeyCode.char("k"), simple(EditKind.CUT_TO_END))
    kb.add_binding(ctrl, KeyCode.char("u"), simple(EditKind.CUT_FROM_START))
    kb.add_binding(alt, KeyCode.char("d"), simple(EditKind.CUT_WORD_RIGHT))
    kb.add_binding(ctrl, KeyCode.char("t"), simple(EditKind.SWAP_GRAPHEMES))

    kb.add_binding(alt, KeyCode.LEFT, word_left)
    kb.add_binding(alt, KeyCode.RIGHT, word_right)
    kb.add_binding(alt, KeyCode.char("b"), word_left)
    kb.add_binding(alt, KeyCode.char("f"), word_right)
    kb.add_binding(alt, KeyCode.DELETE, simple(EditKind.DELETE_WORD))
    kb.add_binding(alt, KeyCode.BACKSPACE, simple(EditKind.BACKSPACE_WORD))
    kb.add_binding(alt, KeyCode.char("m"), simple(EditKind.BACKSPACE_WORD))
    kb.add_binding(alt, KeyCode.char("u"), simple(EditKind.UPPERCASE_WORD))
    kb.add_binding(alt, KeyCode.char("l"), simple(EditKind.LOWERCASE_WORD))
    kb.add_binding(alt, KeyCode.char("c"), simple(EditKind.CAPITALIZE_CHAR))
    return kb


class Emacs(EditMode):
    """Parses input events like an emacs-style editor."""

    def __init__(self, keybindings: Optional[Keybindings] = None) -> None:
        self.keybindings = (
            keybindings if keybindings is not None else default_emacs_keybindings()
        )

    def parse_event(self, event: InputEvent) -> ReedlineEvent:
        match event:
            case KeyEvent(code=code, modifiers=modifiers):
                return self._parse_key(code, modifiers)
            case MouseEvent():
                return ReedlineEvent(EventKind.MOUSE)
            case ResizeEvent(width=width, height=height):
                return ReedlineEvent.resize(width, height)
            case FocusEvent():
                return ReedlineEvent(EventKind.NONE)
            case PasteEvent(text=body):
                text = body.replace("\r\n", "\n").replace("\r", "\n")
                return ReedlineEvent.edit([EditCommand(EditKind.INSERT_STRING, text=text)])
        raise TypeError(f"not an input event: {event!r}")

    def _parse_key(self, code: KeyCode, modifiers: KeyModifiers) -> ReedlineEvent:
        if code.character is None:
            found = self.keybindings.find_binding(modifiers, code)
            return found if found is not None else ReedlineEvent(EventKind.NONE)

        # Combined modifiers such as Ctrl+Alt come from AltGr on many layouts.
        c = code.character
        if modifiers != KeyModifiers.NONE:
            c = _ascii_lower(c)
        found = self.keybindings.find_binding(modifiers, KeyCode.char(c))
        if found is not None:
            return found
        if modifiers in _INSERTING_MODIFIERS:
            if modifiers == KeyModifiers.SHIFT:
                c = _ascii_upper(c)
            return ReedlineEvent.edit([EditCommand(EditKind.INSERT_CHAR, char=c)])
        return ReedlineEvent(EventKind.NONE)

    def edit_mode(self) -> PromptEditMode:
        return PromptEditMode("emacs")