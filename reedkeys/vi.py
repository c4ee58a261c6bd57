"""Vi-style edit mode."""

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
    PromptViMode,
    ReedlineEvent,
    ResizeEvent,
)
from reedkeys.keybindings import Keybindings
from reedkeys.vi_keybindings import (
    default_vi_insert_keybindings,
    default_vi_normal_keybindings,
)
from reedkeys.vi_motion import ViCharSearch, ViMode
from reedkeys.vi_parser import parse

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


def _esc_and_repaint() -> ReedlineEvent:
    return ReedlineEvent.multiple(
        [ReedlineEvent(EventKind.ESC), ReedlineEvent(EventKind.REPAINT)]
    )


class Vi(EditMode):
    """Parses input events like a vi-style editor."""

    def __init__(
        self,
        insert_keybindings: Optional[Keybindings] = None,
        normal_keybindings: Optional[Keybindings] = None,
        *,
        mode: ViMode = ViMode.INSERT,
    ) -> None:
        self.insert_keybindings = (
            insert_keybindings
            if insert_keybindings is not None
            else default_vi_insert_keybindings()
        )
        self.normal_keybindings = (
            normal_keybindings
            if normal_keybindings is not None
            else default_vi_normal_keybindings()
        )
        self.mode = mode
        self.cache: list[str] = []
        self.previous: Optional[ReedlineEvent] = None
        # The last f, F, t or T, for ; and ,
        self.last_char_search: Optional[ViCharSearch] = None

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
        none = ReedlineEvent(EventKind.NONE)
        in_command_mode = self.mode in (ViMode.NORMAL, ViMode.VISUAL)

        if (
            self.mode is ViMode.NORMAL
            and modifiers == KeyModifiers.NONE
            and code == KeyCode.char("v")
        ):
            self.cache.clear()
            self.mode = ViMode.VISUAL
            return _esc_and_repaint()

        if code.character is not None and in_command_mode:
            return self._parse_command_char(code.character, modifiers)

        if code.character is not None:
            return self._parse_insert_char(code.character, modifiers)

        if modifiers == KeyModifiers.NONE and code == KeyCode.ESC:
            self.cache.clear()
            self.mode = ViMode.NORMAL
            return _esc_and_repaint()

        if modifiers == KeyModifiers.NONE and code == KeyCode.ENTER:
            self.mode = ViMode.INSERT
            return ReedlineEvent(EventKind.ENTER)

        keybindings = self.normal_keybindings if in_command_mode else self.insert_keybindings
        found = keybindings.find_binding(modifiers, code)
        return found if found is not None else none

    def _parse_command_char(self, c: str, modifiers: KeyModifiers) -> ReedlineEvent:
        none = ReedlineEvent(EventKind.NONE)
        c = _ascii_lower(c)
        found = self.normal_keybindings.find_binding(modifiers, KeyCode.char(c))
        if found is not None:
            return found
        if modifiers not in (KeyModifiers.NONE, KeyModifiers.SHIFT):
            return none

        self.cache.append(_ascii_upper(c) if modifiers == KeyModifiers.SHIFT else c)
        sequence = parse(self.cache)
        if not sequence.is_valid():
            self.cache.clear()
            return none
        if not sequence.is_complete(self.mode):
            return none

        new_mode = sequence.changes_mode()
        if new_mode is not None:
            self.mode = new_mode
        result = sequence.to_reedline_event(self)
        self.cache.clear()
        return result

    def _parse_insert_char(self, c: str, modifiers: KeyModifiers) -> ReedlineEvent:
        # Combined modifiers such as Ctrl+Alt come from AltGr on many layouts.
        if modifiers != KeyModifiers.NONE:
            c = _ascii_lower(c)
        found = self.insert_keybindings.find_binding(modifiers, KeyCode.char(c))
        if found is not None:
            return found
        if modifiers in _INSERTING_MODIFIERS:
            if modifiers == KeyModifiers.SHIFT:
                c = _ascii_upper(c)
            return ReedlineEvent.edit([EditCommand(EditKind.INSERT_CHAR, char=c)])
        return ReedlineEvent(EventKind.NONE)

    def edit_mode(self) -> PromptEditMode:
        if self.mode is ViMode.INSERT:
            return PromptEditMode("vi", PromptViMode.INSERT)
        return PromptEditMode("vi", PromptViMode.NORMAL)