"""Key combinations bound to editor events, and the common binding sets."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

from reedkeys.events import (
    EditCommand,
    EditKind,
    EventKind,
    KeyCode,
    KeyModifiers,
    ReedlineEvent,
)


@dataclass(frozen=True)
class KeyCombination:
    """A key together with the modifiers held down."""

    modifier: KeyModifiers
    key_code: KeyCode


@dataclass
class Keybindings:
    """Maps key combinations to editor events."""

    bindings: dict[KeyCombination, ReedlineEvent] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Keybindings:
        """A set of keybindings with nothing bound."""
        return cls()

    def add_binding(
        self, modifier: KeyModifiers, key_code: KeyCode, command: ReedlineEvent
    ) -> None:
        """Bind a key combination, replacing any earlier binding.

        Raises ValueError for an until-found event with no events in it.
        """
        if command.kind == EventKind.UNTIL_FOUND and not command.events:
            raise ValueError(
                "UntilFound should contain a series of potential events to handle"
            )
        self.bindings[KeyCombination(modifier, key_code)] = command

    def find_binding(
        self, modifier: KeyModifiers, key_code: KeyCode
    ) -> Optional[ReedlineEvent]:
        """The event bound to the combination, or None."""
        return self.bindings.get(KeyCombination(modifier, key_code))

    def remove_binding(
        self, modifier: KeyModifiers, key_code: KeyCode
    ) -> Optional[ReedlineEvent]:
        """Unbind the combination and return what it was bound to, if anything."""
        return self.bindings.pop(KeyCombination(modifier, key_code), None)

    def get_keybindings(self) -> Mapping[KeyCombination, ReedlineEvent]:
        """A read-only view of all bindings."""
        return MappingProxyType(self.bindings)


def edit_bind(command: EditCommand) -> ReedlineEvent:
    """An event running the single edit command."""
    return ReedlineEvent.edit([command])


def _ev(kind: EventKind) -> ReedlineEvent:
    return ReedlineEvent(kind)


def _move(kind: EditKind, select: bool) -> ReedlineEvent:
    return edit_bind(EditCommand(kind, select=select))


def _simple(kind: EditKind) -> ReedlineEvent:
    return edit_bind(EditCommand.simple(kind))


def add_common_control_bindings(kb: Keybindings) -> None:
    """Esc, Ctrl-C, Ctrl-D, Ctrl-L, Ctrl-R and Ctrl-O."""
    ctrl = KeyModifiers.CONTROL
    kb.add_binding(KeyModifiers.NONE, KeyCode.ESC, _ev(EventKind.ESC))
    kb.add_binding(ctrl, KeyCode.char("c"), _ev(EventKind.CTRL_C))
    kb.add_binding(ctrl, KeyCode.char("d"), _ev(EventKind.CTRL_D))
    kb.add_binding(ctrl, KeyCode.char("l"), _ev(EventKind.CLEAR_SCREEN))
    kb.add_binding(ctrl, KeyCode.char("r"), _ev(EventKind.SEARCH_HISTORY))
    kb.add_binding(ctrl, KeyCode.char("o"), _ev(EventKind.OPEN_EDITOR))


def add_common_navigation_bindings(kb: Keybindings) -> None:
    """Arrow keys, Home/End and their Ctrl variants, plus Ctrl-P/Ctrl-N."""
    none, ctrl = KeyModifiers.NONE, KeyModifiers.CONTROL
    up = ReedlineEvent.until_found([_ev(EventKind.MENU_UP), _ev(EventKind.UP)])
    down = ReedlineEvent.until_found([_ev(EventKind.MENU_DOWN), _ev(EventKind.DOWN)])
    to_line_end = ReedlineEvent.until_found(
        [_ev(EventKind.HISTORY_HINT_COMPLETE), _move(EditKind.MOVE_TO_LINE_END, False)]
    )

    kb.add_binding(none, KeyCode.UP, up)
    kb.add_binding(none, KeyCode.DOWN, down)
    kb.add_binding(
        none,
        KeyCode.LEFT,
        ReedlineEvent.until_found([_ev(EventKind.MENU_LEFT), _ev(EventKind.LEFT)]),
    )
    kb.add_binding(
        none,
        KeyCode.RIGHT,
        ReedlineEvent.until_found(
            [
                _ev(EventKind.HISTORY_HINT_COMPLETE),
                _ev(EventKind.MENU_RIGHT),
                _ev(EventKind.RIGHT),
            ]
        ),
    )

    kb.add_binding(ctrl, KeyCode.LEFT, _move(EditKind.MOVE_WORD_LEFT, False))
    kb.add_binding(
        ctrl,
        KeyCode.RIGHT,
        ReedlineEvent.until_found(
            [
                _ev(EventKind.HISTORY_HINT_WORD_COMPLETE),
                _move(EditKind.MOVE_WORD_RIGHT, False),
            ]
        ),
    )

    kb.add_binding(none, KeyCode.HOME, _move(EditKind.MOVE_TO_LINE_START, False))
    kb.add_binding(ctrl, KeyCode.char("a"), _move(EditKind.MOVE_TO_LINE_START, False))
    kb.add_binding(none, KeyCode.END, to_line_end)
    kb.add_binding(ctrl, KeyCode.char("e"), to_line_end)

    kb.add_binding(ctrl, KeyCode.HOME, _move(EditKind.MOVE_TO_START, False))
    kb.add_binding(ctrl, KeyCode.END, _move(EditKind.MOVE_TO_END, False))

    kb.add_binding(ctrl, KeyCode.char("p"), up)
    kb.add_binding(ctrl, KeyCode.char("n"), down)


def add_common_edit_bindings(kb: Keybindings) -> None:
    """Delete, Backspace and their word-wise variants."""
    none, ctrl = KeyModifiers.NONE, KeyModifiers.CONTROL
    kb.add_binding(none, KeyCode.BACKSPACE, _simple(EditKind.BACKSPACE))
    kb.add_binding(none, KeyCode.DELETE, _simple(EditKind.DELETE))
    kb.add_binding(ctrl, KeyCode.BACKSPACE, _simple(EditKind.BACKSPACE_WORD))
    kb.add_binding(ctrl, KeyCode.DELETE, _simple(EditKind.DELETE_WORD))
    # These must not touch the cut buffer.
    kb.add_binding(ctrl, KeyCode.char("h"), _simple(EditKind.BACKSPACE))
    kb.add_binding(ctrl, KeyCode.char("w"), _simple(EditKind.BACKSPACE_WORD))


def add_common_selection_bindings(kb: Keybindings) -> None:
    """Shift-moves that extend the selection, and Ctrl-Shift-A to select all."""
    shift = KeyModifiers.SHIFT
    shift_ctrl = KeyModifiers.SHIFT | KeyModifiers.CONTROL
    kb.add_binding(shift, KeyCode.LEFT, _move(EditKind.MOVE_LEFT, True))
    kb.add_binding(shift, KeyCode.RIGHT, _move(EditKind.MOVE_RIGHT, True))
    kb.add_binding(shift_ctrl, KeyCode.LEFT, _move(EditKind.MOVE_WORD_LEFT, True))
    kb.add_binding(shift_ctrl, KeyCode.RIGHT, _move(EditKind.MOVE_WORD_RIGHT, True))
    kb.add_binding(shift, KeyCode.END, _move(EditKind.MOVE_TO_LINE_END, True))
    kb.add_binding(shift_ctrl, KeyCode.END, _move(EditKind.MOVE_TO_END, True))
    kb.add_binding(shift, KeyCode.HOME, _move(EditKind.MOVE_TO_LINE_START, True))
    kb.add_binding(shift_ctrl, KeyCode.HOME, _move(EditKind.MOVE_TO_START, True))
    kb.add_binding(shift_ctrl, KeyCode.char("a"), _simple(EditKind.SELECT_ALL))