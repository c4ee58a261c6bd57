"""Default keybindings for the vi normal and insert modes."""

from __future__ import annotations

from reedkeys.events import EditCommand, EditKind, KeyCode, KeyModifiers
from reedkeys.keybindings import (
    Keybindings,
    add_common_control_bindings,
    add_common_edit_bindings,
    add_common_navigation_bindings,
    add_common_selection_bindings,
    edit_bind,
)


def default_vi_normal_keybindings() -> Keybindings:
    """The default keybindings of vi normal mode."""
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    add_common_selection_bindings(kb)
    # Backspace only moves the cursor in vi normal mode, as in vi itself.
    kb.add_binding(
        KeyModifiers.NONE,
        KeyCode.BACKSPACE,
        edit_bind(EditCommand(EditKind.MOVE_LEFT, select=False)),
    )
    kb.add_binding(
        KeyModifiers.NONE,
        KeyCode.DELETE,
        edit_bind(EditCommand.simple(EditKind.DELETE)),
    )
    return kb


def default_vi_insert_keybindings() -> Keybindings:
    """The default keybindings of vi insert mode."""
    kb = Keybindings()
    add_common_control_bindings(kb)
    add_common_navigation_bindings(kb)
    add_common_edit_bindings(kb)
    add_common_selection_bindings(kb)
    return kb