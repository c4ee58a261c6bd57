from reedkeys.events import (
    EditCommand,
    EditKind,
    EventKind,
    KeyCode,
    KeyModifiers,
    ReedlineEvent,
)
from reedkeys.vi_keybindings import (
    default_vi_insert_keybindings,
    default_vi_normal_keybindings,
)


def test_normal_backspace_moves_left():
    kb = default_vi_normal_keybindings()
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.BACKSPACE) == ReedlineEvent.edit(
        [EditCommand(EditKind.MOVE_LEFT, select=False)]
    )


def test_normal_delete_deletes():
    kb = default_vi_normal_keybindings()
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.DELETE) == ReedlineEvent.edit(
        [EditCommand.simple(EditKind.DELETE)]
    )


def test_insert_backspace_deletes_backwards():
    kb = default_vi_insert_keybindings()
    assert kb.find_binding(KeyModifiers.NONE, KeyCode.BACKSPACE) == ReedlineEvent.edit(
        [EditCommand.simple(EditKind.BACKSPACE)]
    )


def test_normal_mode_has_no_common_edit_bindings():
    kb = default_vi_normal_keybindings()
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("h")) is None
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.BACKSPACE) is None


def test_insert_mode_has_common_edit_bindings():
    kb = default_vi_insert_keybindings()
    assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("w")) == ReedlineEvent.edit(
        [EditCommand.simple(EditKind.BACKSPACE_WORD)]
    )


def test_both_modes_share_control_bindings():
    for kb in (default_vi_normal_keybindings(), default_vi_insert_keybindings()):
        assert kb.find_binding(KeyModifiers.NONE, KeyCode.ESC) == ReedlineEvent(
            EventKind.ESC
        )
        assert kb.find_binding(KeyModifiers.CONTROL, KeyCode.char("c")) == ReedlineEvent(
            EventKind.CTRL_C
        )


def test_both_modes_share_selection_bindings():
    for kb in (default_vi_normal_keybindings(), default_vi_insert_keybindings()):
        assert kb.find_binding(KeyModifiers.SHIFT, KeyCode.LEFT) == ReedlineEvent.edit(
            [EditCommand(EditKind.MOVE_LEFT, select=True)]
        )


def test_enter_is_not_bound():
    for kb in (default_vi_normal_keybindings(), default_vi_insert_keybindings()):
        assert kb.find_binding(KeyModifiers.NONE, KeyCode.ENTER) is None


def test_each_call_returns_independent_bindings():
    first = default_vi_normal_keybindings()
    first.remove_binding(KeyModifiers.NONE, KeyCode.DELETE)
    second = default_vi_normal_keybindings()
    assert second.find_binding(KeyModifiers.NONE, KeyCode.DELETE) is not None
    assert first.find_binding(KeyModifiers.NONE, KeyCode.DELETE) is None