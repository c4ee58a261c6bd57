import pytest

from reedkeys.events import EditCommand, EditKind, EventKind, ReedlineEvent
from reedkeys.vi import Vi
from reedkeys.vi_command import Command, CommandKind
from reedkeys.vi_motion import Motion, MotionKind, ParseResult, ViMode
from reedkeys.vi_parser import ParsedViSequence, parse


def ev(kind):
    return ReedlineEvent(kind)


def ed(kind, **kwargs):
    return ReedlineEvent.edit([EditCommand(kind, **kwargs)])


def mult(*events):
    return ReedlineEvent.multiple(events)


UP = ReedlineEvent.until_found([ev(EventKind.MENU_UP), ev(EventKind.UP)])
REPAINT = ev(EventKind.REPAINT)


def right(select):
    return ReedlineEvent.until_found(
        [
            ev(EventKind.HISTORY_HINT_COMPLETE),
            ev(EventKind.MENU_RIGHT),
            ed(EditKind.MOVE_RIGHT, select=select),
        ]
    )


def test_delete_without_motion():
    output = parse("d")
    assert output == ParsedViSequence(
        None, Command(CommandKind.DELETE), None, ParseResult.incomplete()
    )
    assert output.is_valid() is True
    assert output.is_complete(ViMode.NORMAL) is False
    assert output.is_complete(ViMode.VISUAL) is True


def test_delete_word():
    output = parse("dw")
    assert output == ParsedViSequence(
        None,
        Command(CommandKind.DELETE),
        None,
        ParseResult.valid(Motion(MotionKind.NEXT_WORD)),
    )
    assert output.is_valid() is True
    assert output.is_complete(ViMode.NORMAL) is True
    assert output.is_complete(ViMode.VISUAL) is True


def test_two_delete_without_motion():
    output = parse("2d")
    assert output == ParsedViSequence(
        2, Command(CommandKind.DELETE), None, ParseResult.incomplete()
    )
    assert output.is_valid() is True
    assert output.is_complete(ViMode.NORMAL) is False
    assert output.is_complete(ViMode.VISUAL) is True


def test_two_delete_word():
    output = parse("2dw")
    assert output == ParsedViSequence(
        2,
        Command(CommandKind.DELETE),
        None,
        ParseResult.valid(Motion(MotionKind.NEXT_WORD)),
    )
    assert output.is_complete(ViMode.NORMAL) is True
    assert output.is_complete(ViMode.VISUAL) is True


def test_two_delete_two_word():
    output = parse("2d2w")
    assert output == ParsedViSequence(
        2,
        Command(CommandKind.DELETE),
        2,
        ParseResult.valid(Motion(MotionKind.NEXT_WORD)),
    )
    assert output.is_valid() is True
    assert output.is_complete(ViMode.NORMAL) is True


def test_two_delete_twenty_word():
    output = parse("2d20w")
    assert output == ParsedViSequence(
        2,
        Command(CommandKind.DELETE),
        20,
        ParseResult.valid(Motion(MotionKind.NEXT_WORD)),
    )
    assert output.is_complete(ViMode.NORMAL) is True
    assert output.is_complete(ViMode.VISUAL) is True


def test_two_delete_two_lines():
    output = parse("2dd")
    assert output == ParsedViSequence(
        2,
        Command(CommandKind.DELETE),
        None,
        ParseResult.valid(Motion(MotionKind.LINE)),
    )
    assert output.is_complete(ViMode.NORMAL) is True
    assert output.is_complete(ViMode.VISUAL) is True


def test_find_action():
    output = parse("dtd")
    assert output == ParsedViSequence(
        None,
        Command(CommandKind.DELETE),
        None,
        ParseResult.valid(Motion(MotionKind.RIGHT_BEFORE, "d")),
    )
    assert output.is_valid() is True
    assert output.is_complete(ViMode.NORMAL) is True


def test_has_garbage():
    output = parse("2dm")
    assert output == ParsedViSequence(
        2, Command(CommandKind.DELETE), None, ParseResult.invalid()
    )
    assert output.is_valid() is False


def test_partial_action():
    output = parse("r")
    assert output == ParsedViSequence(
        None, Command(CommandKind.INCOMPLETE), None, ParseResult.incomplete()
    )
    assert output.is_valid() is True
    assert output.is_complete(ViMode.NORMAL) is False
    assert output.is_complete(ViMode.VISUAL) is False


def test_partial_motion():
    output = parse("f")
    assert output == ParsedViSequence(None, None, None, ParseResult.incomplete())
    assert output.is_valid() is True
    assert output.is_complete(ViMode.NORMAL) is False
    assert output.is_complete(ViMode.VISUAL) is False


def test_two_char_action_replace():
    output = parse("rk")
    assert output == ParsedViSequence(
        None, Command.replace_char("k"), None, ParseResult.incomplete()
    )
    assert output.is_valid() is True
    assert output.is_complete(ViMode.NORMAL) is True
    assert output.is_complete(ViMode.VISUAL) is True


def test_find_motion():
    output = parse("2ff")
    assert output == ParsedViSequence(
        2, None, None, ParseResult.valid(Motion(MotionKind.RIGHT_UNTIL, "f"))
    )
    assert output.is_complete(ViMode.NORMAL) is True
    assert output.is_complete(ViMode.VISUAL) is True


def test_two_up():
    output = parse("2k")
    assert output == ParsedViSequence(
        2, None, None, ParseResult.valid(Motion(MotionKind.UP))
    )
    assert output.is_complete(ViMode.NORMAL) is True
    assert output.is_complete(ViMode.VISUAL) is True


def test_is_complete_rejects_insert_mode():
    with pytest.raises(ValueError):
        parse("dw").is_complete(ViMode.INSERT)


@pytest.mark.parametrize(
    "keys, expected",
    [
        ("i", ViMode.INSERT),
        ("A", ViMode.INSERT),
        ("cw", ViMode.INSERT),
        ("d", ViMode.NORMAL),
        ("dw", None),
        ("w", None),
    ],
)
def test_changes_mode(keys, expected):
    assert parse(keys).changes_mode() == expected


MOVE_CASES = [
    ("2k", mult(UP, UP)),
    ("k", mult(UP)),
    ("w", mult(ed(EditKind.MOVE_WORD_RIGHT_START, select=False))),
    ("W", mult(ed(EditKind.MOVE_BIG_WORD_RIGHT_START, select=False))),
    ("2l", mult(right(False), right(False))),
    ("l", mult(right(False))),
    ("0", mult(ed(EditKind.MOVE_TO_LINE_START, select=False))),
    ("$", mult(ed(EditKind.MOVE_TO_LINE_END, select=False))),
    ("i", mult(REPAINT)),
    ("p", mult(ed(EditKind.PASTE_CUT_BUFFER_AFTER))),
    ("2p", mult(ed(EditKind.PASTE_CUT_BUFFER_AFTER), ed(EditKind.PASTE_CUT_BUFFER_AFTER))),
    ("u", mult(ed(EditKind.UNDO))),
    ("2u", mult(ed(EditKind.UNDO), ed(EditKind.UNDO))),
    ("dd", mult(ed(EditKind.CUT_CURRENT_LINE))),
    ("dw", mult(ed(EditKind.CUT_WORD_RIGHT_TO_NEXT))),
    ("dW", mult(ed(EditKind.CUT_BIG_WORD_RIGHT_TO_NEXT))),
    ("de", mult(ed(EditKind.CUT_WORD_RIGHT))),
    ("db", mult(ed(EditKind.CUT_WORD_LEFT))),
    ("dB", mult(ed(EditKind.CUT_BIG_WORD_LEFT))),
    (
        "cc",
        mult(
            ed(EditKind.MOVE_TO_LINE_START, select=False),
            ed(EditKind.CUT_TO_LINE_END),
            REPAINT,
        ),
    ),
    ("cw", mult(ed(EditKind.CUT_WORD_RIGHT), REPAINT)),
    ("cW", mult(ed(EditKind.CUT_BIG_WORD_RIGHT), REPAINT)),
    ("ce", mult(ed(EditKind.CUT_WORD_RIGHT), REPAINT)),
    ("cb", mult(ed(EditKind.CUT_WORD_LEFT), REPAINT)),
    ("cB", mult(ed(EditKind.CUT_BIG_WORD_LEFT), REPAINT)),
    ("dh", mult(ed(EditKind.BACKSPACE))),
    ("dl", mult(ed(EditKind.DELETE))),
    ("2dd", mult(ed(EditKind.CUT_CURRENT_LINE), ed(EditKind.CUT_CURRENT_LINE))),
    ("dE", mult(ed(EditKind.CUT_BIG_WORD_RIGHT))),
    ("d0", mult(ed(EditKind.CUT_FROM_LINE_START))),
    ("d^", mult(ed(EditKind.CUT_FROM_LINE_START))),
    ("d$", mult(ed(EditKind.CUT_TO_LINE_END))),
    ("dfa", mult(ed(EditKind.CUT_RIGHT_UNTIL, char="a"))),
    ("dta", mult(ed(EditKind.CUT_RIGHT_BEFORE, char="a"))),
    ("dFa", mult(ed(EditKind.CUT_LEFT_UNTIL, char="a"))),
    ("dTa", mult(ed(EditKind.CUT_LEFT_BEFORE, char="a"))),
    ("cE", mult(ed(EditKind.CUT_BIG_WORD_RIGHT), REPAINT)),
    ("c0", mult(ed(EditKind.CUT_FROM_LINE_START), REPAINT)),
    ("c^", mult(ed(EditKind.CUT_FROM_LINE_START), REPAINT)),
    ("c$", mult(ed(EditKind.CUT_TO_LINE_END), REPAINT)),
    ("cfa", mult(ed(EditKind.CUT_RIGHT_UNTIL, char="a"), REPAINT)),
    ("cta", mult(ed(EditKind.CUT_RIGHT_BEFORE, char="a"), REPAINT)),
    ("cFa", mult(ed(EditKind.CUT_LEFT_UNTIL, char="a"), REPAINT)),
    ("cTa", mult(ed(EditKind.CUT_LEFT_BEFORE, char="a"), REPAINT)),
]


@pytest.mark.parametrize("keys, expected", MOVE_CASES)
def test_reedline_move(keys, expected):
    vi = Vi()
    assert parse(keys).to_reedline_event(vi) == expected


MEMORY_CASES = [
    ("fa", ";", mult(ed(EditKind.MOVE_RIGHT_UNTIL, char="a", select=False))),
    ("fa", ",", mult(ed(EditKind.MOVE_LEFT_UNTIL, char="a", select=False))),
    ("Fa", ",", mult(ed(EditKind.MOVE_RIGHT_UNTIL, char="a", select=False))),
    ("Fa", ";", mult(ed(EditKind.MOVE_LEFT_UNTIL, char="a", select=False))),
    ("fa", "d;", mult(ed(EditKind.CUT_RIGHT_UNTIL, char="a"))),
    ("fa", "d,", mult(ed(EditKind.CUT_LEFT_UNTIL, char="a"))),
    ("Fa", "d,", mult(ed(EditKind.CUT_RIGHT_UNTIL, char="a"))),
    ("Fa", "d;", mult(ed(EditKind.CUT_LEFT_UNTIL, char="a"))),
    ("fa", "c;", mult(ed(EditKind.CUT_RIGHT_UNTIL, char="a"), REPAINT)),
    ("fa", "c,", mult(ed(EditKind.CUT_LEFT_UNTIL, char="a"), REPAINT)),
    ("Fa", "c,", mult(ed(EditKind.CUT_RIGHT_UNTIL, char="a"), REPAINT)),
    ("Fa", "c;", mult(ed(EditKind.CUT_LEFT_UNTIL, char="a"), REPAINT)),
]


@pytest.mark.parametrize("before, now, expected", MEMORY_CASES)
def test_reedline_memory_move(before, now, expected):
    vi = Vi()
    parse(before).to_reedline_event(vi)
    assert parse(now).to_reedline_event(vi) == expected


@pytest.mark.parametrize("synonym, original", [("cw", "ce"), ("cW", "cE")])
def test_reedline_move_synonym(synonym, original):
    vi = Vi()
    output = parse(synonym).to_reedline_event(vi)
    expected = parse(original).to_reedline_event(vi)
    assert output == expected


def test_replay_without_previous_search_is_none():
    assert parse(";").to_reedline_event(Vi()) == ev(EventKind.NONE)


def test_command_event_is_remembered_for_repeat():
    vi = Vi()
    event = parse("dw").to_reedline_event(vi)
    assert vi.previous == event


VISUAL_CASES = [
    ("2k", mult(UP, UP)),
    ("k", mult(UP)),
    ("w", mult(ed(EditKind.MOVE_WORD_RIGHT_START, select=True))),
    ("W", mult(ed(EditKind.MOVE_BIG_WORD_RIGHT_START, select=True))),
    ("2l", mult(right(True), right(True))),
    ("l", mult(right(True))),
    ("0", mult(ed(EditKind.MOVE_TO_LINE_START, select=True))),
    ("$", mult(ed(EditKind.MOVE_TO_LINE_END, select=True))),
    ("i", mult(REPAINT)),
    ("p", mult(ed(EditKind.PASTE_CUT_BUFFER_AFTER))),
    ("2p", mult(ed(EditKind.PASTE_CUT_BUFFER_AFTER), ed(EditKind.PASTE_CUT_BUFFER_AFTER))),
    ("u", mult(ed(EditKind.UNDO))),
    ("2u", mult(ed(EditKind.UNDO), ed(EditKind.UNDO))),
    ("d", mult(ed(EditKind.CUT_SELECTION))),
]


@pytest.mark.parametrize("keys, expected", VISUAL_CASES)
def test_reedline_move_in_visual_mode(keys, expected):
    vi = Vi(mode=ViMode.VISUAL)
    assert parse(keys).to_reedline_event(vi) == expected