"""Vi motions: parsing them from typed characters and turning them into edits."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from reedkeys.events import EditCommand, EditKind, EventKind, ReedlineEvent

T = TypeVar("T")


class ViMode(enum.Enum):
    """The modes of the vi edit mode."""

    NORMAL = "normal"
    INSERT = "insert"
    VISUAL = "visual"


class ParseStatus(enum.Enum):
    """Whether a part of a vi sequence parsed, needs more input, or failed."""

    VALID = "valid"
    INCOMPLETE = "incomplete"
    INVALID = "invalid"


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """The outcome of parsing one part of a vi sequence."""

    status: ParseStatus
    value: Optional[T] = None

    @classmethod
    def valid(cls, value: T) -> ParseResult[T]:
        return cls(ParseStatus.VALID, value)

    @classmethod
    def incomplete(cls) -> ParseResult[Any]:
        return cls(ParseStatus.INCOMPLETE)

    @classmethod
    def invalid(cls) -> ParseResult[Any]:
        return cls(ParseStatus.INVALID)

    def is_invalid(self) -> bool:
        return self.status is ParseStatus.INVALID


@dataclass(frozen=True)
class ReedlineOption:
    """An event, an edit, or (with neither set) a marker for incomplete input."""

    event: Optional[ReedlineEvent] = None
    edit: Optional[EditCommand] = None

    def __post_init__(self) -> None:
        if self.event is not None and self.edit is not None:
            raise ValueError("an option holds an event or an edit, not both")

    @property
    def incomplete(self) -> bool:
        return self.event is None and self.edit is None

    def into_reedline_event(self) -> Optional[ReedlineEvent]:
        """The editor event this option stands for, or None if incomplete."""
        if self.event is not None:
            return self.event
        if self.edit is not None:
            return ReedlineEvent.edit([self.edit])
        return None


@dataclass(frozen=True)
class ViCharSearch:
    """A search to (``f``/``F``) or till (``t``/``T``) a character."""

    char: str
    right: bool
    till: bool = False

    def reverse(self) -> ViCharSearch:
        """The same search in the other direction, as ``,`` performs it."""
        return ViCharSearch(self.char, not self.right, self.till)

    def to_move(self, select_mode: bool) -> EditCommand:
        """The cursor move performing this search."""
        if self.right:
            kind = EditKind.MOVE_RIGHT_BEFORE if self.till else EditKind.MOVE_RIGHT_UNTIL
        else:
            kind = EditKind.MOVE_LEFT_BEFORE if self.till else EditKind.MOVE_LEFT_UNTIL
        return EditCommand(kind, select=select_mode, char=self.char)

    def to_cut(self) -> EditCommand:
        """The cut reaching as far as this search."""
        if self.right:
            kind = EditKind.CUT_RIGHT_BEFORE if self.till else EditKind.CUT_RIGHT_UNTIL
        else:
            kind = EditKind.CUT_LEFT_BEFORE if self.till else EditKind.CUT_LEFT_UNTIL
        return EditCommand(kind, char=self.char)


class MotionKind(enum.Enum):
    """The motions vi understands."""

    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    NEXT_WORD = "NextWord"
    NEXT_BIG_WORD = "NextBigWord"
    NEXT_WORD_END = "NextWordEnd"
    NEXT_BIG_WORD_END = "NextBigWordEnd"
    PREVIOUS_WORD = "PreviousWord"
    PREVIOUS_BIG_WORD = "PreviousBigWord"
    LINE = "Line"
    START = "Start"
    END = "End"
    RIGHT_UNTIL = "RightUntil"
    RIGHT_BEFORE = "RightBefore"
    LEFT_UNTIL = "LeftUntil"
    LEFT_BEFORE = "LeftBefore"
    REPLAY_CHAR_SEARCH = "ReplayCharSearch"
    REVERSE_CHAR_SEARCH = "ReverseCharSearch"


_CHAR_SEARCH_KINDS = {
    MotionKind.RIGHT_UNTIL: (True, False),
    MotionKind.RIGHT_BEFORE: (True, True),
    MotionKind.LEFT_UNTIL: (False, False),
    MotionKind.LEFT_BEFORE: (False, True),
}

_PLAIN_MOVES = {
    MotionKind.NEXT_WORD: EditKind.MOVE_WORD_RIGHT_START,
    MotionKind.NEXT_BIG_WORD: EditKind.MOVE_BIG_WORD_RIGHT_START,
    MotionKind.NEXT_WORD_END: EditKind.MOVE_WORD_RIGHT_END,
    MotionKind.NEXT_BIG_WORD_END: EditKind.MOVE_BIG_WORD_RIGHT_END,
    MotionKind.PREVIOUS_WORD: EditKind.MOVE_WORD_LEFT,
    MotionKind.PREVIOUS_BIG_WORD: EditKind.MOVE_BIG_WORD_LEFT,
    MotionKind.START: EditKind.MOVE_TO_LINE_START,
    MotionKind.END: EditKind.MOVE_TO_LINE_END,
}


@dataclass(frozen=True)
class Motion:
    """A vi motion; character searches carry their target character."""

    kind: MotionKind
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.kind in _CHAR_SEARCH_KINDS) != (self.char is not None):
            raise ValueError("a target character goes with character searches only")

    @property
    def char_search(self) -> Optional[ViCharSearch]:
        """The character search this motion performs, if it is one."""
        direction = _CHAR_SEARCH_KINDS.get(self.kind)
        if direction is None or self.char is None:
            return None
        right, till = direction
        return ViCharSearch(self.char, right, till)

    def to_reedline(self, vi_state: Any) -> list[ReedlineOption]:
        """The options performing this motion; remembers character searches."""
        select = vi_state.mode == ViMode.VISUAL
        kind = self.kind
        ev = ReedlineEvent

        if kind is MotionKind.LEFT:
            event = ev.until_found(
                [
                    ev(EventKind.MENU_LEFT),
                    ev.edit([EditCommand(EditKind.MOVE_LEFT, select=select)]),
                ]
            )
            return [ReedlineOption(event=event)]
        if kind is MotionKind.RIGHT:
            event = ev.until_found(
                [
                    ev(EventKind.HISTORY_HINT_COMPLETE),
                    ev(EventKind.MENU_RIGHT),
                    ev.edit([EditCommand(EditKind.MOVE_RIGHT, select=select)]),
                ]
            )
            return [ReedlineOption(event=event)]
        if kind is MotionKind.UP:
            event = ev.until_found([ev(EventKind.MENU_UP), ev(EventKind.UP)])
            return [ReedlineOption(event=event)]
        if kind is MotionKind.DOWN:
            event = ev.until_found([ev(EventKind.MENU_DOWN), ev(EventKind.DOWN)])
            return [ReedlineOption(event=event)]
        if kind in _PLAIN_MOVES:
            return [ReedlineOption(edit=EditCommand(_PLAIN_MOVES[kind], select=select))]
        if kind is MotionKind.LINE:
            # Only meaningful after a command such as dd or cc.
            return []
        search = self.char_search
        if search is not None:
            vi_state.last_char_search = search
            return [ReedlineOption(edit=search.to_move(select))]

        last: Optional[ViCharSearch] = vi_state.last_char_search
        if last is None:
            return []
        if kind is MotionKind.REVERSE_CHAR_SEARCH:
            last = last.reverse()
        return [ReedlineOption(edit=last.to_move(select))]


_SIMPLE_MOTIONS = {
    "h": MotionKind.LEFT,
    "l": MotionKind.RIGHT,
    "j": MotionKind.DOWN,
    "k": MotionKind.UP,
    "b": MotionKind.PREVIOUS_WORD,
    "B": MotionKind.PREVIOUS_BIG_WORD,
    "w": MotionKind.NEXT_WORD,
    "W": MotionKind.NEXT_BIG_WORD,
    "e": MotionKind.NEXT_WORD_END,
    "E": MotionKind.NEXT_BIG_WORD_END,
    "0": MotionKind.START,
    "^": MotionKind.START,
    "$": MotionKind.END,
    ";": MotionKind.REPLAY_CHAR_SEARCH,
    ",": MotionKind.REVERSE_CHAR_SEARCH,
}

_SEARCH_MOTIONS = {
    "f": MotionKind.RIGHT_UNTIL,
    "t": MotionKind.RIGHT_BEFORE,
    "F": MotionKind.LEFT_UNTIL,
    "T": MotionKind.LEFT_BEFORE,
}


def parse_motion(
    chars: deque[str], command_char: Optional[str] = None
) -> ParseResult[Motion]:
    """Parse a motion from the front of ``chars``, consuming what it uses.

    ``command_char`` is the character that, typed again after its command,
    means the whole line (``d`` for ``dd``).
    """
    if not chars:
        return ParseResult.incomplete()
    head = chars[0]
    if head in _SIMPLE_MOTIONS:
        chars.popleft()
        return ParseResult.valid(Motion(_SIMPLE_MOTIONS[head]))
    if head in _SEARCH_MOTIONS:
        chars.popleft()
        if not chars:
            return ParseResult.incomplete()
        return ParseResult.valid(Motion(_SEARCH_MOTIONS[head], chars.popleft()))
    if command_char is not None and head == command_char:
        chars.popleft()
        return ParseResult.valid(Motion(MotionKind.LINE))
    return ParseResult.invalid()