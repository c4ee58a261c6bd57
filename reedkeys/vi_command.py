"""Vi commands: parsing them from typed characters and turning them into edits."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from typing import Any, Optional

from reedkeys.events import EditCommand, EditKind, EventKind, ReedlineEvent
from reedkeys.vi_motion import Motion, MotionKind, ReedlineOption, ViCharSearch


class CommandKind(enum.Enum):
    """The commands vi understands."""

    INCOMPLETE = "Incomplete"
    DELETE = "Delete"
    DELETE_CHAR = "DeleteChar"
    REPLACE_CHAR = "ReplaceChar"
    SUBSTITUTE_CHAR_WITH_INSERT = "SubstituteCharWithInsert"
    PASTE_AFTER = "PasteAfter"
    PASTE_BEFORE = "PasteBefore"
    ENTER_VI_APPEND = "EnterViAppend"
    ENTER_VI_INSERT = "EnterViInsert"
    UNDO = "Undo"
    CHANGE_TO_LINE_END = "ChangeToLineEnd"
    DELETE_TO_END = "DeleteToEnd"
    APPEND_TO_END = "AppendToEnd"
    PREPEND_TO_START = "PrependToStart"
    REWRITE_CURRENT_LINE = "RewriteCurrentLine"
    CHANGE = "Change"
    HISTORY_SEARCH = "HistorySearch"
    SWITCHCASE = "Switchcase"
    REPEAT_LAST_ACTION = "RepeatLastAction"


_COMMAND_CHARS = {
    "d": CommandKind.DELETE,
    "p": CommandKind.PASTE_AFTER,
    "P": CommandKind.PASTE_BEFORE,
    "i": CommandKind.ENTER_VI_INSERT,
    "a": CommandKind.ENTER_VI_APPEND,
    "u": CommandKind.UNDO,
    "c": CommandKind.CHANGE,
    "x": CommandKind.DELETE_CHAR,
    "s": CommandKind.SUBSTITUTE_CHAR_WITH_INSERT,
    "?": CommandKind.HISTORY_SEARCH,
    "C": CommandKind.CHANGE_TO_LINE_END,
    "D": CommandKind.DELETE_TO_END,
    "I": CommandKind.PREPEND_TO_START,
    "A": CommandKind.APPEND_TO_END,
    "S": CommandKind.REWRITE_CURRENT_LINE,
    "~": CommandKind.SWITCHCASE,
    ".": CommandKind.REPEAT_LAST_ACTION,
}

_SINGLE_EDITS = {
    CommandKind.PASTE_AFTER: EditKind.PASTE_CUT_BUFFER_AFTER,
    CommandKind.PASTE_BEFORE: EditKind.PASTE_CUT_BUFFER_BEFORE,
    CommandKind.UNDO: EditKind.UNDO,
    CommandKind.CHANGE_TO_LINE_END: EditKind.CLEAR_TO_LINE_END,
    CommandKind.DELETE_TO_END: EditKind.CUT_TO_LINE_END,
    CommandKind.REWRITE_CURRENT_LINE: EditKind.CUT_CURRENT_LINE,
    CommandKind.DELETE_CHAR: EditKind.CUT_CHAR,
    CommandKind.SUBSTITUTE_CHAR_WITH_INSERT: EditKind.CUT_CHAR,
    CommandKind.SWITCHCASE: EditKind.SWITCHCASE_CHAR,
    # With a motion still pending, the command acts on the visual selection.
    CommandKind.DELETE: EditKind.CUT_SELECTION,
    CommandKind.CHANGE: EditKind.CUT_SELECTION,
}

_UNSELECTED_MOVES = {
    CommandKind.ENTER_VI_APPEND: EditKind.MOVE_RIGHT,
    CommandKind.APPEND_TO_END: EditKind.MOVE_TO_LINE_END,
    CommandKind.PREPEND_TO_START: EditKind.MOVE_TO_LINE_START,
}

_SHARED_CUTS = {
    MotionKind.END: EditKind.CUT_TO_LINE_END,
    MotionKind.NEXT_WORD_END: EditKind.CUT_WORD_RIGHT,
    MotionKind.NEXT_BIG_WORD_END: EditKind.CUT_BIG_WORD_RIGHT,
    MotionKind.PREVIOUS_WORD: EditKind.CUT_WORD_LEFT,
    MotionKind.PREVIOUS_BIG_WORD: EditKind.CUT_BIG_WORD_LEFT,
    MotionKind.START: EditKind.CUT_FROM_LINE_START,
    MotionKind.LEFT: EditKind.BACKSPACE,
    MotionKind.RIGHT: EditKind.DELETE,
}

_DELETE_CUTS = {
    **_SHARED_CUTS,
    MotionKind.LINE: EditKind.CUT_CURRENT_LINE,
    MotionKind.NEXT_WORD: EditKind.CUT_WORD_RIGHT_TO_NEXT,
    MotionKind.NEXT_BIG_WORD: EditKind.CUT_BIG_WORD_RIGHT_TO_NEXT,
}

_CHANGE_CUTS = {
    **_SHARED_CUTS,
    MotionKind.NEXT_WORD: EditKind.CUT_WORD_RIGHT,
    MotionKind.NEXT_BIG_WORD: EditKind.CUT_BIG_WORD_RIGHT,
}


def _edit(command: EditCommand) -> ReedlineOption:
    return ReedlineOption(edit=command)


@dataclass(frozen=True)
class Command:
    """A vi command; ``ReplaceChar`` carries its replacement character."""

    kind: CommandKind
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.kind is CommandKind.REPLACE_CHAR) != (self.char is not None):
            raise ValueError("a character goes with the replace command only")

    @classmethod
    def replace_char(cls, c: str) -> Command:
        """The command replacing the character under the cursor with ``c``."""
        return cls(CommandKind.REPLACE_CHAR, c)

    def whole_line_char(self) -> Optional[str]:
        """The character that, repeated, applies this command to the whole line."""
        if self.kind is CommandKind.DELETE:
            return "d"
        if self.kind is CommandKind.CHANGE:
            return "c"
        return None

    def requires_motion(self) -> bool:
        """Whether the command needs a motion to act on outside visual mode."""
        return self.kind in (CommandKind.DELETE, CommandKind.CHANGE)

    def to_reedline(self, vi_state: Any) -> list[ReedlineOption]:
        """The options performing this command without a motion."""
        kind = self.kind
        if kind is CommandKind.ENTER_VI_INSERT:
            return [ReedlineOption(event=ReedlineEvent(EventKind.REPAINT))]
        if kind is CommandKind.HISTORY_SEARCH:
            return [ReedlineOption(event=ReedlineEvent(EventKind.SEARCH_HISTORY))]
        if kind in _UNSELECTED_MOVES:
            return [_edit(EditCommand(_UNSELECTED_MOVES[kind], select=False))]
        if kind in _SINGLE_EDITS:
            return [_edit(EditCommand.simple(_SINGLE_EDITS[kind]))]
        if kind is CommandKind.REPLACE_CHAR:
            return [_edit(EditCommand(EditKind.REPLACE_CHAR, char=self.char))]
        if kind is CommandKind.INCOMPLETE:
            return [ReedlineOption()]
        # Repeat the last action, if there was one.
        previous: Optional[ReedlineEvent] = vi_state.previous
        return [] if previous is None else [ReedlineOption(event=previous)]

    def to_reedline_with_motion(
        self, motion: Motion, vi_state: Any
    ) -> Optional[list[ReedlineOption]]:
        """The options performing this command over ``motion``, or None.

        Character searches are remembered on ``vi_state`` for ``;`` and ``,``.
        """
        if self.kind is CommandKind.DELETE:
            return self._cut_over(motion, vi_state, _DELETE_CUTS)
        if self.kind is CommandKind.CHANGE:
            if motion.kind is MotionKind.LINE:
                options: Optional[list[ReedlineOption]] = [
                    _edit(EditCommand(EditKind.MOVE_TO_LINE_START, select=False)),
                    _edit(EditCommand.simple(EditKind.CUT_TO_LINE_END)),
                ]
            else:
                options = self._cut_over(motion, vi_state, _CHANGE_CUTS)
            if options is None:
                return None
            # Repaint so that the switch to insert mode shows.
            return [*options, ReedlineOption(event=ReedlineEvent(EventKind.REPAINT))]
        return None

    @staticmethod
    def _cut_over(
        motion: Motion, vi_state: Any, cuts: dict[MotionKind, EditKind]
    ) -> Optional[list[ReedlineOption]]:
        if motion.kind in cuts:
            return [_edit(EditCommand.simple(cuts[motion.kind]))]
        search = motion.char_search
        if search is not None:
            vi_state.last_char_search = search
            return [_edit(search.to_cut())]
        if motion.kind in (MotionKind.REPLAY_CHAR_SEARCH, MotionKind.REVERSE_CHAR_SEARCH):
            last: Optional[ViCharSearch] = vi_state.last_char_search
            if last is None:
                return None
            if motion.kind is MotionKind.REVERSE_CHAR_SEARCH:
                last = last.reverse()
            return [_edit(last.to_cut())]
        # Up and down have no cut of their own.
        return None


def parse_command(chars: deque[str]) -> Optional[Command]:
    """Parse a command from the front of ``chars``, consuming what it uses."""
    if not chars:
        return None
    head = chars[0]
    if head == "r":
        chars.popleft()
        if not chars:
            return Command(CommandKind.INCOMPLETE)
        return Command.replace_char(chars.popleft())
    kind = _COMMAND_CHARS.get(head)
    if kind is None:
        return None
    chars.popleft()
    return Command(kind)