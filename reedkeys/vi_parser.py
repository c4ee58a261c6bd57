"""Parsing of typed vi sequences: multiplier, command, count and motion."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from reedkeys.events import EventKind, ReedlineEvent
from reedkeys.vi_command import Command, CommandKind, parse_command
from reedkeys.vi_motion import (
    Motion,
    ParseResult,
    ParseStatus,
    ReedlineOption,
    ViMode,
    parse_motion,
)

if TYPE_CHECKING:
    from reedkeys.vi import Vi

_DIGITS = "0123456789"

_ENTERS_INSERT_WITHOUT_MOTION = frozenset(
    {
        CommandKind.ENTER_VI_INSERT,
        CommandKind.ENTER_VI_APPEND,
        CommandKind.CHANGE_TO_LINE_END,
        CommandKind.APPEND_TO_END,
        CommandKind.PREPEND_TO_START,
        CommandKind.REWRITE_CURRENT_LINE,
        CommandKind.SUBSTITUTE_CHAR_WITH_INSERT,
        CommandKind.HISTORY_SEARCH,
    }
)


@dataclass(frozen=True)
class ParsedViSequence:
    """A vi key sequence split into its parts."""

    multiplier: Optional[int]
    command: Optional[Command]
    count: Optional[int]
    motion: ParseResult[Motion]

    def is_valid(self) -> bool:
        """Whether the sequence can still become a meaningful one."""
        return not self.motion.is_invalid()

    def is_complete(self, mode: ViMode) -> bool:
        """Whether the sequence can be run in ``mode`` (normal or visual)."""
        if mode not in (ViMode.NORMAL, ViMode.VISUAL):
            raise ValueError(f"vi sequences are only parsed in normal or visual mode, not {mode}")
        status = self.motion.status
        command = self.command
        if command is None:
            return status is ParseStatus.VALID
        if command.kind is CommandKind.INCOMPLETE:
            return False
        if status is ParseStatus.VALID:
            return True
        if status is ParseStatus.INCOMPLETE:
            return not command.requires_motion() or mode is ViMode.VISUAL
        return False

    def _total_multiplier(self) -> int:
        # Vim only considers the product of multiplier and count.
        return (self.multiplier or 1) * (self.count or 1)

    def _apply_multiplier(
        self, raw_options: Optional[list[ReedlineOption]]
    ) -> ReedlineEvent:
        none = ReedlineEvent(EventKind.NONE)
        if raw_options is None:
            return none
        events = [
            event
            for _ in range(self._total_multiplier())
            for option in raw_options
            if (event := option.into_reedline_event()) is not None
        ]
        if not events or none in events:
            return none
        return ReedlineEvent.multiple(events)

    def changes_mode(self) -> Optional[ViMode]:
        """The mode the editor switches to when this sequence runs, if any."""
        if self.command is None:
            return None
        kind = self.command.kind
        status = self.motion.status
        if status is ParseStatus.INCOMPLETE and kind in _ENTERS_INSERT_WITHOUT_MOTION:
            return ViMode.INSERT
        if status is ParseStatus.VALID and kind is CommandKind.CHANGE:
            return ViMode.INSERT
        if status is ParseStatus.INCOMPLETE and kind is CommandKind.DELETE:
            return ViMode.NORMAL
        return None

    def to_reedline_event(self, vi_state: Vi) -> ReedlineEvent:
        """The editor event for this sequence; remembers it for ``.``."""
        command = self.command
        status = self.motion.status
        motion = self.motion.value

        if command is not None and self.count is None and status is ParseStatus.INCOMPLETE:
            event = self._apply_multiplier(command.to_reedline(vi_state))
        elif command is not None and status is ParseStatus.VALID and motion is not None:
            event = self._apply_multiplier(
                command.to_reedline_with_motion(motion, vi_state)
            )
        elif command is None and status is ParseStatus.VALID and motion is not None:
            return self._apply_multiplier(motion.to_reedline(vi_state))
        else:
            return ReedlineEvent(EventKind.NONE)

        if event.kind is not EventKind.NONE:
            vi_state.previous = event
        return event


def _parse_number(chars: deque[str]) -> Optional[int]:
    if not chars or chars[0] == "0" or chars[0] not in _DIGITS:
        return None
    count = 0
    while chars and chars[0] in _DIGITS:
        count = count * 10 + int(chars.popleft())
    return count


def parse(chars: Iterable[str]) -> ParsedViSequence:
    """Parse a typed vi sequence given as its characters."""
    queue = deque(chars)
    multiplier = _parse_number(queue)
    command = parse_command(queue)
    count = _parse_number(queue)
    motion = parse_motion(
        queue, command.whole_line_char() if command is not None else None
    )
    return ParsedViSequence(multiplier, command, count, motion)