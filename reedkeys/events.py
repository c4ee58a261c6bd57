"""Input events, edit commands and the events an edit mode turns them into."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from typing import ClassVar, Iterable, Optional, Union


class KeyModifiers(enum.Flag):
    """Modifier keys held down while a key was pressed."""

    NONE = 0
    SHIFT = 1
    CONTROL = 2
    ALT = 4
    SUPER = 8
    HYPER = 16
    META = 32


@dataclass(frozen=True)
class KeyCode:
    """A key on the keyboard; printable keys carry their character."""

    name: str
    character: Optional[str] = None

    BACKSPACE: ClassVar[KeyCode]
    ENTER: ClassVar[KeyCode]
    LEFT: ClassVar[KeyCode]
    RIGHT: ClassVar[KeyCode]
    UP: ClassVar[KeyCode]
    DOWN: ClassVar[KeyCode]
    HOME: ClassVar[KeyCode]
    END: ClassVar[KeyCode]
    PAGE_UP: ClassVar[KeyCode]
    PAGE_DOWN: ClassVar[KeyCode]
    TAB: ClassVar[KeyCode]
    BACK_TAB: ClassVar[KeyCode]
    DELETE: ClassVar[KeyCode]
    INSERT: ClassVar[KeyCode]
    ESC: ClassVar[KeyCode]

    def __post_init__(self) -> None:
        if self.name == "Char":
            if self.character is None or len(self.character) != 1:
                raise ValueError("a character key needs exactly one character")
        elif self.character is not None:
            raise ValueError(f"key {self.name!r} does not carry a character")

    @classmethod
    def char(cls, c: str) -> KeyCode:
        """The key that types the single character ``c``."""
        return cls("Char", c)


for _name, _attr in [
    ("Backspace", "BACKSPACE"),
    ("Enter", "ENTER"),
    ("Left", "LEFT"),
    ("Right", "RIGHT"),
    ("Up", "UP"),
    ("Down", "DOWN"),
    ("Home", "HOME"),
    ("End", "END"),
    ("PageUp", "PAGE_UP"),
    ("PageDown", "PAGE_DOWN"),
    ("Tab", "TAB"),
    ("BackTab", "BACK_TAB"),
    ("Delete", "DELETE"),
    ("Insert", "INSERT"),
    ("Esc", "ESC"),
]:
    setattr(KeyCode, _attr, KeyCode(_name))


@dataclass(frozen=True)
class KeyEvent:
    """A key press."""

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE


@dataclass(frozen=True)
class MouseEvent:
    """Any mouse activity; its details are not interpreted."""

    column: int = 0
    row: int = 0


@dataclass(frozen=True)
class ResizeEvent:
    """The terminal changed size."""

    width: int
    height: int


@dataclass(frozen=True)
class FocusEvent:
    """The terminal gained or lost focus."""

    gained: bool


@dataclass(frozen=True)
class PasteEvent:
    """Text delivered by bracketed paste."""

    text: str


InputEvent = Union[KeyEvent, MouseEvent, ResizeEvent, FocusEvent, PasteEvent]


class EditKind(enum.Enum):
    """The kinds of edit that can be applied to the line buffer."""

    MOVE_TO_START = "MoveToStart"
    MOVE_TO_LINE_START = "MoveToLineStart"
    MOVE_TO_END = "MoveToEnd"
    MOVE_TO_LINE_END = "MoveToLineEnd"
    MOVE_LEFT = "MoveLeft"
    MOVE_RIGHT = "MoveRight"
    MOVE_WORD_LEFT = "MoveWordLeft"
    MOVE_BIG_WORD_LEFT = "MoveBigWordLeft"
    MOVE_WORD_RIGHT = "MoveWordRight"
    MOVE_WORD_RIGHT_START = "MoveWordRightStart"
    MOVE_BIG_WORD_RIGHT_START = "MoveBigWordRightStart"
    MOVE_WORD_RIGHT_END = "MoveWordRightEnd"
    MOVE_BIG_WORD_RIGHT_END = "MoveBigWordRightEnd"
    MOVE_TO_POSITION = "MoveToPosition"
    MOVE_RIGHT_UNTIL = "MoveRightUntil"
    MOVE_RIGHT_BEFORE = "MoveRightBefore"
    MOVE_LEFT_UNTIL = "MoveLeftUntil"
    MOVE_LEFT_BEFORE = "MoveLeftBefore"
    INSERT_CHAR = "InsertChar"
    INSERT_STRING = "InsertString"
    INSERT_NEWLINE = "InsertNewline"
    REPLACE_CHAR = "ReplaceChar"
    REPLACE_CHARS = "ReplaceChars"
    BACKSPACE = "Backspace"
    DELETE = "Delete"
    CUT_CHAR = "CutChar"
    BACKSPACE_WORD = "BackspaceWord"
    DELETE_WORD = "DeleteWord"
    CLEAR = "Clear"
    CLEAR_TO_LINE_END = "ClearToLineEnd"
    COMPLETE = "Complete"
    CUT_CURRENT_LINE = "CutCurrentLine"
    CUT_FROM_START = "CutFromStart"
    CUT_FROM_LINE_START = "CutFromLineStart"
    CUT_TO_END = "CutToEnd"
    CUT_TO_LINE_END = "CutToLineEnd"
    CUT_WORD_LEFT = "CutWordLeft"
    CUT_BIG_WORD_LEFT = "CutBigWordLeft"
    CUT_WORD_RIGHT = "CutWordRight"
    CUT_BIG_WORD_RIGHT = "CutBigWordRight"
    CUT_WORD_RIGHT_TO_NEXT = "CutWordRightToNext"
    CUT_BIG_WORD_RIGHT_TO_NEXT = "CutBigWordRightToNext"
    PASTE_CUT_BUFFER_BEFORE = "PasteCutBufferBefore"
    PASTE_CUT_BUFFER_AFTER = "PasteCutBufferAfter"
    UPPERCASE_WORD = "UppercaseWord"
    LOWERCASE_WORD = "LowercaseWord"
    CAPITALIZE_CHAR = "CapitalizeChar"
    SWITCHCASE_CHAR = "SwitchcaseChar"
    SWAP_WORDS = "SwapWords"
    SWAP_GRAPHEMES = "SwapGraphemes"
    UNDO = "Undo"
    REDO = "Redo"
    CUT_RIGHT_UNTIL = "CutRightUntil"
    CUT_RIGHT_BEFORE = "CutRightBefore"
    CUT_LEFT_UNTIL = "CutLeftUntil"
    CUT_LEFT_BEFORE = "CutLeftBefore"
    SELECT_ALL = "SelectAll"
    CUT_SELECTION = "CutSelection"
    COPY_SELECTION = "CopySelection"
    PASTE = "Paste"
    CUT_SELECTION_SYSTEM = "CutSelectionSystem"
    COPY_SELECTION_SYSTEM = "CopySelectionSystem"
    PASTE_SYSTEM = "PasteSystem"


@dataclass(frozen=True)
class EditCommand:
    """One edit; the optional fields carry the data some kinds need.

    ``select`` extends the selection for moves, ``char`` is the character for
    insertion, replacement and character searches, ``text`` the inserted
    string, and ``amount`` a position or a number of characters.
    """

    kind: EditKind
    select: bool = False
    char: Optional[str] = None
    text: Optional[str] = None
    amount: Optional[int] = None

    @classmethod
    def simple(cls, kind: EditKind) -> EditCommand:
        """An edit of ``kind`` that carries no data."""
        return cls(kind)


class EventKind(enum.Enum):
    """The kinds of event the line editor understands."""

    NONE = "None"
    HISTORY_HINT_COMPLETE = "HistoryHintComplete"
    HISTORY_HINT_WORD_COMPLETE = "HistoryHintWordComplete"
    CTRL_D = "CtrlD"
    CTRL_C = "CtrlC"
    CLEAR_SCREEN = "ClearScreen"
    CLEAR_SCROLLBACK = "ClearScrollback"
    ENTER = "Enter"
    SUBMIT = "Submit"
    SUBMIT_OR_NEWLINE = "SubmitOrNewline"
    ESC = "Esc"
    MOUSE = "Mouse"
    RESIZE = "Resize"
    EDIT = "Edit"
    REPAINT = "Repaint"
    PREVIOUS_HISTORY = "PreviousHistory"
    UP = "Up"
    DOWN = "Down"
    RIGHT = "Right"
    LEFT = "Left"
    NEXT_HISTORY = "NextHistory"
    SEARCH_HISTORY = "SearchHistory"
    MULTIPLE = "Multiple"
    UNTIL_FOUND = "UntilFound"
    MENU = "Menu"
    MENU_NEXT = "MenuNext"
    MENU_PREVIOUS = "MenuPrevious"
    MENU_UP = "MenuUp"
    MENU_DOWN = "MenuDown"
    MENU_LEFT = "MenuLeft"
    MENU_RIGHT = "MenuRight"
    MENU_PAGE_NEXT = "MenuPageNext"
    MENU_PAGE_PREVIOUS = "MenuPagePrevious"
    EXECUTE_HOST_COMMAND = "ExecuteHostCommand"
    OPEN_EDITOR = "OpenEditor"


@dataclass(frozen=True)
class ReedlineEvent:
    """An event for the line editor.

    ``commands`` belongs to edit events, ``events`` to multiple and
    until-found events, ``size`` to resizes and ``name`` to menus and
    host commands.
    """

    kind: EventKind
    commands: tuple[EditCommand, ...] = ()
    events: tuple[ReedlineEvent, ...] = ()
    size: Optional[tuple[int, int]] = None
    name: Optional[str] = None

    @classmethod
    def edit(cls, commands: Iterable[EditCommand]) -> ReedlineEvent:
        """An event running the given edit commands in order."""
        return cls(EventKind.EDIT, commands=tuple(commands))

    @classmethod
    def until_found(cls, events: Iterable[ReedlineEvent]) -> ReedlineEvent:
        """An event trying each event in turn until one applies."""
        return cls(EventKind.UNTIL_FOUND, events=tuple(events))

    @classmethod
    def multiple(cls, events: Iterable[ReedlineEvent]) -> ReedlineEvent:
        """An event running every given event in order."""
        return cls(EventKind.MULTIPLE, events=tuple(events))

    @classmethod
    def resize(cls, width: int, height: int) -> ReedlineEvent:
        """An event reporting a new terminal size."""
        return cls(EventKind.RESIZE, size=(width, height))


class PromptViMode(enum.Enum):
    """The two vi modes a prompt can show."""

    NORMAL = "normal"
    INSERT = "insert"


@dataclass(frozen=True)
class PromptEditMode:
    """Which edit mode the prompt indicator should show."""

    kind: str = "default"
    vi_mode: Optional[PromptViMode] = None
    custom_name: Optional[str] = None

    _KINDS: ClassVar[frozenset[str]] = frozenset({"default", "emacs", "vi", "custom"})

    def __post_init__(self) -> None:
        if self.kind not in self._KINDS:
            raise ValueError(f"unknown edit mode {self.kind!r}")
        if (self.kind == "vi") != (self.vi_mode is not None):
            raise ValueError("a vi mode goes with the vi edit mode and only with it")
        if (self.kind == "custom") != (self.custom_name is not None):
            raise ValueError("a custom name goes with the custom edit mode and only with it")


class CursorStyle(enum.Enum):
    """Cursor shapes, valued by the escape sequence that selects them."""

    DEFAULT_USER_SHAPE = "\x1b[0 q"
    BLINKING_BLOCK = "\x1b[1 q"
    STEADY_BLOCK = "\x1b[2 q"
    BLINKING_UNDERSCORE = "\x1b[3 q"
    STEADY_UNDERSCORE = "\x1b[4 q"
    BLINKING_BAR = "\x1b[5 q"
    STEADY_BAR = "\x1b[6 q"


@dataclass
class CursorConfig:
    """Cursor shape for each edit mode; ``None`` leaves the cursor alone."""

    vi_insert: Optional[CursorStyle] = None
    vi_normal: Optional[CursorStyle] = None
    emacs: Optional[CursorStyle] = None


class EditMode(abc.ABC):
    """Turns raw input events into events the line editor understands."""

    @abc.abstractmethod
    def parse_event(self, event: InputEvent) -> ReedlineEvent:
        """Translate one input event."""

    @abc.abstractmethod
    def edit_mode(self) -> PromptEditMode:
        """What the prompt indicator should show."""