"""Keyboard events: key codes, modifiers and the key event itself."""

from __future__ import annotations

import functools
from dataclasses import dataclass, replace
from enum import Enum, Flag
from typing import ClassVar, Union

__all__ = [
    "KeyModifiers",
    "KeyEventKind",
    "KeyEventState",
    "MediaKeyCode",
    "ModifierKeyCode",
    "KeyKind",
    "KeyCode",
    "KeyEvent",
]

_U8_MAX = 0xFF


class KeyModifiers(Flag):
    """Key modifiers held while an event occurred.

    ``SUPER``, ``HYPER`` and ``META`` are only reported once
    ``DISAMBIGUATE_ESCAPE_CODES`` keyboard enhancement has been enabled.
    """

    SHIFT = 0b0000_0001
    CONTROL = 0b0000_0010
    ALT = 0b0000_0100
    SUPER = 0b0000_1000
    HYPER = 0b0001_0000
    META = 0b0010_0000
    NONE = 0b0000_0000


class KeyEventKind(Enum):
    """Whether a key was pressed, auto-repeated or released."""

    PRESS = "Press"
    REPEAT = "Repeat"
    RELEASE = "Release"


class KeyEventState(Flag):
    """Extra keyboard state reported with a key event.

    Caps Lock and Num Lock share one bit, so ``NUM_LOCK`` is an alias of
    ``CAPS_LOCK``.
    """

    KEYPAD = 0b0000_0001
    CAPS_LOCK = 0b0000_1000
    NUM_LOCK = 0b0000_1000
    NONE = 0b0000_0000


class MediaKeyCode(Enum):
    """A media key."""

    PLAY = "Play"
    PAUSE = "Pause"
    PLAY_PAUSE = "PlayPause"
    REVERSE = "Reverse"
    STOP = "Stop"
    FAST_FORWARD = "FastForward"
    REWIND = "Rewind"
    TRACK_NEXT = "TrackNext"
    TRACK_PREVIOUS = "TrackPrevious"
    RECORD = "Record"
    LOWER_VOLUME = "LowerVolume"
    RAISE_VOLUME = "RaiseVolume"
    MUTE_VOLUME = "MuteVolume"


class ModifierKeyCode(Enum):
    """A modifier key pressed on its own."""

    LEFT_SHIFT = "LeftShift"
    LEFT_CONTROL = "LeftControl"
    LEFT_ALT = "LeftAlt"
    LEFT_SUPER = "LeftSuper"
    LEFT_HYPER = "LeftHyper"
    LEFT_META = "LeftMeta"
    RIGHT_SHIFT = "RightShift"
    RIGHT_CONTROL = "RightControl"
    RIGHT_ALT = "RightAlt"
    RIGHT_SUPER = "RightSuper"
    RIGHT_HYPER = "RightHyper"
    RIGHT_META = "RightMeta"
    ISO_LEVEL3_SHIFT = "IsoLevel3Shift"
    ISO_LEVEL5_SHIFT = "IsoLevel5Shift"


class KeyKind(Enum):
    """The kinds of key a :class:`KeyCode` can stand for, in canonical order."""

    BACKSPACE = "Backspace"
    ENTER = "Enter"
    LEFT = "Left"
    RIGHT = "Right"
    UP = "Up"
    DOWN = "Down"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    TAB = "Tab"
    BACK_TAB = "BackTab"
    DELETE = "Delete"
    INSERT = "Insert"
    F = "F"
    CHAR = "Char"
    NULL = "Null"
    ESC = "Esc"
    CAPS_LOCK = "CapsLock"
    SCROLL_LOCK = "ScrollLock"
    NUM_LOCK = "NumLock"
    PRINT_SCREEN = "PrintScreen"
    PAUSE = "Pause"
    MENU = "Menu"
    KEYPAD_BEGIN = "KeypadBegin"
    MEDIA = "Media"
    MODIFIER = "Modifier"


KeyValue = Union[str, int, MediaKeyCode, ModifierKeyCode, None]


def _position(member: Enum) -> int:
    return list(type(member)).index(member)


@functools.total_ordering
@dataclass(frozen=True)
class KeyCode:
    """A key; ``value`` carries the character, function number or sub-key."""

    kind: KeyKind
    value: KeyValue = None

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
    NULL: ClassVar[KeyCode]
    ESC: ClassVar[KeyCode]
    CAPS_LOCK: ClassVar[KeyCode]
    SCROLL_LOCK: ClassVar[KeyCode]
    NUM_LOCK: ClassVar[KeyCode]
    PRINT_SCREEN: ClassVar[KeyCode]
    PAUSE: ClassVar[KeyCode]
    MENU: ClassVar[KeyCode]
    KEYPAD_BEGIN: ClassVar[KeyCode]

    def __post_init__(self) -> None:
        if not isinstance(self.kind, KeyKind):
            raise TypeError(f"kind must be a KeyKind, got {type(self.kind).__name__}")
        kind, value = self.kind, self.value
        if kind is KeyKind.CHAR:
            if not isinstance(value, str) or len(value) != 1:
                raise ValueError(f"a Char key needs a single character, got {value!r}")
        elif kind is KeyKind.F:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"an F key needs an int number, got {type(value).__name__}")
            if not 0 <= value <= _U8_MAX:
                raise ValueError(f"F key number must be in 0..{_U8_MAX}, got {value}")
        elif kind is KeyKind.MEDIA:
            if not isinstance(value, MediaKeyCode):
                raise TypeError("a Media key needs a MediaKeyCode")
        elif kind is KeyKind.MODIFIER:
            if not isinstance(value, ModifierKeyCode):
                raise TypeError("a Modifier key needs a ModifierKeyCode")
        elif value is not None:
            raise ValueError(f"{kind.value} key takes no value, got {value!r}")

    @classmethod
    def char(cls, c: str) -> KeyCode:
        """The key for character ``c``."""
        return cls(KeyKind.CHAR, c)

    @classmethod
    def function(cls, number: int) -> KeyCode:
        """The function key F``number``."""
        return cls(KeyKind.F, number)

    @classmethod
    def media(cls, key: MediaKeyCode) -> KeyCode:
        """The given media key."""
        return cls(KeyKind.MEDIA, key)

    @classmethod
    def modifier(cls, key: ModifierKeyCode) -> KeyCode:
        """The given modifier key, pressed on its own."""
        return cls(KeyKind.MODIFIER, key)

    def _sort_key(self) -> tuple[int, object]:
        value = self.value
        if isinstance(value, Enum):
            inner: object = _position(value)
        elif value is None:
            inner = 0
        else:
            inner = value
        return (_position(self.kind), inner)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, KeyCode):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __repr__(self) -> str:
        value = self.value
        if value is None:
            return self.kind.value
        inner = value.value if isinstance(value, Enum) else repr(value)
        return f"{self.kind.value}({inner})"


for _kind in KeyKind:
    if _kind not in (KeyKind.F, KeyKind.CHAR, KeyKind.MEDIA, KeyKind.MODIFIER):
        setattr(KeyCode, _kind.name, KeyCode(_kind))
del _kind


@dataclass(frozen=True, eq=False)
class KeyEvent:
    """A key event with the modifiers held, its kind and keyboard state.

    Equality and hashing treat an uppercase character and Shift as one
    thing: ``D``, ``D`` with Shift and ``d`` with Shift are all equal.
    """

    code: KeyCode
    modifiers: KeyModifiers = KeyModifiers.NONE
    kind: KeyEventKind = KeyEventKind.PRESS
    state: KeyEventState = KeyEventState.NONE

    def __post_init__(self) -> None:
        if not isinstance(self.code, KeyCode):
            raise TypeError(f"code must be a KeyCode, got {type(self.code).__name__}")
        if not isinstance(self.modifiers, KeyModifiers):
            raise TypeError("modifiers must be KeyModifiers")
        if not isinstance(self.kind, KeyEventKind):
            raise TypeError("kind must be a KeyEventKind")
        if not isinstance(self.state, KeyEventState):
            raise TypeError("state must be KeyEventState")

    @classmethod
    def from_code(cls, code: KeyCode) -> KeyEvent:
        """A plain key press of ``code`` with no modifiers."""
        return cls(code)

    def normalize_case(self) -> KeyEvent:
        """Return an event where Shift is set exactly when the character is uppercase."""
        if self.code.kind is not KeyKind.CHAR:
            return self
        c = self.code.value
        assert isinstance(c, str)
        if "A" <= c <= "Z":
            return replace(self, modifiers=self.modifiers | KeyModifiers.SHIFT)
        if KeyModifiers.SHIFT in self.modifiers and "a" <= c <= "z":
            return replace(self, code=KeyCode.char(c.upper()))
        return self

    def _identity(self) -> tuple[KeyCode, KeyModifiers, KeyEventKind, KeyEventState]:
        normal = self.normalize_case()
        return (normal.code, normal.modifiers, normal.kind, normal.state)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyEvent):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())