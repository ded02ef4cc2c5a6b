"""Terminal events and the commands that switch their reporting on and off."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, Flag
from typing import Optional, Union

from termctl.command import Command, csi
from termctl.keys import KeyCode, KeyEvent, KeyModifiers

__all__ = [
    "MouseButton",
    "MouseAction",
    "MouseEventKind",
    "MouseEvent",
    "FocusGained",
    "FocusLost",
    "KeyInput",
    "MouseInput",
    "Paste",
    "Resize",
    "Event",
    "KeyboardEnhancementFlags",
    "EnableMouseCapture",
    "DisableMouseCapture",
    "PushKeyboardEnhancementFlags",
    "PopKeyboardEnhancementFlags",
    "EnableFocusChange",
    "DisableFocusChange",
    "EnableBracketedPaste",
    "DisableBracketedPaste",
]

_U16_MAX = 0xFFFF


def _require_u16(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{name} must be in 0..{_U16_MAX}, got {value}")


class MouseButton(Enum):
    """A mouse button."""

    LEFT = "Left"
    RIGHT = "Right"
    MIDDLE = "Middle"


class MouseAction(Enum):
    """What the mouse did."""

    DOWN = "Down"
    UP = "Up"
    DRAG = "Drag"
    MOVED = "Moved"
    SCROLL_DOWN = "ScrollDown"
    SCROLL_UP = "ScrollUp"


_ACTIONS_WITH_BUTTON = frozenset({MouseAction.DOWN, MouseAction.UP, MouseAction.DRAG})


@dataclass(frozen=True)
class MouseEventKind:
    """A mouse action, with the button for presses, releases and drags.

    Some terminals do not report the button on release or drag; the left
    button stands in when it is unknown.
    """

    action: MouseAction
    button: Optional[MouseButton] = None

    def __post_init__(self) -> None:
        if not isinstance(self.action, MouseAction):
            raise TypeError("action must be a MouseAction")
        if self.action in _ACTIONS_WITH_BUTTON:
            if not isinstance(self.button, MouseButton):
                raise ValueError(f"{self.action.value} needs a MouseButton")
        elif self.button is not None:
            raise ValueError(f"{self.action.value} takes no button")

    def __repr__(self) -> str:
        if self.button is None:
            return self.action.value
        return f"{self.action.value}({self.button.value})"


@dataclass(frozen=True)
class MouseEvent:
    """A mouse event at (column, row) with the modifiers held."""

    kind: MouseEventKind
    column: int
    row: int
    modifiers: KeyModifiers = KeyModifiers.NONE

    def __post_init__(self) -> None:
        if not isinstance(self.kind, MouseEventKind):
            raise TypeError("kind must be a MouseEventKind")
        _require_u16("column", self.column)
        _require_u16("row", self.row)
        if not isinstance(self.modifiers, KeyModifiers):
            raise TypeError("modifiers must be KeyModifiers")


@dataclass(frozen=True)
class FocusGained:
    """The terminal gained focus."""


@dataclass(frozen=True)
class FocusLost:
    """The terminal lost focus."""


@dataclass(frozen=True)
class KeyInput:
    """A key event; a bare :class:`KeyCode` is taken as a plain key press."""

    event: KeyEvent

    def __post_init__(self) -> None:
        if isinstance(self.event, KeyCode):
            object.__setattr__(self, "event", KeyEvent.from_code(self.event))
        elif not isinstance(self.event, KeyEvent):
            raise TypeError(
                f"event must be a KeyEvent or KeyCode, got {type(self.event).__name__}"
            )


@dataclass(frozen=True)
class MouseInput:
    """A mouse event."""

    event: MouseEvent

    def __post_init__(self) -> None:
        if not isinstance(self.event, MouseEvent):
            raise TypeError("event must be a MouseEvent")


@dataclass(frozen=True)
class Paste:
    """Text pasted into the terminal while bracketed paste is enabled."""

    text: str

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError("text must be a str")


@dataclass(frozen=True)
class Resize:
    """The terminal was resized to (columns, rows). Resizes may come in batches."""

    columns: int
    rows: int

    def __post_init__(self) -> None:
        _require_u16("columns", self.columns)
        _require_u16("rows", self.rows)


Event = Union[FocusGained, FocusLost, KeyInput, MouseInput, Paste, Resize]


class KeyboardEnhancementFlags(Flag):
    """Flags asking compatible terminals for extra keyboard information."""

    DISAMBIGUATE_ESCAPE_CODES = 0b0000_0001
    REPORT_EVENT_TYPES = 0b0000_0010
    REPORT_ALL_KEYS_AS_ESCAPE_CODES = 0b0000_1000


@dataclass(frozen=True)
class EnableMouseCapture(Command):
    """Start reporting mouse events."""

    def write_ansi(self) -> str:
        return "".join(
            csi(mode)
            for mode in (
                "?1000h",  # normal tracking: press and release
                "?1002h",  # button-event tracking: drags
                "?1003h",  # any-event tracking: all motion
                "?1015h",  # RXVT mode: coordinates above 223
                "?1006h",  # SGR mode: preferred over RXVT
            )
        )


@dataclass(frozen=True)
class DisableMouseCapture(Command):
    """Stop reporting mouse events."""

    def write_ansi(self) -> str:
        return "".join(
            csi(mode) for mode in ("?1006l", "?1015l", "?1003l", "?1002l", "?1000l")
        )


@dataclass(frozen=True)
class PushKeyboardEnhancementFlags(Command):
    """Push a level of keyboard enhancement flags; pair it with a pop."""

    flags: KeyboardEnhancementFlags

    def __post_init__(self) -> None:
        if not isinstance(self.flags, KeyboardEnhancementFlags):
            raise TypeError(
                f"flags must be KeyboardEnhancementFlags, got {type(self.flags).__name__}"
            )

    def write_ansi(self) -> str:
        return csi(f">{self.flags.value}u")


@dataclass(frozen=True)
class PopKeyboardEnhancementFlags(Command):
    """Pop one level of keyboard enhancement flags."""

    def write_ansi(self) -> str:
        return csi("<1u")


@dataclass(frozen=True)
class EnableFocusChange(Command):
    """Start reporting focus changes."""

    def write_ansi(self) -> str:
        return csi("?1004h")


@dataclass(frozen=True)
class DisableFocusChange(Command):
    """Stop reporting focus changes."""

    def write_ansi(self) -> str:
        return csi("?1004l")


@dataclass(frozen=True)
class EnableBracketedPaste(Command):
    """Turn bracketed paste mode on."""

    def write_ansi(self) -> str:
        return csi("?2004h")


@dataclass(frozen=True)
class DisableBracketedPaste(Command):
    """Turn bracketed paste mode off."""

    def write_ansi(self) -> str:
        return csi("?2004l")