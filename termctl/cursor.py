"""Commands that move, show, hide and shape the terminal cursor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from termctl.command import Command, csi

__all__ = [
    "MoveTo",
    "MoveToNextLine",
    "MoveToPreviousLine",
    "MoveToColumn",
    "MoveToRow",
    "MoveUp",
    "MoveRight",
    "MoveDown",
    "MoveLeft",
    "SavePosition",
    "RestorePosition",
    "Hide",
    "Show",
    "EnableBlinking",
    "DisableBlinking",
    "CursorShape",
    "SetCursorShape",
]

_U16_MAX = 0xFFFF


def _require_u16(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= _U16_MAX:
        raise ValueError(f"{name} must be in 0..{_U16_MAX}, got {value}")


def _require_zero_based(name: str, value: object) -> None:
    # A zero-based coordinate is written one-based, so the top value would overflow.
    _require_u16(name, value)
    if value == _U16_MAX:
        raise ValueError(f"{name} must be below {_U16_MAX}, got {value}")


@dataclass(frozen=True)
class MoveTo(Command):
    """Move the cursor to (column, row); the top left cell is (0, 0)."""

    column: int
    row: int

    def __post_init__(self) -> None:
        _require_zero_based("column", self.column)
        _require_zero_based("row", self.row)

    def write_ansi(self) -> str:
        return csi(f"{self.row + 1};{self.column + 1}H")


@dataclass(frozen=True)
class _Count(Command):
    count: int

    def __post_init__(self) -> None:
        _require_u16("count", self.count)


@dataclass(frozen=True)
class MoveToNextLine(_Count):
    """Move the cursor down ``count`` lines, to the first column."""

    def write_ansi(self) -> str:
        return csi(f"{self.count}E")


@dataclass(frozen=True)
class MoveToPreviousLine(_Count):
    """Move the cursor up ``count`` lines, to the first column."""

    def write_ansi(self) -> str:
        return csi(f"{self.count}F")


@dataclass(frozen=True)
class MoveToColumn(Command):
    """Move the cursor to a zero-based column on the current row."""

    column: int

    def __post_init__(self) -> None:
        _require_zero_based("column", self.column)

    def write_ansi(self) -> str:
        return csi(f"{self.column + 1}G")


@dataclass(frozen=True)
class MoveToRow(Command):
    """Move the cursor to a zero-based row in the current column."""

    row: int

    def __post_init__(self) -> None:
        _require_zero_based("row", self.row)

    def write_ansi(self) -> str:
        return csi(f"{self.row + 1}d")


@dataclass(frozen=True)
class MoveUp(_Count):
    """Move the cursor up ``count`` rows."""

    def write_ansi(self) -> str:
        return csi(f"{self.count}A")


@dataclass(frozen=True)
class MoveRight(_Count):
    """Move the cursor right ``count`` columns."""

    def write_ansi(self) -> str:
        return csi(f"{self.count}C")


@dataclass(frozen=True)
class MoveDown(_Count):
    """Move the cursor down ``count`` rows."""

    def write_ansi(self) -> str:
        return csi(f"{self.count}B")


@dataclass(frozen=True)
class MoveLeft(_Count):
    """Move the cursor left ``count`` columns."""

    def write_ansi(self) -> str:
        return csi(f"{self.count}D")


@dataclass(frozen=True)
class SavePosition(Command):
    """Save the current cursor position."""

    def write_ansi(self) -> str:
        return "\x1b7"


@dataclass(frozen=True)
class RestorePosition(Command):
    """Restore the saved cursor position."""

    def write_ansi(self) -> str:
        return "\x1b8"


@dataclass(frozen=True)
class Hide(Command):
    """Hide the cursor."""

    def write_ansi(self) -> str:
        return csi("?25l")


@dataclass(frozen=True)
class Show(Command):
    """Show the cursor."""

    def write_ansi(self) -> str:
        return csi("?25h")


@dataclass(frozen=True)
class EnableBlinking(Command):
    """Make the cursor blink."""

    def write_ansi(self) -> str:
        return csi("?12h")


@dataclass(frozen=True)
class DisableBlinking(Command):
    """Stop the cursor from blinking."""

    def write_ansi(self) -> str:
        return csi("?12l")


class CursorShape(Enum):
    """Cursor shapes, valued by their DECSCUSR parameter."""

    UNDERSCORE = 3
    LINE = 5
    BLOCK = 2


@dataclass(frozen=True)
class SetCursorShape(Command):
    """Set the shape of the cursor."""

    shape: CursorShape

    def __post_init__(self) -> None:
        if not isinstance(self.shape, CursorShape):
            raise TypeError(
                f"shape must be a CursorShape, got {type(self.shape).__name__}"
            )

    def write_ansi(self) -> str:
        return csi(f"{self.shape.value} q")