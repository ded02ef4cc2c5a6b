"""The command interface and helpers that write commands to a stream."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import Any, TypeVar

__all__ = ["Command", "csi", "queue", "execute"]

_CSI = "\x1b["

W = TypeVar("W")


def csi(sequence: str) -> str:
    """Return ``sequence`` prefixed with the Control Sequence Introducer."""
    return _CSI + sequence


class Command(ABC):
    """An action on the terminal, expressed as an ANSI escape sequence."""

    @abstractmethod
    def write_ansi(self) -> str:
        """Return the ANSI representation of this command."""

    def __str__(self) -> str:
        return self.write_ansi()


def _is_binary(writer: Any) -> bool:
    if isinstance(writer, (io.RawIOBase, io.BufferedIOBase)):
        return True
    if isinstance(writer, io.TextIOBase):
        return False
    mode = getattr(writer, "mode", "")
    return isinstance(mode, str) and "b" in mode


def _write_command(writer: Any, command: Command) -> None:
    if not isinstance(command, Command):
        raise TypeError(
            f"expected a Command, got {type(command).__name__!r}"
        )
    text = command.write_ansi()
    if not isinstance(text, str):
        raise TypeError(
            f"{type(command).__name__}.write_ansi returned "
            f"{type(text).__name__!r}, expected str"
        )
    if _is_binary(writer):
        writer.write(text.encode("utf-8"))
    else:
        writer.write(text)


def queue(writer: W, *args: Command) -> W:
    """Write the commands to ``writer`` without flushing it.

    The commands take effect once the writer is flushed. Returns the writer,
    so calls can be chained. Errors raised by the writer propagate.
    """
    for command in args:
        _write_command(writer, command)
    return writer


def execute(writer: W, *args: Command) -> W:
    """Write the commands to ``writer`` and flush it.

    Returns the writer. Errors raised by the writer propagate.
    """
    queue(writer, *args)
    flush = getattr(writer, "flush", None)
    if flush is not None:
        flush()
    return writer