"""Describe key events by the modifiers held with them."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from termctl.event import Event, KeyInput
from termctl.keys import KeyCode, KeyEvent, KeyModifiers

__all__ = ["describe_event", "main"]


def _format_modifiers(modifiers: KeyModifiers) -> str:
    names = [
        member.name
        for member in KeyModifiers
        if member.value and member in modifiers and member.name
    ]
    return " | ".join(names) if names else "NONE"


def describe_event(event: Event) -> Optional[str]:
    """Return a line naming the modifiers and key of a key event, else None."""
    if not isinstance(event, KeyInput):
        return None
    key = event.event
    modifiers, code = key.modifiers, key.code
    if modifiers == KeyModifiers.CONTROL:
        return f"Control + {code!r}"
    if modifiers == KeyModifiers.SHIFT:
        return f"Shift + {code!r}"
    if modifiers == KeyModifiers.ALT:
        return f"Alt + {code!r}"
    if modifiers == KeyModifiers.ALT | KeyModifiers.SHIFT:
        return f"Alt + Shift {code!r}"
    return f"({_format_modifiers(modifiers)}) with key: {code!r}"


_SAMPLES = (
    KeyInput(KeyEvent(KeyCode.char("z"), KeyModifiers.CONTROL)),
    KeyInput(KeyEvent(KeyCode.LEFT, KeyModifiers.SHIFT)),
    KeyInput(KeyEvent(KeyCode.DELETE, KeyModifiers.ALT)),
    KeyInput(KeyEvent(KeyCode.RIGHT, KeyModifiers.ALT | KeyModifiers.SHIFT)),
    KeyInput(KeyEvent(KeyCode.HOME, KeyModifiers.ALT | KeyModifiers.CONTROL)),
)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print descriptions of a few sample key events."""
    parser = argparse.ArgumentParser(
        prog="termctl-describe",
        description="Show how key events with modifiers are told apart.",
    )
    parser.parse_args(argv)
    for event in _SAMPLES:
        line = describe_event(event)
        if line is not None:
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())