import io

import pytest

from termctl.command import execute
from termctl.event import (
    DisableBracketedPaste,
    DisableFocusChange,
    DisableMouseCapture,
    EnableBracketedPaste,
    EnableFocusChange,
    EnableMouseCapture,
    FocusGained,
    FocusLost,
    KeyboardEnhancementFlags,
    KeyInput,
    MouseAction,
    MouseButton,
    MouseEvent,
    MouseEventKind,
    MouseInput,
    Paste,
    PopKeyboardEnhancementFlags,
    PushKeyboardEnhancementFlags,
    Resize,
)
from termctl.keys import KeyCode, KeyEvent, KeyModifiers


def test_enable_mouse_capture_sequence():
    assert EnableMouseCapture().write_ansi() == (
        "\x1b[?1000h\x1b[?1002h\x1b[?1003h\x1b[?1015h\x1b[?1006h"
    )


def test_disable_mouse_capture_is_reverse_of_enable():
    enable = EnableMouseCapture().write_ansi().split("\x1b[")[1:]
    disable = DisableMouseCapture().write_ansi().split("\x1b[")[1:]
    assert [m[:-1] for m in disable] == [m[:-1] for m in reversed(enable)]
    assert all(m.endswith("l") for m in disable)


@pytest.mark.parametrize(
    "command, expected",
    [
        (EnableFocusChange(), "\x1b[?1004h"),
        (DisableFocusChange(), "\x1b[?1004l"),
        (EnableBracketedPaste(), "\x1b[?2004h"),
        (DisableBracketedPaste(), "\x1b[?2004l"),
        (PopKeyboardEnhancementFlags(), "\x1b[<1u"),
    ],
)
def test_fixed_sequences(command, expected):
    assert command.write_ansi() == expected


@pytest.mark.parametrize(
    "flag, expected",
    [
        (KeyboardEnhancementFlags.DISAMBIGUATE_ESCAPE_CODES, "\x1b[>1u"),
        (KeyboardEnhancementFlags.REPORT_EVENT_TYPES, "\x1b[>2u"),
        (KeyboardEnhancementFlags.REPORT_ALL_KEYS_AS_ESCAPE_CODES, "\x1b[>8u"),
    ],
)
def test_push_keyboard_enhancement_flags(flag, expected):
    assert PushKeyboardEnhancementFlags(flag).write_ansi() == expected


def test_push_rejects_non_flags():
    with pytest.raises(TypeError):
        PushKeyboardEnhancementFlags(1)


def test_execute_writes_commands_in_order():
    buffer = io.StringIO()
    execute(buffer, EnableMouseCapture(), EnableFocusChange())
    assert buffer.getvalue() == (
        EnableMouseCapture().write_ansi() + EnableFocusChange().write_ansi()
    )


def test_key_input_from_key_code():
    assert KeyInput(KeyCode.ESC) == KeyInput(KeyEvent.from_code(KeyCode.ESC))
    assert KeyInput(KeyCode.char("c")).event.modifiers == KeyModifiers.NONE


def test_key_input_uses_case_normalisation():
    shifted = KeyInput(KeyEvent(KeyCode.char("d"), KeyModifiers.SHIFT))
    upper = KeyInput(KeyEvent(KeyCode.char("D")))
    assert shifted == upper
    assert hash(shifted) == hash(upper)


def test_key_input_rejects_other_types():
    with pytest.raises(TypeError):
        KeyInput("c")


def test_focus_events():
    assert FocusGained() == FocusGained()
    assert not (FocusGained() == FocusLost())
    assert len({FocusGained(), FocusGained(), FocusLost()}) == 2


def test_mouse_kind_requires_button_for_presses():
    with pytest.raises(ValueError):
        MouseEventKind(MouseAction.DOWN)
    with pytest.raises(ValueError):
        MouseEventKind(MouseAction.MOVED, MouseButton.LEFT)


def test_mouse_event_round_trip():
    kind = MouseEventKind(MouseAction.DRAG, MouseButton.MIDDLE)
    event = MouseInput(MouseEvent(kind, 3, 4, KeyModifiers.CONTROL))
    assert event.event.kind.button is MouseButton.MIDDLE
    assert (event.event.column, event.event.row) == (3, 4)
    assert event == MouseInput(MouseEvent(kind, 3, 4, KeyModifiers.CONTROL))


def test_mouse_event_coordinates_are_bounded():
    kind = MouseEventKind(MouseAction.SCROLL_UP)
    with pytest.raises(ValueError):
        MouseEvent(kind, -1, 0)
    with pytest.raises(ValueError):
        MouseEvent(kind, 0, 0x10000)


def test_resize_validation():
    assert Resize(80, 24) == Resize(80, 24)
    with pytest.raises(ValueError):
        Resize(0x10000, 1)
    with pytest.raises(TypeError):
        Resize(1.5, 2)


def test_paste_requires_text():
    assert Paste("hello").text == "hello"
    with pytest.raises(TypeError):
        Paste(b"hello")