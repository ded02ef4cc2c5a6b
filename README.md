# termctl

Terminal control for Python: commands that render to ANSI escape
sequences, and immutable value types for key, mouse, focus, paste and
resize events.

## Installing

    pip install termctl

## Commands

Every command is a small frozen dataclass deriving from
`termctl.command.Command`. Its `write_ansi()` method returns the escape
sequence, and `str(command)` gives the same text.

Write commands to a stream with `queue(writer, *commands)`, which only
writes them, or `execute(writer, *commands)`, which writes them and then
calls the writer's `flush()` if it has one. Both return the writer.
Text streams receive `str`; binary streams receive the sequences encoded
as UTF-8. Passing something that is not a `Command` raises `TypeError`,
and errors raised by the writer propagate.

```python
import sys

from termctl.command import execute, queue
from termctl.cursor import CursorShape, Hide, MoveTo, SetCursorShape, Show

queue(sys.stdout, Hide(), MoveTo(10, 5))
sys.stdout.write("hello")
execute(sys.stdout, SetCursorShape(CursorShape.BLOCK), Show())
```

`csi(sequence)` in `termctl.command` prefixes a sequence with the
Control Sequence Introducer (`ESC [`), for building your own commands
on the `Command` base class.

### Cursor commands (`termctl.cursor`)

- `MoveTo(column, row)`, `MoveToColumn(column)`, `MoveToRow(row)`:
  zero based, so `MoveTo(0, 0)` is the top left cell.
- `MoveToNextLine(count)`, `MoveToPreviousLine(count)`, `MoveUp(count)`,
  `MoveDown(count)`, `MoveLeft(count)`, `MoveRight(count)`: the count is
  written as given; most terminals treat 0 as 1.
- `SavePosition`, `RestorePosition`, `Hide`, `Show`, `EnableBlinking`,
  `DisableBlinking`.
- `SetCursorShape(shape)` with a `CursorShape` of `UNDERSCORE`, `LINE`
  or `BLOCK`.

Arguments are checked when a command is built: a non-integer raises
`TypeError`, and a value outside 0..65535 raises `ValueError`
(zero-based positions must also stay below 65535).

### Input-mode commands (`termctl.event`)

`EnableMouseCapture`, `DisableMouseCapture`, `EnableFocusChange`,
`DisableFocusChange`, `EnableBracketedPaste`, `DisableBracketedPaste`,
`PushKeyboardEnhancementFlags(flags)` and `PopKeyboardEnhancementFlags`.
The flags are a `KeyboardEnhancementFlags` combination of
`DISAMBIGUATE_ESCAPE_CODES`, `REPORT_EVENT_TYPES` and
`REPORT_ALL_KEYS_AS_ESCAPE_CODES`.

```python
from termctl.event import KeyboardEnhancementFlags, PushKeyboardEnhancementFlags

flags = (
    KeyboardEnhancementFlags.DISAMBIGUATE_ESCAPE_CODES
    | KeyboardEnhancementFlags.REPORT_EVENT_TYPES
)
assert PushKeyboardEnhancementFlags(flags).write_ansi() == "\x1b[>3u"
```

## Key events (`termctl.keys`)

- `KeyCode`: named keys as class attributes (`KeyCode.ENTER`,
  `KeyCode.ESC`, `KeyCode.LEFT`, `KeyCode.PAGE_UP`, ...), and
  constructors `KeyCode.char(c)`, `KeyCode.function(number)`,
  `KeyCode.media(MediaKeyCode...)` and `KeyCode.modifier(ModifierKeyCode...)`.
  Each code has a `kind` (a `KeyKind`) and an optional `value`. Codes
  are ordered and print as `Char('z')`, `F(5)`, `Left` and so on.
- `KeyModifiers`: `SHIFT`, `CONTROL`, `ALT`, `SUPER`, `HYPER`, `META`,
  `NONE`.
- `KeyEventKind`: `PRESS`, `REPEAT`, `RELEASE`.
- `KeyEventState`: `KEYPAD`, `CAPS_LOCK` (with `NUM_LOCK` as an alias of
  the same bit), `NONE`.
- `KeyEvent(code, modifiers, kind, state)`, defaulting to a press with no
  modifiers; `KeyEvent.from_code(code)` builds the same.

Key events compare and hash case-aware: an upper-case character implies
Shift, and Shift with a lower-case character means the upper-case one.
`normalize_case()` returns the event in that canonical form.

```python
from termctl.keys import KeyCode, KeyEvent, KeyModifiers

a = KeyEvent(KeyCode.char("d"), KeyModifiers.SHIFT)
b = KeyEvent(KeyCode.char("D"))
assert a == b and hash(a) == hash(b)
```

## Other events (`termctl.event`)

An event is one of `FocusGained`, `FocusLost`, `KeyInput(event)`,
`MouseInput(event)`, `Paste(text)` or `Resize(columns, rows)`.
`KeyInput` also accepts a bare `KeyCode` and turns it into a plain key
press. A `MouseEvent` holds a `MouseEventKind`, a column, a row and
`KeyModifiers`; the kind pairs a `MouseAction` (`DOWN`, `UP`, `DRAG`,
`MOVED`, `SCROLL_DOWN`, `SCROLL_UP`) with a `MouseButton` (`LEFT`,
`RIGHT`, `MIDDLE`), which is required for presses, releases and drags
and refused otherwise.

## Describing events

`termctl.describe.describe_event(event)` returns a one-line description
of a key event and its modifiers, such as `Control + Char('z')`, or
`None` for anything that is not a key event. See it on a few sample
events with:

    termctl-describe

## What it does not do

termctl builds commands and event values; it does not talk to the
terminal beyond writing to the stream you give it. It does not read or
poll for events, parse input sequences, switch raw mode on or off, query
the cursor position or the terminal size, or drive the legacy Windows
console API.