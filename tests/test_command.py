import io

import pytest

from termctl.command import Command, csi, execute, queue


class Text(Command):
    def __init__(self, text):
        self.text = text

    def write_ansi(self):
        return self.text


class NotText(Command):
    def write_ansi(self):
        return 42


class FlushRecorder(io.StringIO):
    def __init__(self):
        super().__init__()
        self.flushes = 0
        self.value_at_flush = None

    def flush(self):
        self.flushes += 1
        self.value_at_flush = self.getvalue()
        super().flush()


class FailingWriter:
    def write(self, data):
        raise OSError("broken pipe")

    def flush(self):
        pass


def test_csi_prefix():
    assert csi("?25l") == "\x1b[?25l"


def test_csi_empty_is_introducer():
    assert csi("") + "abc" == csi("abc")


def test_str_is_ansi():
    out = io.StringIO()
    queue(out, Text("foo 1\n"))
    assert out.getvalue() == "foo 1\n"
    assert str(Text("foo 1\n")) == out.getvalue()


def test_command_is_abstract():
    with pytest.raises(TypeError):
        Command()


def test_queue_writes_in_order_and_returns_writer():
    out = io.StringIO()
    result = queue(out, Text("foo 1\n"), Text("foo 2"))
    assert result is out
    assert out.getvalue() == "foo 1\nfoo 2"


def test_queue_chaining():
    out = io.StringIO()
    queue(queue(out, Text("a")), Text("b"))
    assert out.getvalue() == "ab"


def test_queue_does_not_flush():
    out = FlushRecorder()
    queue(out, Text("x"))
    assert out.flushes == 0
    assert out.getvalue() == "x"


def test_execute_flushes_after_writing():
    out = FlushRecorder()
    result = execute(out, Text("sum:\n"), Text("1 + 1= 2 "))
    assert result is out
    assert out.flushes == 1
    assert out.value_at_flush == "sum:\n1 + 1= 2 "


def test_binary_writer_gets_utf8_bytes():
    out = io.BytesIO()
    execute(out, Text("√"), Text(csi("?25h")))
    assert out.getvalue() == "√".encode("utf-8") + csi("?25h").encode("utf-8")


def test_queue_rejects_non_command():
    out = io.StringIO()
    with pytest.raises(TypeError):
        queue(out, "plain string")
    assert out.getvalue() == ""


def test_queue_rejects_non_string_ansi():
    with pytest.raises(TypeError):
        queue(io.StringIO(), NotText())


def test_writer_error_propagates():
    with pytest.raises(OSError, match="broken pipe"):
        execute(FailingWriter(), Text("x"))


def test_no_commands_writes_nothing():
    out = FlushRecorder()
    execute(out)
    assert out.getvalue() == ""
    assert out.flushes == 1