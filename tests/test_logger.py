import io
import logging

import pytest

from efitypes.logger import DecoratedWriter, Logger, level_name, write_decorated

HELLO_LINE = "[ INFO]:      main.rs@007: hello\n"


def _record(msg, level=logging.INFO, pathname="main.rs", lineno=7, args=()):
    return logging.LogRecord("test", level, pathname, lineno, msg, args, None)


class _FailingWriter:
    def __init__(self):
        self.attempts = 0

    def write(self, s):
        self.attempts += 1
        raise OSError("device error")


def test_level_name_mapping():
    assert level_name(logging.WARNING) == "WARN"
    assert level_name(logging.CRITICAL) == level_name(logging.ERROR)
    assert level_name(logging.INFO) == "INFO"
    assert level_name(logging.DEBUG) == "DEBUG"
    assert level_name(logging.DEBUG - 5) == "TRACE"


def test_single_line_format():
    buf = io.StringIO()
    write_decorated(buf, "INFO", "hello", "main.rs", 7)
    assert buf.getvalue() == HELLO_LINE


def test_multiline_message_prefixes_each_line():
    buf = io.StringIO()
    write_decorated(buf, "WARN", "a\nb\nc", "f.rs", 3)
    out = buf.getvalue()
    lines = out.split("\n")
    assert out.startswith("[ WARN]:")
    assert lines[0].endswith("f.rs@003: a")
    assert lines[1] == "WARN: b"
    assert lines[2] == "WARN: c"
    assert out.endswith("\n")
    assert out.count("[") == 1


def test_empty_message_still_has_header_and_newline():
    buf = io.StringIO()
    write_decorated(buf, "INFO", "", "main.rs", 7)
    out = buf.getvalue()
    assert out == HELLO_LINE.replace("hello", "")


def test_pieces_within_a_line_share_one_header():
    buf = io.StringIO()
    writer = DecoratedWriter(buf, "DEBUG", "x.rs", 1)
    writer.write("ab")
    writer.write("cd")
    writer.write("\n")
    out = buf.getvalue()
    assert out.count("[DEBUG]") == 1
    assert out.endswith(": abcd\n")


def test_header_repeats_after_newline_piece():
    buf = io.StringIO()
    writer = DecoratedWriter(buf, "DEBUG", "x.rs", 1)
    writer.write("first\n")
    writer.write("second\n")
    out = buf.getvalue()
    assert out.count("[DEBUG]") == 2
    first, second = out.splitlines()
    assert first.endswith(": first")
    assert second.endswith(": second")


def test_line_number_padding_and_overflow():
    buf = io.StringIO()
    write_decorated(buf, "INFO", "m", "f", 5)
    assert "@005: " in buf.getvalue()
    buf = io.StringIO()
    write_decorated(buf, "INFO", "m", "f", 1234)
    assert "@1234: " in buf.getvalue()


def test_long_file_name_is_not_truncated():
    name = "a/very/long/path/to/source.rs"
    buf = io.StringIO()
    write_decorated(buf, "INFO", "m", name, 1)
    assert f": {name}@001: m\n" in buf.getvalue()


def test_carriage_returns_are_stripped_from_split_lines():
    buf = io.StringIO()
    write_decorated(buf, "INFO", "a\r\nb", "f", 1)
    out = buf.getvalue()
    assert "\r" not in out
    assert out.split("\n")[1] == "INFO: b"


def test_logger_emit_writes_record():
    buf = io.StringIO()
    handler = Logger(buf)
    handler.emit(_record("hello"))
    assert buf.getvalue() == HELLO_LINE


def test_logger_formats_arguments():
    buf = io.StringIO()
    handler = Logger(buf)
    handler.emit(_record("value %d", args=(42,)))
    assert buf.getvalue().endswith(": value 42\n")


def test_logger_unknown_file():
    buf = io.StringIO()
    handler = Logger(buf)
    handler.emit(_record("m", pathname=""))
    assert "<unknown file>@007: m" in buf.getvalue()


def test_disable_stops_output():
    buf = io.StringIO()
    handler = Logger(buf)
    assert handler.enabled() is True
    handler.disable()
    assert handler.enabled() is False
    handler.emit(_record("hello"))
    assert buf.getvalue() == ""


def test_writer_errors_propagate_by_default():
    handler = Logger(_FailingWriter())
    with pytest.raises(OSError):
        handler.emit(_record("hello"))


def test_writer_errors_can_be_ignored():
    writer = _FailingWriter()
    handler = Logger(writer, ignore_errors=True)
    handler.emit(_record("hello"))
    assert writer.attempts == 1


def test_flush_leaves_output_unchanged():
    buf = io.StringIO()
    handler = Logger(buf)
    handler.emit(_record("hello"))
    handler.flush()
    assert buf.getvalue() == HELLO_LINE


def test_works_as_logging_handler():
    buf = io.StringIO()
    handler = Logger(buf)
    log = logging.getLogger("efitypes.test_logger")
    log.setLevel(logging.DEBUG)
    log.propagate = False
    log.addHandler(handler)
    try:
        log.warning("disk %s", "full")
    finally:
        log.removeHandler(handler)
    out = buf.getvalue()
    assert out.startswith("[ WARN]: ")
    assert out.endswith(": disk full\n")
    assert out.count("\n") == 1