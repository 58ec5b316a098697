"""A :mod:`logging` handler that writes decorated records to a text output.

Every record is written as one or more lines. The first line carries a
header with the level, the source file and the line number; each
following line of the same message is prefixed with the level alone.
Nothing is buffered by the handler itself.
"""

from __future__ import annotations

import logging
from typing import Protocol

__all__ = ["level_name", "DecoratedWriter", "write_decorated", "Logger"]

_UNKNOWN_FILE = "<unknown file>"


class _TextSink(Protocol):
    def write(self, s: str, /) -> object: ...


def level_name(levelno: int) -> str:
    """Map a :mod:`logging` level number to one of five short level names."""
    if levelno >= logging.ERROR:
        return "ERROR"
    if levelno >= logging.WARNING:
        return "WARN"
    if levelno >= logging.INFO:
        return "INFO"
    if levelno >= logging.DEBUG:
        return "DEBUG"
    return "TRACE"


def _split_lines(s: str) -> list[str]:
    """Split on newlines, dropping a final empty piece and trailing CRs."""
    parts = s.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class DecoratedWriter:
    """Text sink wrapper that prints a level prefix in front of every line.

    Text may arrive in arbitrary pieces; the header is only written when a
    piece truly starts a new line of output.
    """

    def __init__(self, writer: _TextSink, level: str, file: str, line: int) -> None:
        self.writer = writer
        self.level = level
        self.file = file
        self.line = line
        self._at_line_start = True

    def write(self, s: str) -> None:
        """Write ``s``, decorating the start of each line."""
        lines = _split_lines(s)
        first = lines[0] if lines else ""
        if self._at_line_start:
            self.writer.write(f"[{self.level:>5}]: {self.file:>12}@{self.line:03}: ")
            self._at_line_start = False
        self.writer.write(first)

        for rest in lines[1:]:
            self.writer.write(f"\n{self.level}: {rest}")

        if s.endswith("\n"):
            self.writer.write("\n")
            self._at_line_start = True


def write_decorated(
    writer: _TextSink, level: str, message: str, file: str, line: int
) -> None:
    """Write ``message`` followed by a newline, decorated with its level."""
    decorated = DecoratedWriter(writer, level, file, line)
    decorated.write(message)
    decorated.write("\n")


class Logger(logging.Handler):
    """Logging handler writing to a text output until it is disabled.

    Errors raised by the output propagate unless ``ignore_errors`` is set,
    in which case they are silently dropped.
    """

    def __init__(self, output: _TextSink, ignore_errors: bool = False) -> None:
        super().__init__()
        self._writer: _TextSink | None = output
        self.ignore_errors = ignore_errors

    def disable(self) -> None:
        """Stop writing; later records are discarded."""
        self._writer = None

    def enabled(self) -> bool:
        """Whether the handler still has an output to write to."""
        return self._writer is not None

    def emit(self, record: logging.LogRecord) -> None:
        writer = self._writer
        if writer is None:
            return
        try:
            write_decorated(
                writer,
                level_name(record.levelno),
                record.getMessage(),
                record.pathname or _UNKNOWN_FILE,
                record.lineno or 0,
            )
        except Exception:
            if not self.ignore_errors:
                raise

    def flush(self) -> None:
        """Flush the output, if it is still enabled and can be flushed."""
        writer = self._writer
        if writer is None:
            return
        flush = getattr(writer, "flush", None)
        if not callable(flush):
            return
        try:
            flush()
        except Exception:
            if not self.ignore_errors:
                raise