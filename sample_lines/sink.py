"""Streaming output sink."""

from __future__ import annotations

from typing import Iterable, TextIO

from sample_lines.errors import DownstreamClosed, OutputError


class OutputSink:
    """Write lines to a text stream, one terminator after each.

    A consumer that closes the pipe early raises :class:`DownstreamClosed`;
    every other write failure raises :class:`OutputError`.
    """

    def __init__(self, stream: TextIO, terminator: str = "\n") -> None:
        self.stream = stream
        self.terminator = terminator
        self.lines_written = 0

    def emit(self, line: str) -> None:
        """Write a single line."""
        try:
            self.stream.write(line + self.terminator)
        except BrokenPipeError as exc:
            raise DownstreamClosed("output consumer closed the pipe") from exc
        except OSError as exc:
            raise OutputError(f"error writing output: {exc}") from exc
        self.lines_written += 1

    def emit_all(self, lines: Iterable[str]) -> int:
        """Write every line of *lines* as it is produced; return how many were written."""
        count = 0
        for line in lines:
            self.emit(line)
            count += 1
        return count

    def flush(self) -> None:
        try:
            self.stream.flush()
        except BrokenPipeError as exc:
            raise DownstreamClosed("output consumer closed the pipe") from exc
        except OSError as exc:
            raise OutputError(f"error writing output: {exc}") from exc
