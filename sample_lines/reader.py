"""Line input from a file or standard input."""

from __future__ import annotations

import contextlib
import logging
import sys
from typing import Iterator, TextIO

from sample_lines.errors import InputError

logger = logging.getLogger(__name__)


def strip_terminator(line: str) -> str:
    """Remove one trailing ``"\\n"`` or ``"\\r\\n"`` from *line*."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


def read_lines(handle: TextIO) -> Iterator[str]:
    """Yield the lines of *handle* without their terminators.

    Raises:
        InputError: If reading or UTF-8 decoding fails mid-stream.
    """
    try:
        for line in handle:
            yield strip_terminator(line)
    except UnicodeDecodeError as exc:
        raise InputError(f"input is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise InputError(f"error reading input: {exc}") from exc


@contextlib.contextmanager
def open_source(path: str | None = None) -> Iterator[TextIO]:
    """Open *path* for strict UTF-8 line reading; ``None`` or ``"-"`` means stdin.

    Raises:
        InputError: If the file cannot be opened.
    """
    if path is None or path == "-":
        logger.debug("Reading from standard input")
        handle = open(sys.stdin.fileno(), encoding="utf-8", newline="\n", closefd=False)
    else:
        try:
            handle = open(path, encoding="utf-8", newline="\n")
        except OSError as exc:
            raise InputError(f"cannot open input file {path!r}: {exc.strerror or exc}") from exc
        logger.debug("Reading from %s", path)
    with handle:
        yield handle
