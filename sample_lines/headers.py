"""Header passthrough."""

from __future__ import annotations

from typing import Iterator

from sample_lines.sink import OutputSink


def passthrough_headers(lines: Iterator[str], count: int, sink: OutputSink) -> int:
    """Copy up to *count* leading lines from *lines* straight to *sink*.

    The lines are consumed from the iterator, so the sampler never sees them,
    and no randomness is involved. The sink is flushed once the headers are
    out.

    Returns:
        Number of header lines emitted. Fewer than *count* means the input
        ended inside the header block.
    """
    emitted = 0
    while emitted < count:
        line = next(lines, None)
        if line is None:
            break
        sink.emit(line)
        emitted += 1
    if emitted:
        sink.flush()
    return emitted
