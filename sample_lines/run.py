"""Sampling run: header passthrough, one sampler, streaming output.

The primary API is :func:`run_sample`. It drives one single-pass run over an
iterator of lines and returns a :class:`RunSummary` describing what happened.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Iterable

from sample_lines.config import SampleConfig
from sample_lines.headers import passthrough_headers
from sample_lines.rng import RandomStream
from sample_lines.sink import OutputSink

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Counts and timing produced by a single run.

    Attributes:
        mode: ``"fixed"`` or ``"rate"``.
        headers_emitted: Header lines passed through unsampled.
        lines_seen: Post-header lines consumed by the sampler.
        lines_emitted: Sampled lines written to the sink.
        seed: Seed used for the random stream (``None`` if entropy-seeded).
        header_truncated: ``True`` if the input ended inside the header block.
        wall_seconds: Wall-clock duration of the run.
    """

    mode: str
    headers_emitted: int
    lines_seen: int
    lines_emitted: int
    seed: int | None
    header_truncated: bool
    wall_seconds: float


def run_sample(
    config: SampleConfig,
    lines: Iterable[str],
    sink: OutputSink,
    rng: RandomStream | None = None,
) -> RunSummary:
    """Sample *lines* according to *config* and write the result to *sink*.

    Args:
        config: Validated sampling configuration.
        lines: Input lines without terminators, consumed in a single pass.
        sink: Destination for header lines and sampled lines.
        rng: Optional random stream. Built from ``config.seed`` after the
            header block when omitted.

    Returns:
        A :class:`RunSummary` for the run.

    Raises:
        InputError: If reading the input fails.
        OutputError: If writing fails for a reason other than a closed pipe.
        DownstreamClosed: If the output consumer closed the pipe.
    """
    start = time.perf_counter()
    stream = iter(lines)

    headers_emitted = passthrough_headers(stream, config.preserve_headers, sink)
    if headers_emitted < config.preserve_headers:
        logger.info(
            "Input ended after %d of %d header lines", headers_emitted, config.preserve_headers
        )
        return RunSummary(
            mode=config.mode,
            headers_emitted=headers_emitted,
            lines_seen=0,
            lines_emitted=0,
            seed=config.seed,
            header_truncated=True,
            wall_seconds=time.perf_counter() - start,
        )

    if rng is None:
        rng = RandomStream(config.seed)
    sampler = config.build_sampler()

    lines_emitted = sink.emit_all(sampler.sample(stream, rng))
    sink.flush()

    summary = RunSummary(
        mode=config.mode,
        headers_emitted=headers_emitted,
        lines_seen=sampler.lines_seen,
        lines_emitted=lines_emitted,
        seed=rng.seed,
        header_truncated=False,
        wall_seconds=time.perf_counter() - start,
    )
    logger.info(
        "Sampled %d of %d lines (mode=%s, headers=%d, seed=%s) in %.3fs",
        summary.lines_emitted,
        summary.lines_seen,
        summary.mode,
        summary.headers_emitted,
        summary.seed,
        summary.wall_seconds,
    )
    return summary
