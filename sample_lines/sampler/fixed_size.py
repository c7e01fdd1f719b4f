"""Fixed-size reservoir sampler (Algorithm R)."""

from __future__ import annotations

import logging
from typing import Iterable

from sample_lines.rng import RandomStream
from sample_lines.sampler.base import LineSampler

logger = logging.getLogger(__name__)


class FixedSizeSampler(LineSampler):
    """Keep a uniform random subset of ``sample_size`` lines in O(k) memory.

    The first ``k`` lines fill the reservoir in order. Line ``i >= k`` draws
    ``j`` from ``[0, i]`` and replaces slot ``j`` when ``j < k``. The result is
    returned in slot order, not reshuffled: a fixed seed must keep producing
    the same ordering.
    """

    def __init__(self, sample_size: int) -> None:
        """Initialize the sampler.

        Args:
            sample_size: Reservoir capacity ``k`` (non-negative).
        """
        if sample_size < 0:
            raise ValueError("sample_size must be non-negative")
        self.sample_size = sample_size
        self.lines_seen = 0

    def sample(self, lines: Iterable[str], rng: RandomStream) -> list[str]:
        """Consume *lines* and return ``min(k, n)`` of them."""
        k = self.sample_size
        reservoir: list[str] = []
        self.lines_seen = 0

        if k == 0:
            # Nothing can win a slot; read to the end so input errors still surface.
            for _ in lines:
                self.lines_seen += 1
            return reservoir

        for i, line in enumerate(lines):
            self.lines_seen = i + 1
            if i < k:
                reservoir.append(line)
                continue
            j = rng.draw_index(i)
            if j < k:
                reservoir[j] = line

        logger.debug("Reservoir holds %d of %d lines", len(reservoir), self.lines_seen)
        return reservoir
