"""Independent-keep (Bernoulli) sampler."""

from __future__ import annotations

from typing import Iterable, Iterator

from sample_lines.rng import RandomStream
from sample_lines.sampler.base import LineSampler


class ProbabilitySampler(LineSampler):
    """Keep each line independently with probability ``rate``.

    Lines are yielded lazily in encounter order, so the output is always an
    order-preserving subsequence of the input and can be written as it is
    found.
    """

    def __init__(self, rate: float) -> None:
        """Initialize the sampler.

        Args:
            rate: Keep probability in ``[0.0, 1.0]``.
        """
        if not 0.0 <= rate <= 1.0:
            raise ValueError("rate must lie in [0.0, 1.0]")
        self.rate = rate
        self.lines_seen = 0

    def sample(self, lines: Iterable[str], rng: RandomStream) -> Iterator[str]:
        """Yield the kept lines."""
        self.lines_seen = 0
        for line in lines:
            self.lines_seen += 1
            if rng.draw_unit() < self.rate:
                yield line
