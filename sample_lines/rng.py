"""Explicitly owned random stream used by the samplers."""

from __future__ import annotations

import numpy as np


class RandomStream:
    """Uniform integer and real draws from a ``numpy`` generator.

    One stream is owned by one run. Every draw advances the generator, so the
    sequence of draws, and therefore the sample, is fully determined by the
    seed and the order of calls the sampler makes.
    """

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the stream.

        Args:
            seed: 64-bit unsigned seed for reproducible draws. ``None`` seeds
                from operating-system entropy.
        """
        self.seed = seed
        self._rng = np.random.default_rng(seed)
        self.draws = 0

    def draw_index(self, upper: int) -> int:
        """Return a uniform integer in the closed range ``[0, upper]``."""
        if upper < 0:
            raise ValueError(f"upper bound must be non-negative, got {upper}")
        self.draws += 1
        return int(self._rng.integers(0, upper, endpoint=True))

    def draw_unit(self) -> float:
        """Return a uniform real in ``[0, 1)``."""
        self.draws += 1
        return float(self._rng.random())
