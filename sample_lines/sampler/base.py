"""Line sampler interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable

from sample_lines.rng import RandomStream


class LineSampler(ABC):
    """Base interface for single-pass line sampling strategies.

    Attributes:
        lines_seen: Number of post-header lines consumed so far.
    """

    lines_seen: int = 0

    @abstractmethod
    def sample(self, lines: Iterable[str], rng: RandomStream) -> Iterable[str]:
        """Return the selected lines in output order."""
