"""Run-level configuration objects."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Mapping

from sample_lines.errors import ConfigurationError
from sample_lines.sampler import FixedSizeSampler, LineSampler, ProbabilitySampler

MAX_SEED = 2**64 - 1

SEED_ENV_VAR = "SAMPLE_LINES_SEED"
LOG_LEVEL_ENV_VAR = "SAMPLE_LINES_LOG_LEVEL"


@dataclass(frozen=True)
class SampleConfig:
    """Immutable configuration for one sampling run.

    Exactly one of ``sample_size`` and ``rate`` must be set.

    Attributes:
        sample_size: Reservoir size ``k`` for fixed-size mode.
        rate: Keep probability ``p`` in ``[0.0, 1.0]`` for probability mode.
        seed: Optional 64-bit unsigned seed. ``None`` draws from OS entropy.
        preserve_headers: Number of leading lines passed through unsampled.
    """

    sample_size: int | None = None
    rate: float | None = None
    seed: int | None = None
    preserve_headers: int = 0

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Raise :class:`ConfigurationError` if the configuration is unusable."""
        if self.sample_size is None and self.rate is None:
            raise ConfigurationError("one of sample size (-n) or rate (-r) is required")
        if self.sample_size is not None and self.rate is not None:
            raise ConfigurationError("sample size (-n) and rate (-r) are mutually exclusive")
        if self.sample_size is not None and self.sample_size < 0:
            raise ConfigurationError(f"sample size must be non-negative, got {self.sample_size}")
        if self.rate is not None and (math.isnan(self.rate) or not 0.0 <= self.rate <= 1.0):
            raise ConfigurationError(f"rate must lie in [0.0, 1.0], got {self.rate}")
        if self.seed is not None and not 0 <= self.seed <= MAX_SEED:
            raise ConfigurationError(f"seed must be a 64-bit unsigned integer, got {self.seed}")
        if self.preserve_headers < 0:
            raise ConfigurationError(
                f"header count must be non-negative, got {self.preserve_headers}"
            )

    @property
    def mode(self) -> str:
        """``"fixed"`` for reservoir sampling, ``"rate"`` for probability sampling."""
        return "fixed" if self.sample_size is not None else "rate"

    def build_sampler(self) -> LineSampler:
        """Return the sampler selected by this configuration."""
        if self.sample_size is not None:
            return FixedSizeSampler(self.sample_size)
        if self.rate is not None:
            return ProbabilitySampler(self.rate)
        raise ConfigurationError("one of sample size (-n) or rate (-r) is required")


def parse_seed(value: str) -> int:
    """Parse a 64-bit unsigned seed from text."""
    try:
        seed = int(value.strip(), 10)
    except ValueError:
        raise ConfigurationError(f"invalid seed {value!r}: not an integer") from None
    if not 0 <= seed <= MAX_SEED:
        raise ConfigurationError(f"invalid seed {value!r}: must lie in [0, {MAX_SEED}]")
    return seed


def parse_rate(value: str) -> float:
    """Parse a keep probability from text, rejecting values outside ``[0, 1]``."""
    try:
        rate = float(value)
    except ValueError:
        raise ConfigurationError(f"invalid rate {value!r}: not a number") from None
    if math.isnan(rate) or not 0.0 <= rate <= 1.0:
        raise ConfigurationError(f"invalid rate {value!r}: must lie in [0.0, 1.0]")
    return rate


def seed_from_env(environ: Mapping[str, str] | None = None) -> int | None:
    """Return the seed set through ``SAMPLE_LINES_SEED``, if any."""
    environ = os.environ if environ is None else environ
    value = environ.get(SEED_ENV_VAR, "").strip()
    if not value:
        return None
    return parse_seed(value)


def log_level_from_env(environ: Mapping[str, str] | None = None) -> str | None:
    """Return the logging level name set through ``SAMPLE_LINES_LOG_LEVEL``, if any."""
    environ = os.environ if environ is None else environ
    value = environ.get(LOG_LEVEL_ENV_VAR, "").strip()
    return value.upper() or None
