"""Line samplers."""

from sample_lines.sampler.base import LineSampler
from sample_lines.sampler.fixed_size import FixedSizeSampler
from sample_lines.sampler.probability import ProbabilitySampler

__all__ = [
    "LineSampler",
    "FixedSizeSampler",
    "ProbabilitySampler",
]
