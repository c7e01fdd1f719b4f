"""Single-pass random sampling of lines from text streams.

Public API
----------
The usable surface is importable directly from ``sample_lines``::

    from sample_lines import SampleConfig, RandomStream, OutputSink, run_sample
    from sample_lines.sampler import FixedSizeSampler, ProbabilitySampler
"""

from __future__ import annotations

__version__ = "1.3.0"

# Configuration and errors
from sample_lines.config import SampleConfig
from sample_lines.errors import (
    ConfigurationError,
    DownstreamClosed,
    InputError,
    OutputError,
    SampleLinesError,
)

# Building blocks
from sample_lines.headers import passthrough_headers
from sample_lines.reader import open_source, read_lines
from sample_lines.rng import RandomStream

# Run driver
from sample_lines.run import RunSummary, run_sample
from sample_lines.sampler import FixedSizeSampler, LineSampler, ProbabilitySampler
from sample_lines.sink import OutputSink

__all__ = [
    # Primary abstractions
    "SampleConfig",
    "RandomStream",
    "LineSampler",
    "FixedSizeSampler",
    "ProbabilitySampler",
    "OutputSink",
    # Functional API
    "run_sample",
    "RunSummary",
    "passthrough_headers",
    "open_source",
    "read_lines",
    # Errors
    "SampleLinesError",
    "ConfigurationError",
    "InputError",
    "OutputError",
    "DownstreamClosed",
    "__version__",
]
