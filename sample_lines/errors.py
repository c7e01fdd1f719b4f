"""Exception hierarchy for sample_lines."""

from __future__ import annotations


class SampleLinesError(Exception):
    """Base class for all sample_lines errors."""


class ConfigurationError(SampleLinesError, ValueError):
    """Sampling options are missing, ambiguous or out of range."""


class InputError(SampleLinesError):
    """The input could not be opened, read or decoded."""


class OutputError(SampleLinesError):
    """Writing the result failed for a reason other than a closed pipe."""


class DownstreamClosed(SampleLinesError):
    """The consumer closed its end of the output pipe.

    Raised by :class:`~sample_lines.sink.OutputSink` to unwind straight to
    process exit. It is a normal outcome of pipeline usage (``samp ... | head``)
    and maps to exit status 0.
    """
