"""Command-line entry point for ``samp``.

Usage:
    cat data.txt | samp -n 20
    samp -r 0.01 --seed 42 -p access.log
"""

from __future__ import annotations

import argparse
import contextlib
import logging
import os
import sys
from typing import Callable, Sequence, TextIO

from dotenv import find_dotenv, load_dotenv

from sample_lines import __version__
from sample_lines.config import (
    SampleConfig,
    log_level_from_env,
    parse_rate,
    parse_seed,
    seed_from_env,
)
from sample_lines.errors import ConfigurationError, DownstreamClosed, InputError, OutputError
from sample_lines.reader import open_source, read_lines
from sample_lines.run import run_sample
from sample_lines.sink import OutputSink

logger = logging.getLogger(__name__)

EPILOG = """\
Example usage:
    cat data.txt | samp -n 20            # Sample 20 lines from data.txt
    samp -r 0.1 -s 7 data.txt            # Keep each line with probability 0.1
    samp -n 100 -p data.csv              # Keep the CSV header, sample 100 rows

Environment:
    SAMPLE_LINES_SEED       default seed when -s/--seed is not given
    SAMPLE_LINES_LOG_LEVEL  logging level (default WARNING)
"""


def _argument_type(parse: Callable[[str], object]) -> Callable[[str], object]:
    """Adapt a ``ConfigurationError``-raising parser to argparse."""

    def convert(value: str) -> object:
        try:
            return parse(value)
        except ConfigurationError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    convert.__name__ = parse.__name__
    return convert


def _non_negative_int(value: str) -> int:
    try:
        number = int(value, 10)
    except ValueError:
        raise ConfigurationError(f"invalid count {value!r}: not an integer") from None
    if number < 0:
        raise ConfigurationError(f"invalid count {value!r}: must be non-negative")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="samp",
        description=(
            "Randomly sample lines from a file or stdin in one pass, "
            "using reservoir sampling (-n) or per-line probability (-r)."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "-n",
        dest="sample_size",
        metavar="NUM",
        type=_argument_type(_non_negative_int),
        help="Number of lines to sample",
    )
    mode.add_argument(
        "-r",
        dest="rate",
        metavar="RATE",
        type=_argument_type(parse_rate),
        help="Keep each line with probability RATE (0.0 to 1.0)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        dest="seed",
        metavar="SEED",
        type=_argument_type(parse_seed),
        default=None,
        help="Optional seed for reproducible sampling",
    )
    parser.add_argument(
        "-p",
        "--preserve-headers",
        dest="preserve_headers",
        metavar="NUM",
        nargs="?",
        const=1,
        default=0,
        type=_argument_type(_non_negative_int),
        help="Number of header lines to preserve (default: 1 if given without a value)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (-v for INFO, -vv for DEBUG)",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "file", nargs="?", metavar="FILE", help="Input file (reads from stdin if not provided)"
    )
    return parser


def configure_logging(verbosity: int = 0) -> None:
    """Configure root logging on stderr."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, log_level_from_env() or "WARNING", logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)


def _silence_stdout() -> None:
    """Point the stdout descriptor at /dev/null so shutdown flushes cannot fail again."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)


def main(
    argv: Sequence[str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run the command line and return the process exit status.

    Args:
        argv: Arguments without the program name (defaults to ``sys.argv[1:]``).
        stdin: Stream used instead of the real standard input.
        stdout: Stream used instead of the real standard output.
    """
    load_dotenv(find_dotenv(usecwd=True))
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        seed = args.seed if args.seed is not None else seed_from_env()
        config = SampleConfig(
            sample_size=args.sample_size,
            rate=args.rate,
            seed=seed,
            preserve_headers=args.preserve_headers,
        )
    except ConfigurationError as exc:
        parser.error(str(exc))

    if stdin is not None and args.file in (None, "-"):
        source = contextlib.nullcontext(stdin)
    else:
        source = open_source(args.file)

    owns_stdout = stdout is None
    if stdout is None:
        stdout = open(sys.stdout.fileno(), "w", encoding="utf-8", newline="\n", closefd=False)

    status = 0
    try:
        with source as handle:
            run_sample(config, read_lines(handle), OutputSink(stdout))
    except DownstreamClosed:
        logger.debug("Output consumer closed the pipe; stopping")
        if owns_stdout:
            _silence_stdout()
    except InputError as exc:
        logger.error("%s", exc)
        status = 1
    except OutputError as exc:
        logger.error("%s", exc)
        if owns_stdout:
            # unwritten output would only fail again on close
            _silence_stdout()
        status = 1

    if owns_stdout:
        status = _close_stdout(stdout, status)
    return status


def _close_stdout(stdout: TextIO, status: int) -> int:
    """Close our stdout handle and return the exit status to report."""
    try:
        stdout.close()
    except BrokenPipeError:
        _silence_stdout()
    except OSError as exc:
        logger.error("error writing output: %s", exc)
        _silence_stdout()
        return 1
    return status
