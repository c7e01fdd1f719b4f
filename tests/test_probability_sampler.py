"""Tests for the independent-keep sampler."""

from __future__ import annotations

import pytest

from sample_lines.rng import RandomStream
from sample_lines.sampler.probability import ProbabilitySampler


def _is_subsequence(sub: list[str], full: list[str]) -> bool:
    it = iter(full)
    return all(item in it for item in sub)


@pytest.mark.parametrize("rate", [0.0, 0.1, 0.5, 0.9, 1.0])
def test_output_is_order_preserving_subsequence(rate: float) -> None:
    lines = [f"row-{i}" for i in range(200)]
    kept = list(ProbabilitySampler(rate).sample(lines, RandomStream(seed=11)))
    assert _is_subsequence(kept, lines)


def test_zero_rate_keeps_nothing() -> None:
    assert list(ProbabilitySampler(0.0).sample(["a", "b", "c"], RandomStream(seed=1))) == []


def test_full_rate_keeps_everything() -> None:
    assert list(ProbabilitySampler(1.0).sample(["x", "y", "z"], RandomStream(seed=1))) == [
        "x",
        "y",
        "z",
    ]


def test_keeps_line_when_draw_below_rate(scripted_stream) -> None:
    rng = scripted_stream(units=[0.49, 0.5, 0.1, 0.99])
    kept = list(ProbabilitySampler(0.5).sample(["a", "b", "c", "d"], rng))
    assert kept == ["a", "c"]
    assert rng.draws == 4


def test_lines_are_yielded_lazily(scripted_stream) -> None:
    consumed: list[str] = []

    def source():
        for line in ["a", "b", "c"]:
            consumed.append(line)
            yield line

    rng = scripted_stream(units=[0.0, 0.0, 0.0])
    kept = ProbabilitySampler(1.0).sample(source(), rng)
    assert next(iter(kept)) == "a"
    assert consumed == ["a"]


def test_same_seed_same_output() -> None:
    lines = [str(i) for i in range(500)]
    a = list(ProbabilitySampler(0.3).sample(lines, RandomStream(seed=99)))
    b = list(ProbabilitySampler(0.3).sample(lines, RandomStream(seed=99)))
    assert a == b


def test_keep_fraction_tracks_rate() -> None:
    lines = [str(i) for i in range(10_000)]
    sampler = ProbabilitySampler(0.3)
    kept = list(sampler.sample(lines, RandomStream(seed=5)))
    assert sampler.lines_seen == 10_000
    assert 0.27 <= len(kept) / 10_000 <= 0.33


@pytest.mark.parametrize("rate", [-0.1, 1.01])
def test_rate_outside_unit_interval_rejected(rate: float) -> None:
    with pytest.raises(ValueError):
        ProbabilitySampler(rate)
