"""Shared fixtures for sample_lines tests."""

from __future__ import annotations

import pytest

from sample_lines.config import LOG_LEVEL_ENV_VAR, SEED_ENV_VAR


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Keep user environment and stray .env files out of every test."""
    for name in (SEED_ENV_VAR, LOG_LEVEL_ENV_VAR):
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


class ScriptedStream:
    """RandomStream stand-in that replays fixed draws."""

    def __init__(self, indices: list[int] | None = None, units: list[float] | None = None) -> None:
        self.seed = None
        self._indices = list(indices or [])
        self._units = list(units or [])
        self.draws = 0
        self.bounds: list[int] = []

    def draw_index(self, upper: int) -> int:
        self.draws += 1
        self.bounds.append(upper)
        return self._indices.pop(0)

    def draw_unit(self) -> float:
        self.draws += 1
        return self._units.pop(0)


@pytest.fixture
def scripted_stream():
    return ScriptedStream
