"""Tests for environment-backed benchmark configuration."""

from __future__ import annotations

from pathlib import Path

import pytest

from querybench.config import BenchConfig
from querybench.errors import ConfigurationError
from querybench.validate import DEFAULT_ARTIFACT_DIR


def test_defaults_without_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("QUERYBENCH_FILTER", "QUERYBENCH_ARTIFACT_DIR", "QUERYBENCH_SEED"):
        monkeypatch.delenv(name, raising=False)

    config = BenchConfig.from_env()

    assert config.size == 100
    assert config.name_filter is None
    assert config.artifact_dir == DEFAULT_ARTIFACT_DIR
    assert config.seed is None


def test_environment_fills_unset_values(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("QUERYBENCH_FILTER", " Sorting ")
    monkeypatch.setenv("QUERYBENCH_ARTIFACT_DIR", str(tmp_path))
    monkeypatch.setenv("QUERYBENCH_SEED", "42")

    config = BenchConfig.from_env(size=20)

    assert config.size == 20
    assert config.name_filter == "Sorting"
    assert config.artifact_dir == tmp_path
    assert config.seed == 42


def test_explicit_values_win_over_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUERYBENCH_FILTER", "Sorting")
    config = BenchConfig.from_env(name_filter="Joining", seed=1)
    assert config.name_filter == "Joining"
    assert config.seed == 1


def test_invalid_seed_in_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUERYBENCH_SEED", "abc")
    with pytest.raises(ConfigurationError, match="QUERYBENCH_SEED"):
        BenchConfig.from_env()
