"""Runtime configuration for a benchmark invocation."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError
from .validate import DEFAULT_ARTIFACT_DIR

DEFAULT_SIZE = 100
ENV_FILTER = "QUERYBENCH_FILTER"
ENV_ARTIFACT_DIR = "QUERYBENCH_ARTIFACT_DIR"
ENV_SEED = "QUERYBENCH_SEED"


@dataclass(frozen=True)
class BenchConfig:
    """
    Settings for one harness run.

    Args:
        size: Dataset size and loop bound used by scenarios.
        name_filter: Only scenarios whose name contains this text run.
        artifact_dir: Directory receiving mismatch artifacts.
        seed: Optional seed for dataset content.
    """

    size: int = DEFAULT_SIZE
    name_filter: str | None = None
    artifact_dir: Path = DEFAULT_ARTIFACT_DIR
    seed: int | None = None

    @classmethod
    def from_env(
        cls,
        *,
        size: int = DEFAULT_SIZE,
        name_filter: str | None = None,
        artifact_dir: Path | None = None,
        seed: int | None = None,
    ) -> BenchConfig:
        """Build a config, filling unset values from ``QUERYBENCH_*`` variables."""
        if name_filter is None:
            name_filter = os.environ.get(ENV_FILTER, "").strip() or None
        if artifact_dir is None:
            artifact_raw = os.environ.get(ENV_ARTIFACT_DIR, "").strip()
            artifact_dir = Path(artifact_raw).expanduser() if artifact_raw else DEFAULT_ARTIFACT_DIR
        if seed is None:
            seed_raw = os.environ.get(ENV_SEED, "").strip()
            if seed_raw:
                try:
                    seed = int(seed_raw)
                except ValueError as exc:
                    raise ConfigurationError(
                        f"{ENV_SEED} must be an integer, got {seed_raw!r}"
                    ) from exc
        return cls(size=size, name_filter=name_filter, artifact_dir=artifact_dir, seed=seed)
