"""Custom exceptions for the benchmark harness."""

from __future__ import annotations

from pathlib import Path


class QueryBenchError(RuntimeError):
    """Base exception for all harness errors."""


class ConfigurationError(QueryBenchError):
    """Raised when harness configuration is invalid."""


class ScenarioError(QueryBenchError):
    """Raised when a scenario declaration cannot be flattened into candidates."""


class InvalidInputError(QueryBenchError):
    """Raised when dataset generation input is out of range."""

    error_code = "QB_INVALID_INPUT"

    def __init__(self, message: str) -> None:
        super().__init__(f"{self.error_code}: {message}")


class CandidateNotImplementedError(QueryBenchError):
    """Raised by a candidate that has no implementation for its library."""


class ValidationMismatchError(QueryBenchError):
    """Raised when two successful candidates return different results."""

    error_code = "QB_VALIDATION_MISMATCH"

    def __init__(
        self,
        *,
        reference_label: str,
        other_label: str,
        reference_text: str,
        other_text: str,
        artifact_paths: tuple[Path, Path] | None = None,
    ) -> None:
        self.reference_label = reference_label
        self.other_label = other_label
        self.reference_text = reference_text
        self.other_text = other_text
        self.artifact_paths = artifact_paths
        super().__init__(
            f"{self.error_code}: Results from tests '{reference_label}' "
            f"and '{other_label}' do not match."
        )
