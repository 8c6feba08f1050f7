"""Cross-candidate validation of materialized results."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from rich.console import Console

from .errors import ValidationMismatchError
from .types import CandidateResult

logger = logging.getLogger(__name__)

NUMERIC_TOLERANCE = 1e-10
DEFAULT_ARTIFACT_DIR = Path("tmp")


def _round_float(value: float) -> float:
    return float(f"{value:.10f}")


def _normalize(value: Any) -> Any:
    if isinstance(value, float):
        if not math.isfinite(value):
            return value
        if value.is_integer():
            return int(value)
        return _round_float(value)
    if isinstance(value, dict):
        return {str(key): _normalize(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_normalize(item) for item in value]
    return value


def canonicalize(value: Any) -> str:
    """Serialize a materialized value with stable key order and number format."""
    return json.dumps(_normalize(value), indent=2, sort_keys=True, ensure_ascii=False)


def _as_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    return float(value)


def results_match(reference: Any, other: Any, *, tolerance: float = NUMERIC_TOLERANCE) -> bool:
    """
    Return whether two materialized results agree.

    Numeric scalars are compared unrounded within ``tolerance``; everything
    else is compared by its canonical text.
    """
    if canonicalize(reference) == canonicalize(other):
        return True
    ref_number = _as_number(reference)
    other_number = _as_number(other)
    if ref_number is None or other_number is None:
        return False
    return math.isclose(ref_number, other_number, rel_tol=0.0, abs_tol=tolerance)


def write_mismatch_artifacts(
    reference_text: str, other_text: str, artifact_dir: Path
) -> tuple[Path, Path]:
    """Write both serialized results side by side for offline diffing."""
    artifact_dir.mkdir(parents=True, exist_ok=True)
    reference_path = artifact_dir / "result-0.txt"
    other_path = artifact_dir / "result-1.txt"
    reference_path.write_text(reference_text, encoding="utf-8")
    other_path.write_text(other_text, encoding="utf-8")
    return reference_path, other_path


def validate_results(
    results: Sequence[tuple[str, CandidateResult]],
    *,
    artifact_dir: Path = DEFAULT_ARTIFACT_DIR,
    console: Console | None = None,
) -> None:
    """
    Check that every successful candidate agrees with the first successful one.

    Failed candidates are skipped. On the first disagreement both serialized
    values are printed, written under ``artifact_dir`` and a
    ``ValidationMismatchError`` is raised.
    """
    successful = [(label, result.value) for label, result in results if result.success]
    if not successful:
        logger.debug("No successful candidates to cross-validate")
        return

    reference_label, reference_value = successful[0]
    reference_text = canonicalize(reference_value)
    for index, (label, value) in enumerate(successful[1:], start=1):
        if results_match(reference_value, value):
            continue
        text = canonicalize(value)
        if console is not None:
            console.print(
                f"\nERROR: Results from tests '{reference_label}' and '{label}' do not match.",
                markup=False,
                highlight=False,
            )
            console.print(
                f"0: {reference_text}\n{index}: {text}", markup=False, highlight=False
            )
        paths = write_mismatch_artifacts(reference_text, text, artifact_dir)
        raise ValidationMismatchError(
            reference_label=reference_label,
            other_label=label,
            reference_text=reference_text,
            other_text=text,
            artifact_paths=paths,
        )
