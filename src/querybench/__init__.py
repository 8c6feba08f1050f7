"""
querybench - compare query-style collection processing across libraries.

Simple Usage:
    from rich.console import Console

    from querybench import generate_dataset, run_all
    from querybench.scenarios import build_scenarios

    data = generate_dataset(100)
    run_all(build_scenarios(data, 100), console=Console())

Each scenario runs its candidates sequentially, cross-checks their results and
prints a table relative to the fastest successful candidate.
"""

from .data import Dataset, generate_dataset
from .errors import (
    CandidateNotImplementedError,
    ConfigurationError,
    InvalidInputError,
    QueryBenchError,
    ScenarioError,
    ValidationMismatchError,
)
from .harness import flatten_candidates, run_all, run_scenario
from .report import compare_results, render_report
from .runner import consume, materialize, not_implemented, run_candidate
from .types import Candidate, CandidateResult, ComparisonReport, ComparisonRow, Scenario
from .validate import canonicalize, validate_results

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Candidate",
    "CandidateResult",
    "ComparisonReport",
    "ComparisonRow",
    "Dataset",
    "Scenario",
    "QueryBenchError",
    "ConfigurationError",
    "ScenarioError",
    "InvalidInputError",
    "CandidateNotImplementedError",
    "ValidationMismatchError",
    "generate_dataset",
    "run_candidate",
    "materialize",
    "consume",
    "not_implemented",
    "canonicalize",
    "validate_results",
    "compare_results",
    "render_report",
    "flatten_candidates",
    "run_scenario",
    "run_all",
]
