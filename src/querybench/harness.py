"""Scenario orchestration: run, validate and report every scenario in order."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

from rich.console import Console

from .errors import ScenarioError
from .progress import NullProgress, ProgressSink
from .report import render_report
from .runner import run_candidate
from .types import Candidate, CandidateResult, Operation, Scenario
from .validate import DEFAULT_ARTIFACT_DIR, validate_results

logger = logging.getLogger(__name__)

RunCandidate = Callable[..., CandidateResult]


def _as_candidate(item: Candidate | Operation) -> Candidate:
    if isinstance(item, Candidate):
        return item
    if callable(item):
        return Candidate(operation=item)
    raise ScenarioError(f"Candidate must be callable, got {type(item).__name__}")


def flatten_candidates(
    groups: Mapping[str, Sequence[Candidate | Operation]],
) -> list[tuple[str, Candidate]]:
    """
    Flatten grouped candidates into one labelled list in declaration order.

    Named candidates are labelled ``"group [name]"``. A lone unnamed candidate
    takes the group name; several unnamed ones get ``"group [#n]"``.
    """
    flattened: list[tuple[str, Candidate]] = []
    seen: set[str] = set()
    for group, items in groups.items():
        candidates = [_as_candidate(item) for item in items]
        if not candidates:
            raise ScenarioError(f"Group '{group}' has no candidates")

        unnamed_total = sum(1 for candidate in candidates if not candidate.name)
        unnamed_index = 0
        for candidate in candidates:
            if candidate.name:
                label = f"{group} [{candidate.name}]"
            elif unnamed_total == 1:
                label = group
            else:
                unnamed_index += 1
                label = f"{group} [#{unnamed_index}]"
            if label in seen:
                raise ScenarioError(f"Duplicate candidate label '{label}'")
            seen.add(label)
            flattened.append((label, candidate))
    return flattened


def run_scenario(
    scenario: Scenario,
    *,
    progress: ProgressSink | None = None,
    run: RunCandidate = run_candidate,
) -> list[tuple[str, CandidateResult]]:
    """Run every candidate of ``scenario`` sequentially and collect results."""
    if scenario.repeat < 1:
        raise ScenarioError(f"Scenario '{scenario.name}' repeat must be >= 1")
    sink = progress if progress is not None else NullProgress()
    candidates = flatten_candidates(scenario.groups)

    sink.begin(scenario.name)
    results: list[tuple[str, CandidateResult]] = []
    for label, candidate in candidates:
        result = run(scenario.repeat, scenario.consumer, candidate.operation)
        if not result.success:
            logger.debug("%s / %s failed: %s", scenario.name, label, result.message)
        results.append((label, result))
        sink.advance(label)
    sink.end()
    return results


def run_all(
    scenarios: Sequence[Scenario],
    *,
    console: Console,
    name_filter: str | None = None,
    progress: ProgressSink | None = None,
    artifact_dir: Path = DEFAULT_ARTIFACT_DIR,
    run: RunCandidate = run_candidate,
) -> dict[str, list[tuple[str, CandidateResult]]]:
    """
    Run, cross-validate and report each scenario in declaration order.

    Scenarios whose name does not contain ``name_filter`` are skipped silently.
    A ``ValidationMismatchError`` from any scenario stops the whole run.
    """
    seen: set[str] = set()
    for scenario in scenarios:
        if scenario.name in seen:
            raise ScenarioError(f"Duplicate scenario name '{scenario.name}'")
        seen.add(scenario.name)

    completed: dict[str, list[tuple[str, CandidateResult]]] = {}
    for scenario in scenarios:
        if name_filter and name_filter not in scenario.name:
            logger.debug("Skipping scenario '%s' (filter %r)", scenario.name, name_filter)
            continue
        results = run_scenario(scenario, progress=progress, run=run)
        validate_results(results, artifact_dir=artifact_dir, console=console)
        console.print(
            render_report(scenario.name, results), markup=False, highlight=False, soft_wrap=True
        )
        completed[scenario.name] = results
    return completed
