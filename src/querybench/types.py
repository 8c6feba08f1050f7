"""Typed objects shared by the runner, validator and report renderer."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

Operation = Callable[[], Any]
Consumer = Callable[[Any], None]


@dataclass(frozen=True)
class Candidate:
    """One implementation strategy competing inside a scenario group."""

    operation: Operation
    name: str | None = None


@dataclass(frozen=True)
class Scenario:
    """A named benchmarking topic with candidates grouped by library."""

    name: str
    groups: Mapping[str, Sequence[Candidate | Operation]]
    repeat: int = 100
    consumer: Consumer | None = None


@dataclass(frozen=True)
class CandidateResult:
    """Outcome of running one candidate ``repeat + 1`` times.

    ``time`` is the amortized per-call cost in seconds.
    """

    success: bool
    value: Any
    message: str
    time: float


@dataclass(frozen=True)
class ComparisonRow:
    """One rendered line of a scenario comparison."""

    label: str
    success: bool
    time: float
    ratio: float | None = None
    percent: float | None = None
    is_baseline: bool = False
    message: str = "Success"


@dataclass(frozen=True)
class ComparisonReport:
    """Baseline-relative view of a scenario's candidate results."""

    scenario: str
    baseline: float
    rows: tuple[ComparisonRow, ...] = field(default_factory=tuple)

    @property
    def failed_labels(self) -> tuple[str, ...]:
        return tuple(row.label for row in self.rows if not row.success)
