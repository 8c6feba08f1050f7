"""Baseline-relative comparison table for one scenario."""

from __future__ import annotations

from collections.abc import Sequence

from .types import CandidateResult, ComparisonReport, ComparisonRow

BASELINE_FLOOR = 0.0001
LABEL_WIDTH = 28


def fmt_seconds(value: float) -> str:
    """Format a per-call time in seconds with five decimal places."""
    return f"{value:,.5f}"


def fmt_ratio(value: float) -> str:
    return f"{value:,.1f}"


def fmt_percent(row: ComparisonRow) -> str:
    if row.is_baseline:
        return "(100%)"
    return f"(+{row.percent:.0f}%)"


def compare_results(
    scenario: str, results: Sequence[tuple[str, CandidateResult]]
) -> ComparisonReport:
    """Compute the baseline and each candidate's slowdown relative to it."""
    times = [result.time for _, result in results if result.success]
    fastest = min(times) if times else None
    baseline = fastest if fastest else BASELINE_FLOOR

    rows: list[ComparisonRow] = []
    for label, result in results:
        if not result.success:
            rows.append(
                ComparisonRow(
                    label=label, success=False, time=result.time, message=result.message
                )
            )
            continue
        ratio = result.time / baseline
        rows.append(
            ComparisonRow(
                label=label,
                success=True,
                time=result.time,
                ratio=ratio,
                percent=(ratio - 1.0) * 100.0,
                is_baseline=result.time == fastest,
                message=result.message,
            )
        )
    return ComparisonReport(scenario=scenario, baseline=baseline, rows=tuple(rows))


def render_row(row: ComparisonRow) -> str:
    label = row.label.ljust(LABEL_WIDTH)
    if not row.success:
        return f"  {label}* {row.message}"
    return (
        f"  {label}{fmt_seconds(row.time)} sec   "
        f"x{fmt_ratio(row.ratio or 0.0)} {fmt_percent(row)}"
    )


def render_report(scenario: str, results: Sequence[tuple[str, CandidateResult]]) -> str:
    """Render the dashed underline and one line per candidate, in input order."""
    report = compare_results(scenario, results)
    lines = ["-" * len(scenario)]
    lines.extend(render_row(row) for row in report.rows)
    return "\n".join(lines)
