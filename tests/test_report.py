"""Tests for the baseline-relative comparison table."""

from __future__ import annotations

import pytest

from querybench.report import BASELINE_FLOOR, compare_results, render_report
from querybench.types import CandidateResult


def _ok(time: float) -> CandidateResult:
    return CandidateResult(success=True, value=None, message="Success", time=time)


def _failed(message: str) -> CandidateResult:
    return CandidateResult(success=False, value=None, message=message, time=0.0)


def test_render_report_formats_rows_in_input_order() -> None:
    text = render_report(
        "Joining arrays",
        [
            ("Python [for]", _ok(0.002)),
            ("pandas", _ok(0.001)),
            ("NumPy", _failed("Not implemented")),
        ],
    )
    assert text.splitlines() == [
        "-" * len("Joining arrays"),
        "  " + "Python [for]".ljust(28) + "0.00200 sec   x2.0 (+100%)",
        "  " + "pandas".ljust(28) + "0.00100 sec   x1.0 (100%)",
        "  " + "NumPy".ljust(28) + "* Not implemented",
    ]


def test_only_the_fastest_candidate_is_shown_as_baseline() -> None:
    text = render_report(
        "Sorting", [("a", _ok(0.003)), ("b", _ok(0.0015)), ("c", _ok(0.0030001))]
    )
    assert text.count("(100%)") == 1
    assert "(100%)" in text.splitlines()[2]


def test_baseline_falls_back_to_floor_without_successes() -> None:
    report = compare_results("Nothing", [("a", _failed("boom"))])
    assert report.baseline == BASELINE_FLOOR
    assert report.failed_labels == ("a",)


def test_zero_time_baseline_uses_floor() -> None:
    report = compare_results("Fast", [("a", _ok(0.0)), ("b", _ok(0.0002))])
    assert report.baseline == BASELINE_FLOOR
    assert report.rows[0].is_baseline is True
    assert report.rows[1].ratio == pytest.approx(2.0)


def test_relative_multiple_and_overhead_are_rendered() -> None:
    text = render_report("S", [("fast", _ok(0.25)), ("slow", _ok(0.375))])
    assert text.splitlines()[2].endswith("0.37500 sec   x1.5 (+50%)")
