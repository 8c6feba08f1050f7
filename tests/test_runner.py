"""Tests for running and timing a single candidate."""

from __future__ import annotations

from types import MappingProxyType

import numpy as np
import pytest

from querybench.runner import consume, materialize, not_implemented, run_candidate


def _fake_clock(*ticks: float):
    values = iter(ticks)
    return lambda: next(values)


def test_operation_runs_repeat_plus_one_times() -> None:
    calls = []

    def operation() -> int:
        calls.append(1)
        return len(calls)

    result = run_candidate(7, None, operation)
    assert len(calls) == 8
    assert result.success is True
    assert result.value == 8
    assert result.message == "Success"


def test_consumer_sees_only_looped_returns() -> None:
    seen = []
    result = run_candidate(3, seen.append, lambda: "x")
    assert seen == ["x", "x", "x"]
    assert result.value == "x"


def test_time_is_total_divided_by_repeat() -> None:
    result = run_candidate(4, None, lambda: 1, clock=_fake_clock(10.0, 16.0))
    assert result.time == pytest.approx(1.5)


def test_failure_is_captured_with_message() -> None:
    def operation() -> None:
        raise ValueError("boom")

    result = run_candidate(2, None, operation, clock=_fake_clock(0.0, 1.0))
    assert result.success is False
    assert result.value is None
    assert result.message == "boom"
    assert result.time == pytest.approx(0.5)


def test_failure_in_final_call_is_captured() -> None:
    calls = []

    def operation() -> int:
        calls.append(1)
        if len(calls) > 2:
            raise RuntimeError("late failure")
        return 1

    result = run_candidate(2, None, operation)
    assert len(calls) == 3
    assert result.success is False
    assert result.message == "late failure"


def test_empty_exception_message_falls_back_to_class_name() -> None:
    def operation() -> None:
        raise KeyError()

    assert run_candidate(1, None, operation).message == "KeyError"


def test_not_implemented_candidate_fails_with_fixed_message() -> None:
    result = run_candidate(1, None, not_implemented)
    assert result.success is False
    assert result.message == "Not implemented"


def test_keyboard_interrupt_propagates() -> None:
    def operation() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        run_candidate(1, None, operation)


def test_repeat_must_be_positive() -> None:
    with pytest.raises(ValueError, match="repeat"):
        run_candidate(0, None, lambda: 1)


def test_lazy_results_are_materialized() -> None:
    result = run_candidate(1, consume, lambda: (i * 2 for i in range(3)))
    assert result.value == [0, 2, 4]


def test_materialize_converts_nested_containers() -> None:
    value = (
        MappingProxyType({"id": np.int64(3), "items": (MappingProxyType({"q": 1.5}),)}),
        np.arange(2),
        {1: np.bool_(True)},
    )
    assert materialize(value) == [
        {"id": 3, "items": [{"q": 1.5}]},
        [0, 1],
        {"1": True},
    ]


def test_unmaterializable_result_fails_candidate() -> None:
    result = run_candidate(1, None, lambda: object())
    assert result.success is False
    assert "Cannot materialize" in result.message


def test_colliding_stringified_keys_fail_candidate() -> None:
    with pytest.raises(TypeError, match="colliding key '1'"):
        materialize({1: "a", "1": "b"})

    result = run_candidate(1, None, lambda: {1: "a", "1": "b"})
    assert result.success is False
    assert "colliding key" in result.message


def test_consume_walks_nested_properties() -> None:
    visited = []

    def items(order_id: int):
        for value in range(order_id):
            visited.append((order_id, value))
            yield value

    consume([{"items": items(1)}, {"items": items(2)}], {"items": None})
    assert visited == [(1, 0), (2, 0), (2, 1)]
