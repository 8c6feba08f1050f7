"""Run and time a single candidate operation."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import numpy as np

from .errors import CandidateNotImplementedError
from .types import CandidateResult, Consumer, Operation

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Success"
NOT_IMPLEMENTED_MESSAGE = "Not implemented"

_SCALAR_TYPES = (bool, int, float, str)


def not_implemented() -> None:
    """Mark a candidate as having no implementation for its library."""
    raise CandidateNotImplementedError(NOT_IMPLEMENTED_MESSAGE)


def consume(values: Iterable[Any], props: Mapping[str, Any] | None = None) -> None:
    """
    Iterate ``values`` so that lazy results are fully evaluated.

    ``props`` names nested properties to walk for every element, e.g.
    ``{"items": None}`` also iterates each element's ``items``.
    """
    for value in values:
        if props is None:
            continue
        for prop, nested in props.items():
            consume(value[prop], nested)


def materialize(value: Any) -> Any:
    """Convert a candidate's return value into plain nested Python containers.

    Lazy iterables are drained, library scalars and arrays are unwrapped, and
    mappings get string keys, so results compare structurally.
    """
    if value is None or isinstance(value, _SCALAR_TYPES):
        return value
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return materialize(value.tolist())
    if isinstance(value, Mapping):
        materialized: dict[str, Any] = {}
        for key, item in value.items():
            name = str(key)
            if name in materialized:
                raise TypeError(f"Cannot materialize mapping with colliding key {name!r}")
            materialized[name] = materialize(item)
        return materialized
    if isinstance(value, bytes | bytearray):
        return bytes(value).decode("utf-8")
    if isinstance(value, Iterable):
        return [materialize(item) for item in value]
    raise TypeError(f"Cannot materialize value of type {type(value).__name__}")


def _failure_message(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


def run_candidate(
    repeat: int,
    consumer: Consumer | None,
    operation: Operation,
    *,
    clock: Callable[[], float] = time.perf_counter,
) -> CandidateResult:
    """
    Run ``operation`` ``repeat`` times, then once more to keep its result.

    Every looped return value goes through ``consumer`` when one is given. The
    retained value is materialized before the clock stops. Reported time is the
    total wall-clock time of all ``repeat + 1`` calls divided by ``repeat``.
    Failures are captured in the result and never propagate.
    """
    if repeat < 1:
        raise ValueError(f"repeat must be >= 1, got {repeat!r}")

    value: Any = None
    success = True
    message = SUCCESS_MESSAGE
    started = clock()
    try:
        for _ in range(repeat):
            returned = operation()
            if consumer is not None:
                consumer(returned)
        value = materialize(operation())
    except Exception as exc:
        logger.debug("Candidate failed: %s", exc, exc_info=True)
        success = False
        value = None
        message = _failure_message(exc)
    elapsed = clock() - started

    return CandidateResult(
        success=success,
        value=value,
        message=message,
        time=float(elapsed / repeat),
    )
