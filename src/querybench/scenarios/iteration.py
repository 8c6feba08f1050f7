"""Iteration, sequence generation and lookup building over ``0..n-1``."""

from __future__ import annotations

import math
from collections import defaultdict
from itertools import chain

import numpy as np
import pandas as pd
import polars as pl

from ..runner import consume
from ..types import Candidate, Scenario


def _lookup_value(i: int) -> float:
    return math.sin(i) if i % 2 else math.cos(i)


def iterating(n: int) -> Scenario:
    def python_for() -> int | None:
        last = None
        for i in range(n):
            last = i
        return last

    def python_while() -> int | None:
        last = None
        i = 0
        while i < n:
            last = i
            i += 1
        return last

    def numpy_arange() -> int | None:
        last = None
        for i in np.arange(n):
            last = i
        return last

    def pandas_range_index() -> int | None:
        last = None
        for i in pd.RangeIndex(n):
            last = i
        return last

    def polars_int_range() -> int | None:
        last = None
        for i in pl.int_range(0, n, eager=True):
            last = i
        return last

    return Scenario(
        name=f"Iterating over {n} ints",
        groups={
            "Python": [Candidate(python_for, "for"), Candidate(python_while, "while")],
            "NumPy": [Candidate(numpy_arange)],
            "pandas": [Candidate(pandas_range_index)],
            "Polars": [Candidate(polars_int_range)],
        },
    )


def generating(n: int) -> Scenario:
    def python_for() -> list[int]:
        values = []
        for i in range(n):
            values.append(i)
        return values

    def python_comprehension() -> list[int]:
        return [i for i in range(n)]

    def python_range() -> list[int]:
        return list(range(n))

    return Scenario(
        name=f"Generating array of {n} integers",
        consumer=consume,
        groups={
            "Python": [
                Candidate(python_for, "for"),
                Candidate(python_comprehension, "comprehension"),
                Candidate(python_range, "range"),
            ],
            "NumPy": [Candidate(lambda: np.arange(n))],
            "pandas": [Candidate(lambda: pd.Series(range(n)))],
            "Polars": [Candidate(lambda: pl.int_range(0, n, eager=True))],
        },
    )


def lookup_sum(n: int) -> Scenario:
    def python_for() -> float:
        lookup: dict[str, list[float]] = {}
        for i in range(n):
            lookup.setdefault(str(math.tan(i % 100)), []).append(_lookup_value(i))
        total = 0.0
        for values in lookup.values():
            for value in values:
                total += value
        return total

    def python_defaultdict() -> float:
        lookup: defaultdict[str, list[float]] = defaultdict(list)
        for i in range(n):
            lookup[str(math.tan(i % 100))].append(_lookup_value(i))
        return sum(chain.from_iterable(lookup.values()))

    def numpy_unique() -> float:
        index = np.arange(n)
        values = np.where(index % 2 == 1, np.sin(index), np.cos(index))
        _, inverse = np.unique(np.tan(index % 100), return_inverse=True)
        order = np.argsort(inverse, kind="stable")
        groups = np.split(values[order], np.cumsum(np.bincount(inverse))[:-1])
        return float(sum(group.sum() for group in groups))

    def pandas_groupby() -> float:
        index = pd.Series(np.arange(n))
        values = pd.Series(np.where(index % 2 == 1, np.sin(index), np.cos(index)))
        return float(values.groupby(np.tan(index % 100), sort=False).sum().sum())

    def polars_group_by() -> float:
        as_float = pl.col("i").cast(pl.Float64)
        lookup = (
            pl.DataFrame({"i": np.arange(n)})
            .select(
                (pl.col("i") % 100).cast(pl.Float64).tan().alias("key"),
                pl.when(pl.col("i") % 2 == 1)
                .then(as_float.sin())
                .otherwise(as_float.cos())
                .alias("value"),
            )
            .group_by("key", maintain_order=True)
            .agg(pl.col("value").sum())
        )
        return float(lookup["value"].sum())

    return Scenario(
        name=f"Generating lookup of {n} floats, calculate sum",
        groups={
            "Python": [Candidate(python_for, "for"), Candidate(python_defaultdict, "defaultdict")],
            "NumPy": [Candidate(numpy_unique)],
            "pandas": [Candidate(pandas_groupby)],
            "Polars": [Candidate(polars_group_by)],
        },
    )
