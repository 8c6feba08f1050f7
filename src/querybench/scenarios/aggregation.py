"""Aggregates over product quantities."""

from __future__ import annotations

from functools import reduce
from typing import Any

import numpy as np
import pandas as pd
import polars as pl

from ..data import Dataset
from ..types import Candidate, Scenario
from ._records import column


def format_number(value: Any) -> str:
    """Render a number without a trailing ``.0`` when it is integral."""
    if isinstance(value, np.generic):
        value = value.item()
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_aggregates(total: Any, average: Any, minimum: Any, maximum: Any) -> str:
    return "-".join(format_number(value) for value in (total, average, minimum, maximum))


def aggregating(data: Dataset) -> Scenario:
    products = data.products

    def python_for() -> str:
        total = 0
        for product in products:
            total += product["quantity"]
        average = 0
        for product in products:
            average += product["quantity"]
        average /= len(products)
        minimum = None
        for product in products:
            if minimum is None or product["quantity"] < minimum:
                minimum = product["quantity"]
        maximum = None
        for product in products:
            if maximum is None or product["quantity"] > maximum:
                maximum = product["quantity"]
        return format_aggregates(total, average, minimum, maximum)

    def python_builtins() -> str:
        quantities = [product["quantity"] for product in products]
        return format_aggregates(
            sum(quantities), sum(quantities) / len(quantities), min(quantities), max(quantities)
        )

    def numpy_reductions() -> str:
        quantities = column(products, "quantity")
        return format_aggregates(
            quantities.sum(), quantities.mean(), quantities.min(), quantities.max()
        )

    def pandas_series() -> str:
        quantities = pd.Series(column(products, "quantity"))
        return format_aggregates(
            quantities.sum(), quantities.mean(), quantities.min(), quantities.max()
        )

    def pandas_agg() -> str:
        stats = pd.Series(column(products, "quantity")).agg(["sum", "mean", "min", "max"])
        return format_aggregates(stats["sum"], stats["mean"], stats["min"], stats["max"])

    def polars_series() -> str:
        quantities = pl.Series("quantity", column(products, "quantity"))
        return format_aggregates(
            quantities.sum(), quantities.mean(), quantities.min(), quantities.max()
        )

    def polars_select() -> str:
        quantity = pl.col("quantity")
        row = (
            pl.DataFrame({"quantity": column(products, "quantity")})
            .select(
                quantity.sum().alias("sum"),
                quantity.mean().alias("mean"),
                quantity.min().alias("min"),
                quantity.max().alias("max"),
            )
            .row(0)
        )
        return format_aggregates(*row)

    return Scenario(
        name="Aggregating arrays",
        groups={
            "Python": [Candidate(python_for, "for"), Candidate(python_builtins, "builtins")],
            "NumPy": [Candidate(numpy_reductions)],
            "pandas": [Candidate(pandas_series), Candidate(pandas_agg, "agg")],
            "Polars": [Candidate(polars_series), Candidate(polars_select, "select")],
        },
    )


def aggregating_custom(data: Dataset) -> Scenario:
    products = data.products

    def python_for() -> int:
        total = 0
        for product in products:
            total += product["quantity"] * product["quantity"]
        return total

    def python_reduce() -> int:
        return reduce(lambda acc, p: acc + p["quantity"] * p["quantity"], products, 0)

    def numpy_dot() -> int:
        quantities = column(products, "quantity")
        return int(np.dot(quantities, quantities))

    def pandas_pipe() -> int:
        return int(pd.Series(column(products, "quantity")).pipe(lambda s: (s * s).sum()))

    def polars_select() -> int:
        quantity = pl.col("quantity")
        frame = pl.DataFrame({"quantity": column(products, "quantity")})
        return int(frame.select((quantity * quantity).sum()).item())

    return Scenario(
        name="Aggregating arrays custom",
        groups={
            "Python": [Candidate(python_for, "for"), Candidate(python_reduce, "reduce")],
            "NumPy": [Candidate(numpy_dot)],
            "pandas": [Candidate(pandas_pipe)],
            "Polars": [Candidate(polars_select)],
        },
    )
