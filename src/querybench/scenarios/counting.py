"""Counting orders by item statistics."""

from __future__ import annotations

import numpy as np
import polars as pl

from ..data import Dataset
from ..types import Candidate, Scenario
from ._records import column, item_lengths, pandas_orders, polars_orders


def counting(data: Dataset) -> Scenario:
    orders = data.orders

    def python_for() -> int:
        count = 0
        for order in orders:
            if len(order["items"]) > 5:
                count += 1
        return count

    def python_sum() -> int:
        return sum(1 for order in orders if len(order["items"]) > 5)

    def python_filter() -> int:
        return len(list(filter(lambda order: len(order["items"]) > 5, orders)))

    def numpy_count_nonzero() -> int:
        return int(np.count_nonzero(item_lengths(orders) > 5))

    def pandas_map() -> int:
        frame = pandas_orders(orders)
        return int((frame["items"].map(len) > 5).sum())

    def polars_filter() -> int:
        return polars_orders(orders).filter(pl.col("items").list.len() > 5).height

    return Scenario(
        name="Counting values in arrays",
        groups={
            "Python": [
                Candidate(python_for, "for"),
                Candidate(python_sum, "sum"),
                Candidate(python_filter, "filter"),
            ],
            "NumPy": [Candidate(numpy_count_nonzero)],
            "pandas": [Candidate(pandas_map)],
            "Polars": [Candidate(polars_filter)],
        },
    )


def counting_deep(data: Dataset) -> Scenario:
    orders = data.orders

    def python_for() -> int:
        count = 0
        for order in orders:
            hot = 0
            for item in order["items"]:
                if item["quantity"] > 5:
                    hot += 1
            if hot > 2:
                count += 1
        return count

    def python_sum() -> int:
        return sum(
            1
            for order in orders
            if sum(1 for item in order["items"] if item["quantity"] > 5) > 2
        )

    def numpy_bincount() -> int:
        quantities = column((item for order in orders for item in order["items"]), "quantity")
        owners = np.repeat(np.arange(len(orders)), item_lengths(orders))
        hot = np.bincount(owners, weights=quantities > 5, minlength=len(orders))
        return int(np.count_nonzero(hot > 2))

    def pandas_map() -> int:
        frame = pandas_orders(orders)
        hot = frame["items"].map(lambda items: sum(1 for item in items if item["quantity"] > 5))
        return int((hot > 2).sum())

    def polars_list_eval() -> int:
        quantity = pl.element().struct.field("quantity")
        hot = pl.col("items").list.eval(quantity.filter(quantity > 5)).list.len()
        return polars_orders(orders).filter(hot > 2).height

    return Scenario(
        name="Counting values in arrays deep",
        groups={
            "Python": [Candidate(python_for, "for"), Candidate(python_sum, "sum")],
            "NumPy": [Candidate(numpy_bincount)],
            "pandas": [Candidate(pandas_map)],
            "Polars": [Candidate(polars_list_eval)],
        },
    )
