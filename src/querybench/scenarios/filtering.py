"""Filtering orders, shallow and by nested items."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd
import polars as pl

from ..data import Dataset, Record
from ..runner import consume
from ..types import Candidate, Scenario
from ._records import column, item_lengths, pandas_orders, polars_orders


def _consume_items(orders: Any) -> None:
    consume(orders, {"items": None})


def filtering(data: Dataset) -> Scenario:
    orders = data.orders

    def python_for() -> list[Record]:
        result = []
        for order in orders:
            if len(order["items"]) > 5:
                result.append(order)
        return result

    def python_comprehension() -> list[Record]:
        return [order for order in orders if len(order["items"]) > 5]

    def python_filter() -> filter:
        return filter(lambda order: len(order["items"]) > 5, orders)

    def numpy_mask() -> list[Record]:
        return [orders[k] for k in np.flatnonzero(item_lengths(orders) > 5)]

    def pandas_map() -> list[dict[str, Any]]:
        frame = pandas_orders(orders)
        return frame[frame["items"].map(len) > 5].to_dict("records")

    def polars_filter() -> list[dict[str, Any]]:
        return polars_orders(orders).filter(pl.col("items").list.len() > 5).to_dicts()

    def polars_lazy() -> list[dict[str, Any]]:
        return (
            polars_orders(orders)
            .lazy()
            .filter(pl.col("items").list.len() > 5)
            .collect()
            .to_dicts()
        )

    return Scenario(
        name="Filtering values in arrays",
        consumer=consume,
        groups={
            "Python": [
                Candidate(python_for, "for"),
                Candidate(python_comprehension, "comprehension"),
                Candidate(python_filter, "filter"),
            ],
            "NumPy": [Candidate(numpy_mask)],
            "pandas": [Candidate(pandas_map)],
            "Polars": [Candidate(polars_filter), Candidate(polars_lazy, "lazy")],
        },
    )


def filtering_deep(data: Dataset) -> Scenario:
    orders = data.orders

    def python_for() -> list[dict[str, Any]]:
        result = []
        for order in orders:
            items = []
            for item in order["items"]:
                if item["quantity"] > 5:
                    items.append(item)
            if items:
                result.append({"id": order["id"], "items": items})
        return result

    def python_comprehension() -> list[dict[str, Any]]:
        projected = (
            {"id": order["id"], "items": [item for item in order["items"] if item["quantity"] > 5]}
            for order in orders
        )
        return [order for order in projected if order["items"]]

    def numpy_mask() -> list[dict[str, Any]]:
        items = [item for order in orders for item in order["items"]]
        owners = np.repeat(np.arange(len(orders)), item_lengths(orders))
        kept: dict[int, list[Record]] = {}
        for k in np.flatnonzero(column(items, "quantity") > 5):
            kept.setdefault(int(owners[k]), []).append(items[k])
        return [{"id": orders[owner]["id"], "items": hot} for owner, hot in kept.items()]

    def pandas_map() -> list[dict[str, Any]]:
        frame = pandas_orders(orders)
        projected = pd.DataFrame(
            {
                "id": frame["id"],
                "items": frame["items"].map(
                    lambda items: [item for item in items if item["quantity"] > 5]
                ),
            }
        )
        return projected[projected["items"].map(len) > 0].to_dict("records")

    def polars_list_eval() -> list[dict[str, Any]]:
        hot = pl.element().struct.field("quantity") > 5
        return (
            polars_orders(orders)
            .select(pl.col("id"), pl.col("items").list.eval(pl.element().filter(hot)))
            .filter(pl.col("items").list.len() > 0)
            .to_dicts()
        )

    return Scenario(
        name="Filtering values in arrays deep",
        consumer=_consume_items,
        groups={
            "Python": [
                Candidate(python_for, "for"),
                Candidate(python_comprehension, "comprehension"),
            ],
            "NumPy": [Candidate(numpy_mask)],
            "pandas": [Candidate(pandas_map)],
            "Polars": [Candidate(polars_list_eval)],
        },
    )
