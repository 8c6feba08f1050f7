"""Categories with their in-stock products, ordered for display."""

from __future__ import annotations

from itertools import groupby
from typing import Any

import polars as pl

from ..data import Dataset, Record
from ..runner import consume, not_implemented
from ..types import Candidate, Scenario
from ._records import pandas_frame, polars_frame


def _consume_products(categories: Any) -> None:
    consume(categories, {"products": None})


def readme_example(data: Dataset) -> Scenario:
    categories, products = data.categories, data.products

    def python_for() -> list[dict[str, Any]]:
        by_category: dict[int, list[Record]] = {}
        for product in products:
            if product["quantity"] > 0:
                by_category.setdefault(product["category_id"], []).append(product)
        for grouped in by_category.values():
            grouped.sort(key=lambda p: (-p["quantity"], p["name"]))
        result = []
        for category in sorted(categories, key=lambda c: c["name"]):
            result.append(
                {
                    "id": category["id"],
                    "name": category["name"],
                    "products": by_category.get(category["id"], []),
                }
            )
        return result

    def python_groupby() -> list[dict[str, Any]]:
        in_stock = sorted(
            (p for p in products if p["quantity"] > 0),
            key=lambda p: (p["category_id"], -p["quantity"], p["name"]),
        )
        by_category = {
            key: list(group) for key, group in groupby(in_stock, key=lambda p: p["category_id"])
        }
        return [
            {"id": c["id"], "name": c["name"], "products": by_category.get(c["id"], [])}
            for c in sorted(categories, key=lambda c: c["name"])
        ]

    def pandas_groupby() -> list[dict[str, Any]]:
        frame = pandas_frame(products)
        in_stock = frame[frame["quantity"] > 0].sort_values(
            ["quantity", "name"], ascending=[False, True]
        )
        by_category = {
            key: group.to_dict("records")
            for key, group in in_stock.groupby("category_id", sort=False)
        }
        ordered = pandas_frame(categories).sort_values("name")
        return [
            {"id": row["id"], "name": row["name"], "products": by_category.get(row["id"], [])}
            for row in ordered.to_dict("records")
        ]

    def polars_group_by() -> list[dict[str, Any]]:
        grouped = (
            polars_frame(products)
            .filter(pl.col("quantity") > 0)
            .sort(["quantity", "name"], descending=[True, False])
            .with_columns(pl.col("category_id").alias("group"))
            .group_by("group", maintain_order=True)
            .agg(pl.struct("id", "name", "category_id", "quantity").alias("products"))
        )
        by_category = {row["group"]: row["products"] for row in grouped.to_dicts()}
        return [
            {"id": row["id"], "name": row["name"], "products": by_category.get(row["id"], [])}
            for row in polars_frame(categories).sort("name").to_dicts()
        ]

    return Scenario(
        name="Process data from ReadMe example",
        repeat=5,
        consumer=_consume_products,
        groups={
            "Python": [Candidate(python_for, "for"), Candidate(python_groupby, "groupby")],
            "NumPy": [Candidate(not_implemented)],
            "pandas": [Candidate(pandas_groupby)],
            "Polars": [Candidate(polars_group_by)],
        },
    )
