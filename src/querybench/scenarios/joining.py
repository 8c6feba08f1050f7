"""Inner join of orders to their customers."""

from __future__ import annotations

from typing import Any

from ..data import Dataset, Record
from ..runner import consume, not_implemented
from ..types import Candidate, Scenario
from ._records import pandas_frame, pandas_orders, polars_frame, polars_orders

_USER_COLUMNS = {"id": "user_id", "name": "user_name", "rating": "user_rating"}


def _pair(row: dict[str, Any]) -> dict[str, Any]:
    return {
        "order": {"id": row["id"], "customer_id": row["customer_id"], "items": row["items"]},
        "user": {"id": row["customer_id"], "name": row["user_name"], "rating": row["user_rating"]},
    }


def joining(data: Dataset) -> Scenario:
    orders, users = data.orders, data.users

    def python_for() -> list[dict[str, Record]]:
        users_by_id: dict[int, Record] = {}
        for user in users:
            users_by_id[user["id"]] = user
        pairs = []
        for order in orders:
            user = users_by_id.get(order["customer_id"])
            if user is not None:
                pairs.append({"order": order, "user": user})
        return pairs

    def python_comprehension() -> list[dict[str, Record]]:
        users_by_id = {user["id"]: user for user in users}
        return [
            {"order": order, "user": users_by_id[order["customer_id"]]}
            for order in orders
            if order["customer_id"] in users_by_id
        ]

    def pandas_merge() -> list[dict[str, Any]]:
        joined = pandas_orders(orders).merge(
            pandas_frame(users).rename(columns=_USER_COLUMNS),
            left_on="customer_id",
            right_on="user_id",
            how="inner",
        ).sort_values("id", kind="stable")
        return [_pair(row) for row in joined.to_dict("records")]

    def polars_join() -> list[dict[str, Any]]:
        joined = (
            polars_orders(orders)
            .join(
                polars_frame(users).rename(_USER_COLUMNS),
                left_on="customer_id",
                right_on="user_id",
                how="inner",
            )
            .sort("id")
        )
        return [_pair(row) for row in joined.to_dicts()]

    return Scenario(
        name="Joining arrays",
        consumer=consume,
        groups={
            "Python": [
                Candidate(python_for, "for"),
                Candidate(python_comprehension, "comprehension"),
            ],
            "NumPy": [Candidate(not_implemented)],
            "pandas": [Candidate(pandas_merge)],
            "Polars": [Candidate(polars_join)],
        },
    )
