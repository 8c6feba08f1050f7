"""Conversions from the read-only dataset into library containers."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import numpy as np
import pandas as pd
import polars as pl

from ..data import Record


def plain_records(records: Iterable[Record]) -> list[dict[str, Any]]:
    return [dict(record) for record in records]


def plain_orders(orders: Iterable[Record]) -> list[dict[str, Any]]:
    return [
        {
            "id": order["id"],
            "customer_id": order["customer_id"],
            "items": [dict(item) for item in order["items"]],
        }
        for order in orders
    ]


def pandas_frame(records: Iterable[Record]) -> pd.DataFrame:
    return pd.DataFrame(plain_records(records))


def pandas_orders(orders: Iterable[Record]) -> pd.DataFrame:
    return pd.DataFrame(plain_orders(orders))


def polars_frame(records: Iterable[Record]) -> pl.DataFrame:
    return pl.from_dicts(plain_records(records))


def polars_orders(orders: Iterable[Record]) -> pl.DataFrame:
    return pl.from_dicts(plain_orders(orders))


def column(records: Iterable[Record], key: str) -> np.ndarray:
    """Collect one integer field of ``records`` into a numpy array."""
    return np.fromiter((record[key] for record in records), dtype=np.int64)


def item_lengths(orders: Iterable[Record]) -> np.ndarray:
    return np.fromiter((len(order["items"]) for order in orders), dtype=np.int64)
