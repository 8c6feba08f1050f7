"""Sorting strings and user records."""

from __future__ import annotations

from typing import Any

import numpy as np
import pandas as pd
import polars as pl

from ..data import Dataset, Record
from ..runner import consume
from ..types import Candidate, Scenario
from ._records import column, pandas_frame, polars_frame


def sorting_strings(data: Dataset) -> Scenario:
    strings = data.strings

    def python_sorted() -> list[str]:
        return sorted(strings, key=str.casefold, reverse=True)

    def python_list_sort() -> list[str]:
        result = list(strings)
        result.sort(key=str.casefold, reverse=True)
        return result

    def numpy_argsort() -> np.ndarray:
        values = np.array(strings)
        return values[np.argsort(np.char.lower(values), kind="stable")[::-1]]

    def pandas_sort_values() -> list[str]:
        return (
            pd.Series(strings)
            .sort_values(ascending=False, key=lambda s: s.str.lower())
            .tolist()
        )

    def polars_sort() -> list[str]:
        frame = pl.DataFrame({"s": list(strings)})
        return frame.sort(pl.col("s").str.to_lowercase(), descending=True)["s"].to_list()

    return Scenario(
        name="Sorting arrays of strings",
        consumer=consume,
        groups={
            "Python": [
                Candidate(python_sorted, "sorted"),
                Candidate(python_list_sort, "list.sort"),
            ],
            "NumPy": [Candidate(numpy_argsort)],
            "pandas": [Candidate(pandas_sort_values)],
            "Polars": [Candidate(polars_sort)],
        },
    )


def sorting_objects(data: Dataset) -> Scenario:
    users = data.users

    def python_sorted() -> list[Record]:
        return sorted(users, key=lambda u: (-u["rating"], u["name"], u["id"]))

    def python_multipass() -> list[Record]:
        result = sorted(users, key=lambda u: u["id"])
        result.sort(key=lambda u: u["name"])
        result.sort(key=lambda u: u["rating"], reverse=True)
        return result

    def numpy_lexsort() -> list[Record]:
        names = np.array([user["name"] for user in users])
        order = np.lexsort((column(users, "id"), names, -column(users, "rating")))
        return [users[k] for k in order]

    def pandas_sort_values() -> list[dict[str, Any]]:
        return (
            pandas_frame(users)
            .sort_values(["rating", "name", "id"], ascending=[False, True, True])
            .to_dict("records")
        )

    def polars_sort() -> list[dict[str, Any]]:
        return (
            polars_frame(users)
            .sort(["rating", "name", "id"], descending=[True, False, False])
            .to_dicts()
        )

    return Scenario(
        name="Sorting arrays of objects",
        consumer=consume,
        groups={
            "Python": [
                Candidate(python_sorted, "sorted"),
                Candidate(python_multipass, "multi-pass"),
            ],
            "NumPy": [Candidate(numpy_lexsort)],
            "pandas": [Candidate(pandas_sort_values)],
            "Polars": [Candidate(polars_sort)],
        },
    )
