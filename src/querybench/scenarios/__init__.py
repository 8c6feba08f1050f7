"""Benchmark scenarios comparing plain Python with NumPy, pandas and Polars."""

from __future__ import annotations

from ..data import Dataset
from ..types import Scenario
from .aggregation import aggregating, aggregating_custom
from .counting import counting, counting_deep
from .filtering import filtering, filtering_deep
from .iteration import generating, iterating, lookup_sum
from .joining import joining
from .readme import readme_example
from .sorting import sorting_objects, sorting_strings


def build_scenarios(data: Dataset, size: int) -> list[Scenario]:
    """Return every scenario in report order."""
    return [
        iterating(size),
        generating(size),
        lookup_sum(size),
        counting(data),
        counting_deep(data),
        filtering(data),
        filtering_deep(data),
        sorting_strings(data),
        sorting_objects(data),
        joining(data),
        aggregating(data),
        aggregating_custom(data),
        readme_example(data),
    ]


__all__ = ["build_scenarios"]
