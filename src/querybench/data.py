"""Synthetic dataset shared by every benchmark scenario."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

import numpy as np

from .errors import InvalidInputError

MIN_DATASET_SIZE = 10
_TOKEN_BYTES = 12

Record = Mapping[str, Any]


@dataclass(frozen=True)
class Dataset:
    """Read-only collections generated for one harness invocation."""

    categories: tuple[Record, ...]
    products: tuple[Record, ...]
    users: tuple[Record, ...]
    orders: tuple[Record, ...]
    strings: tuple[str, ...]

    @property
    def size(self) -> int:
        return len(self.products)


class _Generator:
    def __init__(self, rng: np.random.Generator) -> None:
        self._rng = rng

    def token(self, prefix: str = "") -> str:
        return f"{prefix}-{self._rng.bytes(_TOKEN_BYTES).hex()}"

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in the closed range ``[low, high]``."""
        return int(self._rng.integers(low, high, endpoint=True))

    def pick_id(self, records: tuple[Record, ...]) -> int:
        return int(records[int(self._rng.integers(0, len(records)))]["id"])

    def categories(self, count: int) -> tuple[Record, ...]:
        return tuple(
            _freeze(
                {
                    "id": i,
                    "name": self.token("category"),
                    "description": self.token("category-desc") + self.token(),
                }
            )
            for i in range(1, count + 1)
        )

    def products(self, count: int, categories: tuple[Record, ...]) -> tuple[Record, ...]:
        return tuple(
            _freeze(
                {
                    "id": i,
                    "name": self.token("product"),
                    "category_id": self.pick_id(categories),
                    "quantity": self.integer(1, 100),
                }
            )
            for i in range(1, count + 1)
        )

    def users(self, count: int) -> tuple[Record, ...]:
        return tuple(
            _freeze({"id": i, "name": self.token("user"), "rating": self.integer(0, 10)})
            for i in range(1, count + 1)
        )

    def orders(
        self,
        count: int,
        users: tuple[Record, ...],
        products: tuple[Record, ...],
    ) -> tuple[Record, ...]:
        orders: list[Record] = []
        for i in range(1, count + 1):
            customer_id = self.pick_id(users)
            items = tuple(
                _freeze({"product_id": self.pick_id(products), "quantity": self.integer(0, 10)})
                for _ in range(self.integer(1, 10))
            )
            orders.append(_freeze({"id": i, "customer_id": customer_id, "items": items}))
        return tuple(orders)

    def strings(self, count: int) -> tuple[str, ...]:
        seen: set[str] = set()
        strings: list[str] = []
        while len(strings) < count:
            value = self.token("s")
            if value in seen:
                continue
            seen.add(value)
            strings.append(value)
        return tuple(strings)


def _freeze(record: dict[str, Any]) -> Record:
    return MappingProxyType(record)


def generate_dataset(size: int, *, seed: int | None = None) -> Dataset:
    """
    Generate the synthetic dataset used by all scenarios.

    Collections are generated in dependency order (categories, products, users,
    orders, strings) and every reference picks uniformly among the records of an
    already generated collection. Content is random; pass ``seed`` to pin it.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidInputError(f"size must be an integer, got {type(size).__name__}")
    if size < MIN_DATASET_SIZE:
        raise InvalidInputError(f"size must be {MIN_DATASET_SIZE} or larger, got {size}")

    gen = _Generator(np.random.default_rng(seed))
    categories = gen.categories(size // 10)
    products = gen.products(size, categories)
    users = gen.users(size // 10)
    orders = gen.orders(size, users, products)
    strings = gen.strings(size)
    return Dataset(
        categories=categories,
        products=products,
        users=users,
        orders=orders,
        strings=strings,
    )
