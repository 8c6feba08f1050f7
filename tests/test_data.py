"""Tests for synthetic dataset generation."""

from __future__ import annotations

import pytest

from querybench.data import MIN_DATASET_SIZE, generate_dataset
from querybench.errors import InvalidInputError


def test_generate_rejects_size_below_minimum() -> None:
    with pytest.raises(InvalidInputError, match="QB_INVALID_INPUT"):
        generate_dataset(MIN_DATASET_SIZE - 1)


def test_generate_accepts_minimum_size() -> None:
    data = generate_dataset(10)
    assert len(data.categories) == 1
    assert len(data.products) == 10
    assert len(data.users) == 1
    assert len(data.orders) == 10
    assert len(data.strings) == 10
    assert data.size == 10


def test_collection_lengths_use_integer_division() -> None:
    data = generate_dataset(57, seed=1)
    assert len(data.categories) == 5
    assert len(data.users) == 5
    assert len(data.products) == 57
    assert len(data.orders) == 57


def test_every_reference_points_at_existing_record() -> None:
    data = generate_dataset(200, seed=7)
    category_ids = {category["id"] for category in data.categories}
    user_ids = {user["id"] for user in data.users}
    product_ids = {product["id"] for product in data.products}

    assert all(product["category_id"] in category_ids for product in data.products)
    assert all(order["customer_id"] in user_ids for order in data.orders)
    assert all(
        item["product_id"] in product_ids for order in data.orders for item in order["items"]
    )


def test_random_values_stay_in_documented_ranges() -> None:
    data = generate_dataset(300, seed=11)
    assert all(1 <= product["quantity"] <= 100 for product in data.products)
    assert all(0 <= user["rating"] <= 10 for user in data.users)
    assert all(1 <= len(order["items"]) <= 10 for order in data.orders)
    assert all(
        0 <= item["quantity"] <= 10 for order in data.orders for item in order["items"]
    )


def test_ids_follow_generation_order() -> None:
    data = generate_dataset(30, seed=2)
    assert [product["id"] for product in data.products] == list(range(1, 31))
    assert [order["id"] for order in data.orders] == list(range(1, 31))


def test_strings_are_unique_prefixed_tokens() -> None:
    data = generate_dataset(500, seed=3)
    assert len(set(data.strings)) == 500
    assert all(value.startswith("s-") for value in data.strings)


def test_records_are_read_only() -> None:
    data = generate_dataset(10, seed=0)
    with pytest.raises(TypeError):
        data.products[0]["quantity"] = 0  # type: ignore[index]
    with pytest.raises(TypeError):
        data.orders[0]["items"][0]["quantity"] = 0  # type: ignore[index]


def test_seed_pins_content() -> None:
    first = generate_dataset(40, seed=5)
    second = generate_dataset(40, seed=5)
    assert [dict(p) for p in first.products] == [dict(p) for p in second.products]
    assert first.strings == second.strings
