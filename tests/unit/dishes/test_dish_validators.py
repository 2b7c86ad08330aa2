"""Unit tests for the dish pipeline stages.

Covers:
- dish_is_valid: each required field, price rules, first failure wins.
- dish_exists: lookup against the store.
- dish_id_matches_route: payload id vs stored id.
"""

from __future__ import annotations

import pytest

from modules.dishes.exceptions import DishNotFound, InvalidDish
from modules.dishes.validators import (
    PRICE_MESSAGE,
    dish_exists,
    dish_id_matches_route,
    dish_is_valid,
)
from shared.domain.pipeline import RequestContext

pytestmark = pytest.mark.unit


def _payload(**overrides):
    data = {"name": "Taco", "description": "Spicy", "price": 5, "image_url": "x.png"}
    data.update(overrides)
    return {key: value for key, value in data.items() if value is not ...}


def _check(payload):
    return dish_is_valid(RequestContext(payload=payload))


class TestDishIsValid:
    def test_valid_payload(self):
        assert _check(_payload()).is_ok

    def test_float_price(self):
        assert _check(_payload(price=4.5)).is_ok

    @pytest.mark.parametrize(
        "field, message",
        [
            ("name", "Dish must include a name"),
            ("description", "Dish must include a description"),
            ("price", "Dish must include a price"),
            ("image_url", "Dish must include an image_url"),
        ],
    )
    def test_missing_field(self, field, message):
        result = _check(_payload(**{field: ...}))
        assert result.kind is InvalidDish
        assert result.message == message

    @pytest.mark.parametrize("field", ["name", "description", "image_url"])
    def test_empty_string_is_missing(self, field):
        assert not _check(_payload(**{field: ""})).is_ok

    @pytest.mark.parametrize(
        "price", [0, -1, -0.5, "5", True, [5], float("inf"), float("nan"), -(10**400)]
    )
    def test_invalid_price(self, price):
        result = _check(_payload(price=price))
        assert result.kind is InvalidDish
        assert result.message == PRICE_MESSAGE

    def test_huge_integer_price(self):
        assert _check(_payload(price=10**400)).is_ok

    def test_empty_price_is_missing(self):
        assert _check(_payload(price="")).message == "Dish must include a price"

    def test_first_failing_field_is_reported(self):
        result = _check({"price": -1})
        assert result.message == "Dish must include a name"

    def test_price_checked_before_image_url(self):
        result = _check(_payload(price=0, image_url=...))
        assert result.message == PRICE_MESSAGE


class TestDishExists:
    def test_found(self, store, make_dish):
        dish = make_dish()
        context = RequestContext(route_id=dish.id)

        assert dish_exists(store.dishes)(context).is_ok
        assert context.locals["dish"] == dish

    def test_not_found(self, store):
        result = dish_exists(store.dishes)(RequestContext(route_id="nope"))
        assert result.kind is DishNotFound
        assert result.message == "Dish does not exist: nope"


class TestDishIdMatchesRoute:
    def test_mismatch(self, make_dish):
        dish = make_dish()
        context = RequestContext(payload={"id": "other"}, locals={"dish": dish})

        result = dish_id_matches_route(context)

        assert result.kind is InvalidDish
        assert result.message == f"Dish id does not match route id. Dish: other, Route: {dish.id}"

    def test_matching_or_absent_id(self, make_dish):
        dish = make_dish()
        for payload in ({}, {"id": ""}, {"id": dish.id}):
            context = RequestContext(payload=payload, locals={"dish": dish})
            assert dish_id_matches_route(context).is_ok
