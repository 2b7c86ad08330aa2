"""Dish pipeline stages.

- ``dish_exists``: lookup by route id (404).
- ``dish_is_valid``: required fields and positive price, first failure wins.
- ``dish_id_matches_route``: payload id, when given, must equal the route id.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.validators import has_text, id_matches_route, is_number, record_exists
from modules.dishes.exceptions import DishNotFound, InvalidDish
from shared.domain.pipeline import RequestContext, Stage
from shared.domain.result import OK, Err, Result

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import IRepository
    from modules.dishes.models import Dish

PRICE_MESSAGE = "Dish must have a price that is an integer greater than 0"


def dish_exists(repository: IRepository[Dish]) -> Stage:
    return record_exists(repository, "dish", DishNotFound, "Dish does not exist: {id}")


def dish_is_valid(context: RequestContext) -> Result:
    data = context.payload

    if not has_text(data.get("name")):
        return Err(InvalidDish, "Dish must include a name")
    if not has_text(data.get("description")):
        return Err(InvalidDish, "Dish must include a description")

    price = data.get("price")
    if price is None or price == "":
        return Err(InvalidDish, "Dish must include a price")
    if not is_number(price) or price <= 0:
        return Err(InvalidDish, PRICE_MESSAGE)

    if not has_text(data.get("image_url")):
        return Err(InvalidDish, "Dish must include an image_url")
    return OK


dish_id_matches_route = id_matches_route(
    "dish",
    InvalidDish,
    "Dish id does not match route id. Dish: {id}, Route: {route}",
)
