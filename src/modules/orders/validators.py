"""Order pipeline stages.

- ``order_exists``: lookup by route id (404).
- ``order_has_valid_info``: delivery fields and dish lines, first failure wins.
- ``order_has_known_status``: on create, a supplied status must be known.
- ``order_id_matches_route``: payload id, when given, must equal the route id.
- ``order_has_valid_status``: on update, a known status and a non-delivered order.
- ``order_is_pending``: on delete, only pending orders go.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.validators import has_text, id_matches_route, is_positive_integer, record_exists
from modules.orders.constants import STATUS_MESSAGE, OrderStatus
from modules.orders.exceptions import (
    InvalidOrder,
    OrderAlreadyDelivered,
    OrderNotDeletable,
    OrderNotFound,
)
from shared.domain.pipeline import RequestContext, Stage
from shared.domain.result import OK, Err, Result

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import IRepository
    from modules.orders.models import Order


def order_exists(repository: IRepository[Order]) -> Stage:
    return record_exists(repository, "order", OrderNotFound, "Order id could not be found: {id}")


def order_has_valid_info(context: RequestContext) -> Result:
    data = context.payload

    if not has_text(data.get("deliverTo")):
        return Err(InvalidOrder, "Order must include a deliverTo")
    if not has_text(data.get("mobileNumber")):
        return Err(InvalidOrder, "Order must include a mobileNumber")

    dishes = data.get("dishes")
    if dishes is None:
        return Err(InvalidOrder, "Order must include a dish")
    if not isinstance(dishes, list) or not dishes:
        return Err(InvalidOrder, "Order must include at least one dish")

    for index, line in enumerate(dishes):
        quantity = line.get("quantity") if isinstance(line, dict) else None
        if not is_positive_integer(quantity):
            return Err(
                InvalidOrder,
                f"Dish {index} must have a quantity that is an integer greater than 0",
            )
    return OK


def _is_known_status(status: object) -> bool:
    return isinstance(status, str) and status in OrderStatus.values


def order_has_known_status(context: RequestContext) -> Result:
    status = context.payload.get("status")
    if status in (None, "") or _is_known_status(status):
        return OK
    return Err(InvalidOrder, STATUS_MESSAGE)


order_id_matches_route = id_matches_route(
    "order",
    InvalidOrder,
    "Order id does not match route id. Order: {id}, Route: {route}",
)


def order_has_valid_status(context: RequestContext) -> Result:
    if not _is_known_status(context.payload.get("status")):
        return Err(InvalidOrder, STATUS_MESSAGE)
    if context.locals["order"].is_terminal():
        return Err(OrderAlreadyDelivered, "A delivered order cannot be changed")
    return OK


def order_is_pending(context: RequestContext) -> Result:
    if not context.locals["order"].is_deletable():
        return Err(OrderNotDeletable, "An order cannot be deleted unless it is pending")
    return OK
