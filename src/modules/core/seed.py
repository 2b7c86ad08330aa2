"""Seed the in-memory store from a JSON fixture.

The fixture holds wire-format records, ids included::

    {"dishes": [{"id": "...", "name": "...", ...}],
     "orders": [{"id": "...", "deliverTo": "...", ...}]}
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Tuple, Union

import structlog

from modules.dishes.models import Dish
from modules.orders.models import Order

if TYPE_CHECKING:
    from modules.core.store import Store

logger = structlog.get_logger(__name__)

DEFAULT_SEED_PATH = Path(__file__).resolve().parent / "fixtures" / "seed.json"


def load_seed_data(store: Store, path: Union[str, Path] = DEFAULT_SEED_PATH) -> Tuple[int, int]:
    """Insert the fixture's dishes and orders; return how many of each.

    Records whose id is already stored raise ``DuplicateId``.
    """
    with open(path, encoding="utf-8") as fh:
        raw = json.load(fh)

    dishes = [Dish.model_validate(item) for item in raw.get("dishes", [])]
    orders = [Order.model_validate(item) for item in raw.get("orders", [])]

    with store.dishes.atomic(), store.orders.atomic():
        for dish in dishes:
            store.dishes.insert(dish)
        for order in orders:
            store.orders.insert(order)

    logger.info("seed.loaded", path=str(path), dishes=len(dishes), orders=len(orders))
    return len(dishes), len(orders)
