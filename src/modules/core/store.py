"""The store owning both resource collections.

One ``InMemoryRepository`` per collection, each with its own lock.
Views receive the store through ``get_store()`` rather than importing
collection state directly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modules.core.repositories.memory import InMemoryRepository

if TYPE_CHECKING:
    from modules.dishes.models import Dish
    from modules.orders.models import Order


class Store:
    def __init__(self) -> None:
        self.dishes: InMemoryRepository[Dish] = InMemoryRepository("dishes")
        self.orders: InMemoryRepository[Order] = InMemoryRepository("orders")

    def clear(self) -> None:
        self.dishes.clear()
        self.orders.clear()


# Process-wide store (singleton)

store = Store()


def get_store() -> Store:
    return store
