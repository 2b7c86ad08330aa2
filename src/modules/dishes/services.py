"""Dish service layer (Use Cases).

Orchestrates the dish collection through the injected repository.
Dishes can be listed, read, created and updated; never deleted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.dishes.exceptions import DishNotFound
from modules.dishes.models import Dish

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import IRepository
    from modules.dishes.dtos import DishDTO

logger = structlog.get_logger(__name__)


class DishService:
    """Application service for Dish use-cases.

    Receives an ``IRepository[Dish]`` via constructor injection (DIP).
    """

    def __init__(self, repository: IRepository[Dish]) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_dish(self, dto: DishDTO) -> Dish:
        """Store a new dish under a freshly generated id."""
        with self._repo.atomic():
            dish = Dish(id=self._repo.next_id(), **dto.model_dump())
            dish = self._repo.insert(dish)
        logger.info("dish.created", dish_id=dish.id, name=dish.name)
        return dish

    def update_dish(self, id: str, dto: DishDTO) -> Dish:
        """Overwrite every field of an existing dish except its id.

        Raises:
            DishNotFound: if the dish does not exist.
        """
        with self._repo.atomic():
            dish = self._repo.get_by_id(id)
            if dish is None:
                raise DishNotFound(f"Dish does not exist: {id}")
            updated = self._repo.update(dish.model_copy(update=dto.model_dump()))
        logger.info("dish.updated", dish_id=id)
        return updated

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_dishes(self) -> List[Dish]:
        return self._repo.list()

    def get_dish(self, id: str) -> Dish:
        """Retrieve a single dish by id.

        Raises:
            DishNotFound: if the dish does not exist.
        """
        dish = self._repo.get_by_id(id)
        if dish is None:
            raise DishNotFound(f"Dish does not exist: {id}")
        return dish
