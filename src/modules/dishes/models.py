"""Dish record.

Business rules (enforced by ``modules.dishes.validators``):
- ``name``, ``description`` and ``image_url`` are non-empty.
- ``price`` is a number greater than zero.
- ``id`` is assigned at creation and never changes.
- Dishes are never deleted.
"""

from __future__ import annotations

from typing import Any, Dict, Union

from pydantic import BaseModel


class Dish(BaseModel):
    """Menu item.  ``price`` keeps the submitted numeric type."""

    id: str
    name: str
    description: str
    price: Union[int, float]
    image_url: str

    def to_representation(self) -> Dict[str, Any]:
        return self.model_dump()

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
