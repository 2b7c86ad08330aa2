"""Dish DTO for the Service Layer.

Built by the API layer from a payload the validation stages accepted.
Immutable (``frozen=True``).
"""

from __future__ import annotations

from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict


class DishDTO(BaseModel):
    """Mutable dish fields, as submitted on create and update."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    price: Union[int, float]
    image_url: str

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> DishDTO:
        return cls(
            name=payload["name"],
            description=payload["description"],
            price=payload["price"],
            image_url=payload["image_url"],
        )
