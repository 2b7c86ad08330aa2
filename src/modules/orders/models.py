"""Order record with its dish lines.

Business rules (enforced by ``modules.orders.validators``):
- ``deliverTo`` and ``mobileNumber`` are non-empty.
- ``dishes`` is a non-empty list; each line quantity is an integer > 0.
- ``status`` is one of ``OrderStatus``; ``delivered`` is terminal.
- Only ``pending`` orders can be deleted.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from modules.orders.constants import DELETABLE_STATES, TERMINAL_STATES, OrderStatus


class OrderLine(BaseModel):
    """A dish and its quantity.

    Lines keep whatever else the client sent with them (``dishId``, an
    embedded dish snapshot ...) and echo it back unchanged.
    """

    model_config = ConfigDict(extra="allow")

    quantity: int

    @property
    def dish_id(self) -> Optional[Any]:
        return (self.model_extra or {}).get("dishId")

    def to_representation(self) -> Dict[str, Any]:
        return self.model_dump()


class Order(BaseModel):
    """Order aggregate.  Attributes are snake_case, the wire format camelCase."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    deliver_to: str = Field(alias="deliverTo")
    mobile_number: str = Field(alias="mobileNumber")
    status: str = OrderStatus.PENDING.value
    dishes: List[OrderLine]

    # ------------------------------------------------------------------
    # Lifecycle helpers
    # ------------------------------------------------------------------

    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATES

    def is_deletable(self) -> bool:
        return self.status in DELETABLE_STATES

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def to_representation(self) -> Dict[str, Any]:
        data = self.model_dump(by_alias=True, exclude={"dishes"})
        data["dishes"] = [line.to_representation() for line in self.dishes]
        return data

    def __str__(self) -> str:
        return f"{self.id} ({self.status})"
