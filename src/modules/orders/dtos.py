"""Order DTO for the Service Layer.

Built by the API layer from a payload the validation stages accepted.
Immutable (``frozen=True``).  Accepts the camelCase wire names.
"""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field

from modules.orders.constants import OrderStatus
from modules.orders.models import OrderLine


class OrderDTO(BaseModel):
    """Mutable order fields, as submitted on create and update.

    ``status`` defaults to ``pending`` when the payload omits it.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    deliver_to: str = Field(alias="deliverTo")
    mobile_number: str = Field(alias="mobileNumber")
    status: str = OrderStatus.PENDING.value
    dishes: List[OrderLine]

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> OrderDTO:
        fields = {
            "deliverTo": payload["deliverTo"],
            "mobileNumber": payload["mobileNumber"],
            "dishes": payload["dishes"],
        }
        if payload.get("status"):
            fields["status"] = payload["status"]
        return cls.model_validate(fields)

    def order_fields(self) -> Dict[str, Any]:
        """Field values keyed by ``Order`` attribute name."""
        return {
            "deliver_to": self.deliver_to,
            "mobile_number": self.mobile_number,
            "status": self.status,
            "dishes": [line.model_copy(deep=True) for line in self.dishes],
        }
