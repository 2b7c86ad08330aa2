"""Order service layer (Use Cases).

Orchestrates order creation, update and deletion through the injected
repository.  Every write runs inside ``repository.atomic()`` so the
status checks and the mutation see the same stored record.

Business rules enforced here as well as in the pipeline stages:
- A delivered order cannot be changed.
- Only a pending order can be deleted.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List

import structlog

from modules.orders.exceptions import OrderAlreadyDelivered, OrderNotDeletable, OrderNotFound
from modules.orders.models import Order

if TYPE_CHECKING:
    from modules.core.repositories.interfaces import IRepository
    from modules.orders.dtos import OrderDTO

logger = structlog.get_logger(__name__)


class OrderService:
    """Application service for Order use-cases.

    Receives an ``IRepository[Order]`` via constructor injection (DIP).
    """

    def __init__(self, repository: IRepository[Order]) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create_order(self, dto: OrderDTO) -> Order:
        """Store a new order under a freshly generated id."""
        with self._repo.atomic():
            order = Order(id=self._repo.next_id(), **dto.order_fields())
            order = self._repo.insert(order)
        logger.info(
            "order.created",
            order_id=order.id,
            status=order.status,
            lines=len(order.dishes),
        )
        return order

    def update_order(self, order_id: str, dto: OrderDTO) -> Order:
        """Replace the delivery fields, status and dishes of an order.

        Raises:
            OrderNotFound: order does not exist.
            OrderAlreadyDelivered: the stored order is delivered.
        """
        with self._repo.atomic():
            order = self._get_or_raise(order_id)
            log = logger.bind(order_id=order_id, current_status=order.status, new_status=dto.status)
            if order.is_terminal():
                log.warning("order.update_rejected")
                raise OrderAlreadyDelivered("A delivered order cannot be changed")
            updated = self._repo.update(order.model_copy(update=dto.order_fields()))
        log.info("order.updated")
        return updated

    def delete_order(self, order_id: str) -> None:
        """Remove a pending order.

        Raises:
            OrderNotFound: order does not exist.
            OrderNotDeletable: the order is not pending.
        """
        with self._repo.atomic():
            order = self._get_or_raise(order_id)
            if not order.is_deletable():
                logger.warning("order.delete_rejected", order_id=order_id, status=order.status)
                raise OrderNotDeletable("An order cannot be deleted unless it is pending")
            self._repo.delete(order_id)
        logger.info("order.deleted", order_id=order_id)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_order(self, order_id: str) -> Order:
        """Retrieve a single order by id.

        Raises:
            OrderNotFound: if the order does not exist.
        """
        return self._get_or_raise(order_id)

    def list_orders(self) -> List[Order]:
        return self._repo.list()

    def _get_or_raise(self, order_id: str) -> Order:
        order = self._repo.get_by_id(order_id)
        if order is None:
            raise OrderNotFound(f"Order id could not be found: {order_id}")
        return order
