"""Order API views.

Each method runs its pipeline of lookup/validation stages, then the
``OrderService`` call.  Mutating pipelines run inside the orders
repository lock so the checks and the write see the same record.
Rejections propagate as domain exceptions to ``api_exception_handler``.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.envelope import unwrap, wrap
from modules.core.store import get_store
from modules.orders.dtos import OrderDTO
from modules.orders.models import Order
from modules.orders.services import OrderService
from modules.orders.validators import (
    order_exists,
    order_has_known_status,
    order_has_valid_info,
    order_has_valid_status,
    order_id_matches_route,
    order_is_pending,
)
from shared.domain.pipeline import Pipeline, RequestContext


class OrderViewMixin:
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repo = get_store().orders
        self._service = OrderService(repository=self._repo)


class OrderListView(OrderViewMixin, APIView):
    """``/orders``: list and create."""

    def get(self, request: Request) -> Response:
        """GET /orders"""
        orders = self._service.list_orders()
        return Response(wrap([order.to_representation() for order in orders]))

    def post(self, request: Request) -> Response:
        """POST /orders

        ``status`` is optional and defaults to ``pending``.
        """
        pipeline = Pipeline(order_has_valid_info, order_has_known_status)
        context = RequestContext(payload=unwrap(request))
        order = pipeline.run(context, self._create)
        return Response(wrap(order.to_representation()), status=status.HTTP_201_CREATED)

    def _create(self, context: RequestContext) -> Order:
        return self._service.create_order(OrderDTO.from_payload(context.payload))


class OrderDetailView(OrderViewMixin, APIView):
    """``/orders/<order_id>``: read, update and delete."""

    def get(self, request: Request, order_id: str) -> Response:
        """GET /orders/{order_id}"""
        pipeline = Pipeline(order_exists(self._repo))
        context = RequestContext(route_id=order_id)
        order = pipeline.run(context, lambda ctx: ctx.locals["order"])
        return Response(wrap(order.to_representation()))

    def put(self, request: Request, order_id: str) -> Response:
        """PUT /orders/{order_id}

        A delivered order cannot be changed.
        """
        pipeline = Pipeline(
            order_exists(self._repo),
            order_has_valid_info,
            order_id_matches_route,
            order_has_valid_status,
        )
        context = RequestContext(payload=unwrap(request), route_id=order_id)
        with self._repo.atomic():
            order = pipeline.run(context, self._update)
        return Response(wrap(order.to_representation()))

    def delete(self, request: Request, order_id: str) -> Response:
        """DELETE /orders/{order_id}

        Only pending orders can be deleted.
        """
        pipeline = Pipeline(order_exists(self._repo), order_is_pending)
        context = RequestContext(route_id=order_id)
        with self._repo.atomic():
            pipeline.run(context, self._delete)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def _update(self, context: RequestContext) -> Order:
        order = context.locals["order"]
        return self._service.update_order(order.id, OrderDTO.from_payload(context.payload))

    def _delete(self, context: RequestContext) -> None:
        self._service.delete_order(context.locals["order"].id)
