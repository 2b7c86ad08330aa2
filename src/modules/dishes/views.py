"""Dish API views.

Each method runs its pipeline of lookup/validation stages and only
then the ``DishService`` call.  Rejections propagate as domain
exceptions to ``api_exception_handler``.  Dishes cannot be deleted:
``DELETE`` is not routed and answers 405.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from modules.core.envelope import unwrap, wrap
from modules.core.store import get_store
from modules.dishes.dtos import DishDTO
from modules.dishes.models import Dish
from modules.dishes.services import DishService
from modules.dishes.validators import dish_exists, dish_id_matches_route, dish_is_valid
from shared.domain.pipeline import Pipeline, RequestContext


class DishViewMixin:
    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._repo = get_store().dishes
        self._service = DishService(repository=self._repo)


class DishListView(DishViewMixin, APIView):
    """``/dishes``: list and create."""

    def get(self, request: Request) -> Response:
        """GET /dishes"""
        dishes = self._service.list_dishes()
        return Response(wrap([dish.to_representation() for dish in dishes]))

    def post(self, request: Request) -> Response:
        """POST /dishes"""
        pipeline = Pipeline(dish_is_valid)
        context = RequestContext(payload=unwrap(request))
        dish = pipeline.run(context, self._create)
        return Response(wrap(dish.to_representation()), status=status.HTTP_201_CREATED)

    def _create(self, context: RequestContext) -> Dish:
        return self._service.create_dish(DishDTO.from_payload(context.payload))


class DishDetailView(DishViewMixin, APIView):
    """``/dishes/<dish_id>``: read and update."""

    def get(self, request: Request, dish_id: str) -> Response:
        """GET /dishes/{dish_id}"""
        pipeline = Pipeline(dish_exists(self._repo))
        context = RequestContext(route_id=dish_id)
        dish = pipeline.run(context, lambda ctx: ctx.locals["dish"])
        return Response(wrap(dish.to_representation()))

    def put(self, request: Request, dish_id: str) -> Response:
        """PUT /dishes/{dish_id}"""
        pipeline = Pipeline(dish_exists(self._repo), dish_is_valid, dish_id_matches_route)
        context = RequestContext(payload=unwrap(request), route_id=dish_id)
        with self._repo.atomic():
            dish = pipeline.run(context, self._update)
        return Response(wrap(dish.to_representation()))

    def _update(self, context: RequestContext) -> Dish:
        dish = context.locals["dish"]
        return self._service.update_dish(dish.id, DishDTO.from_payload(context.payload))
