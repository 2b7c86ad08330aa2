"""Dish URL configuration."""

from __future__ import annotations

from django.urls import re_path

from modules.dishes.views import DishDetailView, DishListView

urlpatterns = [
    re_path(r"^dishes/?$", DishListView.as_view(), name="dish-list"),
    re_path(r"^dishes/(?P<dish_id>[^/]+)/?$", DishDetailView.as_view(), name="dish-detail"),
]
