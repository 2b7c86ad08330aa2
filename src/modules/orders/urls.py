"""Order URL configuration."""

from __future__ import annotations

from django.urls import re_path

from modules.orders.views import OrderDetailView, OrderListView

urlpatterns = [
    re_path(r"^orders/?$", OrderListView.as_view(), name="order-list"),
    re_path(r"^orders/(?P<order_id>[^/]+)/?$", OrderDetailView.as_view(), name="order-detail"),
]
