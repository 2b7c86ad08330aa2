from django.urls import include, path

urlpatterns = [
    path("", include("modules.core.urls")),
    # Resource collections
    path("", include("modules.dishes.urls")),
    path("", include("modules.orders.urls")),
]

handler404 = "modules.core.views.path_not_found"
