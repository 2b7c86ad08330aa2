import time
from typing import Any, Dict

import structlog
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

from modules.core.exceptions import error_body
from modules.core.store import get_store

logger = structlog.get_logger()


def health_check(request: HttpRequest) -> JsonResponse:
    store = get_store()

    start = time.monotonic()
    services: Dict[str, Dict[str, Any]] = {
        "store": {
            "status": "up",
            "dishes": len(store.dishes),
            "orders": len(store.orders),
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    }

    logger.info("health_check_completed", status="healthy")

    return JsonResponse(
        {
            "status": "healthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=200,
    )


def path_not_found(request: HttpRequest, exception: Exception) -> JsonResponse:
    """``handler404``: unknown paths answer in the API error format."""
    return JsonResponse(error_body(404, f"Path not found: {request.path}"), status=404)
