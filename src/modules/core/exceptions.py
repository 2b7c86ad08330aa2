"""Domain error taxonomy and the API exception handler.

Collection-specific exceptions (``DishNotFound``, ``InvalidOrder`` ...)
extend ``NotFound`` or ``BadRequest``.  Every error reaching the API
layer is rendered by ``api_exception_handler`` as ``{status, message}``
with the matching HTTP status code.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = structlog.get_logger(__name__)


class DomainError(Exception):
    """Base class for client-visible business rule violations."""

    status_code = status.HTTP_400_BAD_REQUEST

    @property
    def message(self) -> str:
        return str(self)


class NotFound(DomainError):
    """The resource id is not present in its collection."""

    status_code = status.HTTP_404_NOT_FOUND


class BadRequest(DomainError):
    """Missing/invalid field or an illegal state transition."""

    status_code = status.HTTP_400_BAD_REQUEST


def error_body(status_code: int, message: str) -> Dict[str, Any]:
    return {"status": status_code, "message": message}


def _detail_message(data: Any) -> str:
    if isinstance(data, dict):
        if "detail" in data:
            return str(data["detail"])
        return "; ".join(f"{key}: {_detail_message(value)}" for key, value in data.items())
    if isinstance(data, list):
        return "; ".join(_detail_message(item) for item in data)
    return str(data)


def api_exception_handler(exc: Exception, context: Dict[str, Any]) -> Optional[Response]:
    """DRF ``EXCEPTION_HANDLER`` producing the ``{status, message}`` body.

    Unknown exceptions are left to Django (``None`` return) so they
    surface as server errors instead of being swallowed.
    """
    if isinstance(exc, DomainError):
        logger.info(
            "api.domain_error",
            error=type(exc).__name__,
            status_code=exc.status_code,
            message=exc.message,
        )
        return Response(error_body(exc.status_code, exc.message), status=exc.status_code)

    response = drf_exception_handler(exc, context)
    if response is None:
        return None

    response.data = error_body(response.status_code, _detail_message(response.data))
    return response
