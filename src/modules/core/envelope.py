"""The ``{data: ...}`` request/response envelope."""

from __future__ import annotations

from typing import Any, Dict

from rest_framework.request import Request


def unwrap(request: Request) -> Dict[str, Any]:
    """Return the ``data`` object of the request body.

    A body without a ``data`` object yields an empty payload, so field
    validation reports the first missing field.
    """
    body = request.data
    data = body.get("data") if isinstance(body, dict) else None
    return data if isinstance(data, dict) else {}


def wrap(data: Any) -> Dict[str, Any]:
    return {"data": data}
