"""Stage factories and field predicates shared by the collection modules."""

from __future__ import annotations

import math
from typing import Any, Type

from modules.core.repositories.interfaces import IRepository
from shared.domain.pipeline import RequestContext, Stage
from shared.domain.result import OK, Err, Ok, Result


def has_text(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_positive_integer(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def record_exists(
    repository: IRepository[Any],
    key: str,
    error: Type[Exception],
    message: str,
) -> Stage:
    """Build a lookup stage resolving ``context.route_id``.

    On success the record is stored in ``context.locals[key]``.
    ``message`` is formatted with ``id``.
    """

    def lookup(context: RequestContext) -> Result:
        record = repository.get_by_id(context.route_id) if context.route_id else None
        if record is None:
            return Err(error, message.format(id=context.route_id))
        context.locals[key] = record
        return Ok(record)

    lookup.__name__ = f"{key}_exists"
    return lookup


def id_matches_route(key: str, error: Type[Exception], message: str) -> Stage:
    """Build a stage rejecting a payload ``id`` that differs from the record.

    An absent or empty payload id is accepted.  ``message`` is formatted
    with ``id`` (payload) and ``route`` (stored record).
    """

    def check(context: RequestContext) -> Result:
        supplied = context.payload.get("id")
        current = context.locals[key].id
        if supplied and supplied != current:
            return Err(error, message.format(id=supplied, route=current))
        return OK

    check.__name__ = f"{key}_id_matches_route"
    return check
