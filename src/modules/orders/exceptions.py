"""Order domain exceptions.

Raised by the validation stages and the Service Layer when business
rules are violated.  The API exception handler translates them into
HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import BadRequest, NotFound


class OrderNotFound(NotFound):
    """No order matches the requested id."""


class InvalidOrder(BadRequest):
    """The order payload is missing a field or carries an invalid value."""


class OrderAlreadyDelivered(BadRequest):
    """A delivered order cannot be changed."""


class OrderNotDeletable(BadRequest):
    """Only pending orders can be deleted."""
