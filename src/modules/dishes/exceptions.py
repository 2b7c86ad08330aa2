"""Dish domain exceptions.

Raised by the validation stages and the Service Layer.  The API
exception handler translates them into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import BadRequest, NotFound


class DishNotFound(NotFound):
    """No dish matches the requested id."""


class InvalidDish(BadRequest):
    """The dish payload is missing a field or carries an invalid value."""
