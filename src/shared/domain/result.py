"""Result primitives returned by pipeline stages.

A stage either lets the request through (``Ok``) or rejects it
(``Err``) with the domain exception class to raise and the message
surfaced to the client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Type, Union


@dataclass(frozen=True)
class Ok:
    """Successful stage outcome, optionally carrying a value."""

    value: Any = None

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed stage outcome."""

    kind: Type[Exception]
    message: str

    @property
    def is_ok(self) -> bool:
        return False

    def to_exception(self) -> Exception:
        return self.kind(self.message)


Result = Union[Ok, Err]

OK = Ok()
