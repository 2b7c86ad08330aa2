"""Ordered request pipeline: lookup and validation stages, then a handler.

Stages are plain callables ``(RequestContext) -> Result``.  The
``Pipeline`` runs them left to right and stops at the first ``Err``;
the handler is only invoked once every stage has returned ``Ok``.
Rejections are raised as the domain exception carried by the ``Err``
so the API exception handler can render them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar

import structlog

from shared.domain.result import OK, Err, Result

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@dataclass
class RequestContext:
    """State shared by the stages of a single request.

    ``locals`` holds what earlier stages resolved (e.g. the stored
    record found by a lookup stage) for later stages and the handler.
    """

    payload: Dict[str, Any] = field(default_factory=dict)
    route_id: Optional[str] = None
    locals: Dict[str, Any] = field(default_factory=dict)


Stage = Callable[[RequestContext], Result]


def stage_name(stage: Stage) -> str:
    return getattr(stage, "__name__", repr(stage))


class Pipeline:
    """First-error-wins composition of stages."""

    def __init__(self, *stages: Stage) -> None:
        self._stages: Tuple[Stage, ...] = stages

    def check(self, context: RequestContext) -> Result:
        """Run every stage and return the first ``Err``, or ``OK``."""
        for stage in self._stages:
            result = stage(context)
            if not result.is_ok:
                logger.warning(
                    "pipeline.rejected",
                    stage=stage_name(stage),
                    reason=result.message,
                    route_id=context.route_id,
                )
                return result
        return OK

    def run(self, context: RequestContext, handler: Callable[[RequestContext], T]) -> T:
        """Run the stages, then ``handler`` if all of them passed.

        Raises:
            The domain exception of the first failing stage.
        """
        result = self.check(context)
        if isinstance(result, Err):
            raise result.to_exception()
        return handler(context)
