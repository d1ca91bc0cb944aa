"""Protocol definitions for pluggable response handlers."""

# pylint: disable=unnecessary-ellipsis

from __future__ import annotations

from typing import Protocol, runtime_checkable

from dartmouth_engine.core.intents import Intent
from dartmouth_engine.core.models import HandlerContext, Response


@runtime_checkable
class Handler(Protocol):
    """Capability every response handler offers to the router.

    Lower ``priority`` values are evaluated first.
    """

    name: str
    version: str
    priority: int

    def can_handle(self, intent: Intent) -> bool:
        """Return True when this handler claims ``intent``."""
        ...

    async def handle(self, message: str, intent: Intent, context: HandlerContext) -> Response:
        """Produce the reply for ``message``."""
        ...


__all__ = ["Handler"]
