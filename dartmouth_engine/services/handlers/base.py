"""Shared scaffolding for concrete response handlers."""

from __future__ import annotations

import random
import time
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from dartmouth_engine.core.intents import Intent
from dartmouth_engine.core.models import HandlerContext, Response, ResponseMetadata


class BaseHandler(ABC):
    """Base class wiring the name/version/priority contract and template picking.

    Subclasses set ``name``, ``version`` and ``priority`` as class attributes.
    Lower priorities are evaluated first by the router.
    """

    name: str = ""
    version: str = "1.0.0"
    priority: int = 100

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    @abstractmethod
    def can_handle(self, intent: Intent) -> bool:
        """Return True when this handler claims ``intent``."""

    @abstractmethod
    async def handle(self, message: str, intent: Intent, context: HandlerContext) -> Response:
        """Produce the reply for ``message``."""

    def choose(self, templates: Sequence[str]) -> str:
        """Pick one template uniformly at random from the injected source."""
        return self._rng.choice(list(templates))

    def metadata(self, started: float, *, confidence: float, **extra: Any) -> ResponseMetadata:
        """Build response metadata stamped with this handler's identity."""
        return ResponseMetadata(
            handler_name=self.name,
            handler_version=self.version,
            confidence=confidence,
            processing_time_ms=(time.perf_counter() - started) * 1000.0,
            **extra,
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, priority={self.priority})"


__all__ = ["BaseHandler"]
