"""Application service layer: response routing and the default handler set."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING, Optional

from dartmouth_engine.core.config import settings

if TYPE_CHECKING:  # pragma: no cover - type narrowing only
    from .response_router import ResponseRouter


def build_default_router(
    *,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> "ResponseRouter":
    """Return a router wired with the canonical handler set.

    All handlers share one random source so a single seed fixes every
    template choice.
    """

    # pylint: disable=import-outside-toplevel
    from .handlers import (
        CalculationHandler,
        FallbackHandler,
        GratitudeHandler,
        GreetingHandler,
        RepeatHandler,
        SizeCalculationHandler,
    )
    from .response_router import ResponseRouter

    if rng is None:
        rng = random.Random(seed if seed is not None else settings.RESPONSE_RANDOM_SEED)
    router = ResponseRouter(fallback=FallbackHandler(rng))
    for handler in (
        SizeCalculationHandler(rng),
        CalculationHandler(rng),
        GratitudeHandler(rng),
        RepeatHandler(rng),
        GreetingHandler(rng),
    ):
        router.register(handler)
    return router


__all__ = ["build_default_router"]
