"""Core exception types shared across layers."""

from __future__ import annotations

from dataclasses import dataclass


class RoutingError(RuntimeError):
    """Base error for response routing failures."""


class DuplicateHandlerError(RoutingError):
    """Raised when a handler name is registered twice."""

    def __init__(self, handler_name: str) -> None:
        super().__init__(f"A handler named {handler_name!r} is already registered")
        self.handler_name = handler_name


class HandlerExecutionError(RoutingError):
    """Wraps an exception raised by a handler while producing a response.

    The router recovers from this error itself; it is never propagated to the
    caller of ``route``.
    """

    def __init__(self, handler_name: str, reason: str) -> None:
        super().__init__(f"Handler {handler_name!r} failed: {reason}")
        self.handler_name = handler_name


class ContractViolationError(RoutingError, TypeError):
    """Raised when ``route`` receives a malformed message, intent, or context."""


@dataclass(frozen=True, slots=True)
class UnresolvedIntentNotice:
    """Describes a turn where no specific handler claimed the intent.

    Not an error: the fallback handler always answers these turns.
    """

    intent_type: str
    handlers_evaluated: tuple[str, ...]

    def describe(self) -> str:
        """Return a one-line summary for logging."""
        evaluated = ", ".join(self.handlers_evaluated) or "none"
        return f"No handler claimed intent {self.intent_type!r} (evaluated: {evaluated})"


__all__ = [
    "RoutingError",
    "DuplicateHandlerError",
    "HandlerExecutionError",
    "ContractViolationError",
    "UnresolvedIntentNotice",
]
