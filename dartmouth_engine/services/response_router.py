"""Response router: pick exactly one handler per turn and annotate its reply."""

from __future__ import annotations

import time
import uuid
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, MutableSequence, Optional

from pydantic import ValidationError

from dartmouth_engine.core.config import settings
from dartmouth_engine.core.exceptions import (
    ContractViolationError,
    DuplicateHandlerError,
    HandlerExecutionError,
    UnresolvedIntentNotice,
)
from dartmouth_engine.core.intents import Intent
from dartmouth_engine.core.logging import (
    correlation_id_context,
    get_correlation_id,
    get_logger,
    session_id_context,
)
from dartmouth_engine.core.models import (
    ConversationState,
    HandlerContext,
    Response,
    ResponseMetadata,
    RoutingDiagnostics,
)
from dartmouth_engine.core.ports import Handler
from dartmouth_engine.services.handlers.fallback import FallbackHandler

logger = get_logger(__name__)


@dataclass(slots=True)
class TurnResult:
    """A routed response together with the session state after its patch."""

    response: Response
    state: ConversationState


def _coerce_intent(intent: Intent | Mapping[str, Any]) -> Intent:
    if isinstance(intent, Intent):
        return intent
    if isinstance(intent, Mapping):
        try:
            return Intent.model_validate(dict(intent))
        except ValidationError as exc:
            raise ContractViolationError(f"Malformed intent: {exc}") from exc
    raise ContractViolationError(f"Expected an Intent, got {type(intent).__name__}")


class ResponseRouter:
    """Dispatch classified intents to the first handler that claims them.

    Handlers are evaluated by ascending ``priority``; ties go to the handler
    registered first. The fallback handler is held outside the ordered
    registry and is only reached when no other handler claims the intent.
    """

    def __init__(
        self,
        handlers: Optional[Iterable[Handler]] = None,
        *,
        fallback: Optional[Handler] = None,
        failure_message: Optional[str] = None,
    ) -> None:
        self._fallback: Handler = fallback or FallbackHandler()
        self._handlers: MutableSequence[Handler] = []
        self._failure_message = failure_message or settings.HANDLER_FAILURE_MESSAGE
        for handler in handlers or ():
            self.register(handler)

    @property
    def fallback(self) -> Handler:
        """Handler answering intents nothing else claims."""
        return self._fallback

    def register(self, handler: Handler) -> None:
        """Add ``handler`` to the registry; names must be unique."""

        if not isinstance(handler, Handler):
            raise ContractViolationError(f"{handler!r} does not implement the handler protocol")
        priority = handler.priority
        if isinstance(priority, bool) or not isinstance(priority, int):
            raise ContractViolationError(
                f"Handler {handler.name!r} priority must be an int, got {priority!r}"
            )
        taken = {existing.name for existing in self._handlers}
        taken.add(self._fallback.name)
        if handler.name in taken:
            raise DuplicateHandlerError(handler.name)
        self._handlers.append(handler)
        logger.debug(
            "[response-router] Registered %s v%s (priority=%s)",
            handler.name,
            handler.version,
            handler.priority,
        )

    def unregister(self, name: str) -> None:
        """Remove the handler called ``name`` if present."""

        self._handlers[:] = [handler for handler in self._handlers if handler.name != name]

    def handlers(self) -> tuple[Handler, ...]:
        """Return every handler in evaluation order, fallback last."""

        return (*self._ordered(), self._fallback)

    def _ordered(self) -> list[Handler]:
        # sorted() is stable, so equal priorities keep registration order.
        return sorted(self._handlers, key=lambda handler: handler.priority)

    async def route(
        self,
        message: str,
        intent: Intent | Mapping[str, Any],
        context: HandlerContext,
    ) -> Response:
        """Select one handler for ``intent``, invoke it, and return its annotated response.

        Never raises for well-formed inputs: a failing handler yields a
        degraded response with zero confidence instead.
        """

        if not isinstance(message, str):
            raise ContractViolationError(f"Expected message text, got {type(message).__name__}")
        resolved = _coerce_intent(intent)
        if not isinstance(context, HandlerContext):
            raise ContractViolationError(
                f"Expected a HandlerContext, got {type(context).__name__}"
            )

        # Keep a caller-bound correlation id; otherwise mint one per turn.
        correlation_id = get_correlation_id() or uuid.uuid4().hex
        with correlation_id_context(correlation_id), session_id_context(context.session_id):
            return await self._route(message, resolved, context)

    async def _route(self, message: str, intent: Intent, context: HandlerContext) -> Response:
        diagnostics = RoutingDiagnostics(intent_type=intent.type)
        started = time.perf_counter()

        selected: Optional[Handler] = None
        for handler in self._ordered():
            diagnostics.handlers_evaluated.append(handler.name)
            try:
                claimed = handler.can_handle(intent)
            except Exception as exc:  # pylint: disable=broad-except
                return self._failure(handler, exc, diagnostics, started)
            if claimed:
                selected = handler
                break

        if selected is None:
            notice = UnresolvedIntentNotice(
                intent_type=intent.type,
                handlers_evaluated=tuple(diagnostics.handlers_evaluated),
            )
            logger.info("[response-router] %s; using %s", notice.describe(), self._fallback.name)
            diagnostics.handlers_evaluated.append(self._fallback.name)
            diagnostics.fallback_used = True
            selected = self._fallback

        try:
            response = await selected.handle(message, intent, context)
            if not isinstance(response, Response):
                raise TypeError(f"handle() returned {type(response).__name__}, not Response")
        except Exception as exc:  # pylint: disable=broad-except
            return self._failure(selected, exc, diagnostics, started)

        logger.info(
            "[response-router] intent=%s handled by %s (confidence=%.2f)",
            intent.type,
            selected.name,
            response.metadata.confidence,
        )
        return self._annotate(response, selected, diagnostics, started)

    def _failure(
        self,
        handler: Handler,
        exc: Exception,
        diagnostics: RoutingDiagnostics,
        started: float,
    ) -> Response:
        error = HandlerExecutionError(handler.name, repr(exc))
        error.__cause__ = exc
        logger.error(
            "[response-router] %s; returning degraded response",
            error,
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        diagnostics.error = str(error)
        response = Response(
            content=self._failure_message,
            success=False,
            metadata=ResponseMetadata(confidence=0.0, requires_follow_up=True),
        )
        return self._annotate(response, handler, diagnostics, started)

    @staticmethod
    def _annotate(
        response: Response,
        handler: Handler,
        diagnostics: RoutingDiagnostics,
        started: float,
    ) -> Response:
        updates: dict[str, Any] = {
            "handler_name": handler.name,
            "handler_version": handler.version,
            "routing": diagnostics,
        }
        if response.metadata.processing_time_ms is None:
            updates["processing_time_ms"] = (time.perf_counter() - started) * 1000.0
        return response.model_copy(
            update={"metadata": response.metadata.model_copy(update=updates)}
        )

    async def route_turn(
        self,
        message: str,
        intent: Intent | Mapping[str, Any],
        context: HandlerContext,
    ) -> TurnResult:
        """Route one turn and apply the handler's state patch to a copy of the state."""

        response = await self.route(message, intent, context)
        state = context.conversation_state.apply(response.state_patch)
        return TurnResult(response=response, state=state)


__all__ = ["ResponseRouter", "TurnResult"]
