"""Core data transfer objects shared across layers."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Session stores may hand over camelCase payloads (sessionId, answersGiven).
_SESSION_CONFIG = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

ARTWORK_METADATA_KEYS = ("artwork_data", "artworkData")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AnswerRecord(BaseModel):
    """A question the assistant answered earlier in the session."""

    model_config = _SESSION_CONFIG

    question: str
    answer: str
    timestamp: datetime = Field(default_factory=_utcnow)


class StatePatch(BaseModel):
    """Changes a handler asks the router to apply to the conversation state.

    Answers are appended in order; metadata keys replace existing values.
    """

    model_config = ConfigDict(frozen=True)

    append_answers: tuple[AnswerRecord, ...] = ()
    metadata: Mapping[str, Any] = Field(default_factory=dict)

    def is_empty(self) -> bool:
        """Return True when applying the patch would change nothing."""
        return not self.append_answers and not self.metadata


class ConversationState(BaseModel):
    """Per-session memory carried across turns.

    ``answers_given`` is chronological and append-only: the last element is the
    most recent answer. Uploaded artwork lives under ``metadata["artwork_data"]``
    (``"artworkData"`` is accepted too) as ``{"dimensions": {"pixels": {"width",
    "height"}}, "file_name": ...}``.
    """

    model_config = _SESSION_CONFIG

    session_id: str = Field(min_length=1)
    answers_given: tuple[AnswerRecord, ...] = ()
    metadata: Mapping[str, Any] = Field(default_factory=dict)

    def last_answer(self) -> Optional[AnswerRecord]:
        """Return the most recent answer, if any."""
        if not self.answers_given:
            return None
        return self.answers_given[-1]

    def artwork(self) -> Optional[Mapping[str, Any]]:
        """Return the uploaded artwork record, under either metadata key."""
        for key in ARTWORK_METADATA_KEYS:
            artwork = self.metadata.get(key)
            if isinstance(artwork, Mapping):
                return artwork
        return None

    def artwork_pixels(self) -> Optional[tuple[int, int]]:
        """Return the uploaded artwork's (width, height) in pixels when known."""
        artwork = self.artwork()
        if artwork is None:
            return None
        dimensions = artwork.get("dimensions")
        if not isinstance(dimensions, Mapping):
            return None
        pixels = dimensions.get("pixels")
        if not isinstance(pixels, Mapping):
            return None
        width = pixels.get("width")
        height = pixels.get("height")
        if not isinstance(width, (int, float)) or not isinstance(height, (int, float)):
            return None
        if width <= 0 or height <= 0:
            return None
        return int(width), int(height)

    def apply(self, patch: Optional[StatePatch]) -> "ConversationState":
        """Return a new state with ``patch`` applied; ``self`` is left untouched."""
        if patch is None or patch.is_empty():
            return self
        merged_metadata = {**self.metadata, **patch.metadata}
        return self.model_copy(
            update={
                "answers_given": self.answers_given + tuple(patch.append_answers),
                "metadata": merged_metadata,
            }
        )


class HandlerContext(BaseModel):
    """Read view of the session handed to each handler."""

    model_config = _SESSION_CONFIG

    conversation_state: ConversationState

    @property
    def state(self) -> ConversationState:
        """Alias for ``conversation_state``."""
        return self.conversation_state

    @property
    def session_id(self) -> str:
        """Identifier of the session this turn belongs to."""
        return self.conversation_state.session_id


class Suggestion(BaseModel):
    """Follow-up action offered alongside a response."""

    type: str
    text: str
    action: str
    priority: Literal["high", "medium", "low"] = "medium"


class RoutingDiagnostics(BaseModel):
    """How the router arrived at the handler that answered a turn."""

    intent_type: str
    handlers_evaluated: list[str] = Field(default_factory=list)
    fallback_used: bool = False
    error: Optional[str] = None


class ResponseMetadata(BaseModel):
    """Diagnostics attached to every response."""

    handler_name: str = ""
    handler_version: str = ""
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    processing_time_ms: Optional[float] = None
    sentiment: Optional[str] = None
    requires_follow_up: Optional[bool] = None
    cached: bool = False
    routing: Optional[RoutingDiagnostics] = None


class Response(BaseModel):
    """A reply produced by exactly one handler."""

    content: str
    success: Optional[bool] = None
    metadata: ResponseMetadata = Field(default_factory=ResponseMetadata)
    suggestions: list[Suggestion] = Field(default_factory=list)
    data: Optional[dict[str, Any]] = None
    state_patch: Optional[StatePatch] = None


__all__ = [
    "ARTWORK_METADATA_KEYS",
    "AnswerRecord",
    "StatePatch",
    "ConversationState",
    "HandlerContext",
    "Suggestion",
    "RoutingDiagnostics",
    "ResponseMetadata",
    "Response",
]
