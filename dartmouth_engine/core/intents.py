"""Intent types and models for the Dartmouth engine."""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class IntentType(str, Enum):
    """Intent tags with a dedicated handler in the default wiring."""

    GREETING = "greeting"
    GRATITUDE = "gratitude"
    REPEAT = "repeat"
    CALCULATION = "calculation"
    SIZE_CALCULATION = "size_calculation"
    UNKNOWN = "unknown"


class Intent(BaseModel):
    """A classified inbound message, immutable once produced upstream."""

    # Upstream classifiers send camelCase keys (originalMessage).
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    type: str = Field(min_length=1)
    original_message: str = ""
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    slots: Mapping[str, Any] = Field(default_factory=dict)

    def is_type(self, intent_type: IntentType | str) -> bool:
        """Return True when this intent carries the given tag."""
        if isinstance(intent_type, IntentType):
            return self.type == intent_type.value
        return self.type == intent_type


__all__ = ["IntentType", "Intent"]
