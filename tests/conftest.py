"""Pytest configuration: ensure env vars and import path are set early.

This runs before any tests, so modules can import without local path hacks.
Also load .env before setting defaults so local overrides are honoured.
"""
from __future__ import annotations

import os
import sys
import tempfile
from datetime import datetime, timezone
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Ensure repository root is on sys.path for local package imports
sys.path.append(str(Path(__file__).resolve().parents[1]))

load_dotenv(override=False)

# Keep test logs out of the working tree
os.environ.setdefault(
    "DARTMOUTH_LOG_DIR", str(Path(tempfile.gettempdir()) / "dartmouth-engine-test-logs")
)
os.environ.setdefault("DARTMOUTH_LOG_LEVEL", "debug")

# pylint: disable=wrong-import-position
from dartmouth_engine.core.models import (  # noqa: E402
    AnswerRecord,
    ConversationState,
    HandlerContext,
)


def make_context(
    *,
    session_id: str = "session-1",
    answers: tuple[tuple[str, str], ...] = (),
    metadata: dict | None = None,
) -> HandlerContext:
    """Build a handler context from plain question/answer pairs and metadata."""
    base = datetime(2025, 1, 1, tzinfo=timezone.utc)
    records = tuple(
        AnswerRecord(question=question, answer=answer, timestamp=base.replace(minute=index))
        for index, (question, answer) in enumerate(answers)
    )
    state = ConversationState(
        session_id=session_id, answers_given=records, metadata=metadata or {}
    )
    return HandlerContext(conversation_state=state)


def artwork_metadata(width: int = 3000, height: int = 2832, **extra) -> dict:
    """Metadata shaped like the session store's record of an uploaded artwork."""
    artwork = {"dimensions": {"pixels": {"width": width, "height": height}}, **extra}
    return {"artwork_data": artwork}


@pytest.fixture
def empty_context() -> HandlerContext:
    """Context for a brand-new session with no memory."""
    return make_context()


@pytest.fixture
def artwork_context() -> HandlerContext:
    """Context for a session that has uploaded a 3000×2832 px artwork."""
    return make_context(metadata=artwork_metadata())


@pytest.fixture
def context_factory():
    """Factory building contexts from question/answer pairs and metadata."""
    return make_context
