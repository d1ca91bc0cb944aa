"""Dartmouth engine: intent-routed response pipeline for customer conversations."""

DARTMOUTH_ENGINE_VERSION = "1.0.0"

__all__ = ["DARTMOUTH_ENGINE_VERSION"]
