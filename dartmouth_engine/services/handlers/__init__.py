"""Concrete response handlers."""

from dartmouth_engine.services.handlers.base import BaseHandler
from dartmouth_engine.services.handlers.calculation import CalculationHandler
from dartmouth_engine.services.handlers.fallback import FallbackHandler
from dartmouth_engine.services.handlers.gratitude import GratitudeHandler
from dartmouth_engine.services.handlers.greeting import GreetingHandler
from dartmouth_engine.services.handlers.repeat import RepeatHandler
from dartmouth_engine.services.handlers.size_calculation import SizeCalculationHandler

__all__ = [
    "BaseHandler",
    "CalculationHandler",
    "FallbackHandler",
    "GratitudeHandler",
    "GreetingHandler",
    "RepeatHandler",
    "SizeCalculationHandler",
]
