"""Composable pattern matching with ordered, first-match dispatch."""

from loguru import logger

from easymatch.arm import HandlerKind, PatternStatement
from easymatch.destructure import ds
from easymatch.dispatch import Matcher, match, select_arm
from easymatch.errors import MatchExhaustionError
from easymatch.extractors import as_, none, some
from easymatch.pattern import Pattern, PatternStarter, Wildcard, _, pattern, when
from easymatch.types import DynamicValue, OptionalValue, SumType

logger.disable("easymatch")

__all__ = [
    # Patterns
    "Pattern",
    "Wildcard",
    "PatternStarter",
    "_",
    "pattern",
    "when",
    # Extractors
    "as_",
    "some",
    "none",
    "ds",
    # Arms and dispatch
    "HandlerKind",
    "PatternStatement",
    "Matcher",
    "match",
    "select_arm",
    # Errors
    "MatchExhaustionError",
    # Capabilities
    "SumType",
    "OptionalValue",
    "DynamicValue",
]
