"""Destructuring of fixed-size sequences."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from easymatch.pattern import Pattern, when


def _is_tuple_shaped(x: Any, size: int) -> bool:
    return isinstance(x, Sequence) and not isinstance(x, (str, bytes, bytearray)) and len(x) == size


def ds(*patterns: Any) -> Pattern:
    """Match a sequence of `len(patterns)` elements position by position.

    Each sub-pattern may be a pattern, the wildcard, a predicate or a plain
    value (compared for equality). Positions are tested left to right and
    testing stops at the first failure. The unwrapped result is a tuple of
    each element's unwrapped value.
    """
    parts = tuple(when(p) for p in patterns)
    size = len(parts)

    def condition(x: Any) -> bool:
        if not _is_tuple_shaped(x, size):
            return False
        return all(part.condition(element) for part, element in zip(parts, x))

    def unwrap(x: Any) -> tuple[Any, ...]:
        return tuple(part.unwrap(element) for part, element in zip(parts, x))

    return Pattern(condition, unwrap)
