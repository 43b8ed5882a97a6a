"""Extractors for type-tagged alternatives and optional values."""

from __future__ import annotations

from functools import lru_cache
from typing import Any

from easymatch.pattern import Pattern
from easymatch.types import DynamicValue, OptionalValue, SumType


@lru_cache(maxsize=None)
def as_(alternative: type) -> Pattern:
    """Match values currently holding `alternative` and unwrap its payload.

    Sum types are asked through `holds`/`extract` and dynamic containers
    through `type`/`cast`. A plain Python object is its own dynamic
    container: it matches when its exact type is `alternative`, so `True`
    does not match `as_(int)`.
    """

    def condition(x: Any) -> bool:
        if isinstance(x, SumType):
            return bool(x.holds(alternative))
        if isinstance(x, DynamicValue):
            return x.type() is alternative
        return type(x) is alternative

    def unwrap(x: Any) -> Any:
        if isinstance(x, SumType):
            return x.extract(alternative)
        if isinstance(x, DynamicValue):
            return x.cast(alternative)
        if type(x) is not alternative:
            raise TypeError(f"Cannot extract {alternative.__name__} from {type(x).__name__} value {x!r}")
        return x

    return Pattern(condition, unwrap)


def _is_present(x: Any) -> bool:
    if isinstance(x, OptionalValue):
        return bool(x.has_value())
    return x is not None


def _get_present(x: Any) -> Any:
    if isinstance(x, OptionalValue):
        return x.value()
    return x


some = Pattern(_is_present, _get_present)
none = Pattern(lambda x: not _is_present(x), lambda _x: None)
