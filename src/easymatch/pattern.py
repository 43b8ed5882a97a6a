"""Patterns, the wildcard and the combinators that build on them."""

from __future__ import annotations

import operator
from dataclasses import dataclass, replace
from typing import Any, Callable

from easymatch.arm import Bindable, PatternStatement
from easymatch.types import always, identity


@dataclass(frozen=True, eq=False)
class Pattern(Bindable):
    """A structural test plus the value transformation applied on success.

    `unwrap` is only ever called on values for which `condition` holds.
    """

    condition: Callable[[Any], bool]
    unwrap: Callable[[Any], Any] = identity

    def pipe(self, rhs: Any) -> Pattern | PatternStatement:
        """Refine this pattern with `rhs`, evaluated on the unwrapped value.

        A wildcard on the right leaves the pattern unchanged. An already
        bound arm on the right keeps its handler and gains this pattern as
        a prefix.
        """
        if isinstance(rhs, Wildcard):
            return self
        if isinstance(rhs, PatternStatement):
            refined = self.pipe(Pattern(rhs.condition, rhs.unwrap))
            return replace(rhs, condition=refined.condition, unwrap=refined.unwrap)
        if not isinstance(rhs, Pattern):
            rhs = when(rhs)
        lhs = self

        def condition(x: Any) -> bool:
            return bool(lhs.condition(x)) and bool(rhs.condition(lhs.unwrap(x)))

        def unwrap(x: Any) -> Any:
            return rhs.unwrap(lhs.unwrap(x))

        return Pattern(condition, unwrap)

    def __or__(self, rhs: Any) -> Pattern | PatternStatement:
        return self.pipe(rhs)

    def __ror__(self, lhs: Any) -> Pattern | PatternStatement:
        return when(lhs).pipe(self)

    def __bool__(self) -> bool:
        # `0 < _ < 10` would otherwise keep only its last comparison
        raise TypeError("Patterns have no truth value; refine them with |, e.g. (_ > 0) | (_ < 10)")


class Wildcard(Bindable):
    """Matches anything and passes it through.

    Comparing the wildcard with a value builds a relational pattern:
    `_ < 100` matches every candidate `x` with `x < 100`.
    """

    _instance: Wildcard | None = None

    def __new__(cls) -> Wildcard:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "_"

    __hash__ = object.__hash__

    condition = staticmethod(always)
    unwrap = staticmethod(identity)

    def pipe(self, rhs: Any) -> Pattern | Wildcard | PatternStatement:
        if isinstance(rhs, PatternStatement):
            return rhs
        return when(rhs)

    def __or__(self, rhs: Any) -> Pattern | Wildcard | PatternStatement:
        return self.pipe(rhs)

    def __ror__(self, lhs: Any) -> Pattern | Wildcard:
        return when(lhs)

    def compare(self, op: Callable[[Any, Any], bool], value: Any, *, reflected: bool = False) -> Pattern:
        """Pattern testing `op(x, value)`, or `op(value, x)` when reflected."""
        if reflected:
            return Pattern(lambda x: op(value, x))
        return Pattern(lambda x: op(x, value))

    def eq(self, value: Any) -> Pattern:
        return self.compare(operator.eq, value)

    def ne(self, value: Any) -> Pattern:
        return self.compare(operator.ne, value)

    def lt(self, value: Any) -> Pattern:
        return self.compare(operator.lt, value)

    def le(self, value: Any) -> Pattern:
        return self.compare(operator.le, value)

    def gt(self, value: Any) -> Pattern:
        return self.compare(operator.gt, value)

    def ge(self, value: Any) -> Pattern:
        return self.compare(operator.ge, value)

    # `v < _` reaches these through Python's reflected comparison, as `_ > v`.
    __eq__ = eq  # type: ignore[assignment]
    __ne__ = ne  # type: ignore[assignment]
    __lt__ = lt
    __le__ = le
    __gt__ = gt
    __ge__ = ge


class PatternStarter:
    """Anchor for arm chains: `pattern | p` normalizes `p` into a pattern."""

    _instance: PatternStarter | None = None

    def __new__(cls) -> PatternStarter:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "pattern"

    def __or__(self, rhs: Any) -> Pattern | Wildcard | PatternStatement:
        if isinstance(rhs, (Pattern, Wildcard, PatternStatement)):
            return rhs
        return when(rhs)


_ = Wildcard()
pattern = PatternStarter()


def when(cond: Any) -> Pattern | Wildcard:
    """Normalize a pattern, predicate or plain value into a pattern.

    Patterns and the wildcard are returned unchanged. A callable becomes a
    predicate on the candidate. Anything else is compared for equality.
    """
    if isinstance(cond, (Pattern, Wildcard)):
        return cond
    if callable(cond):
        return Pattern(lambda x: bool(cond(x)))
    return Pattern(lambda x: x == cond)
