"""Ordered dispatch over arms."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from loguru import logger

from easymatch.arm import PatternStatement
from easymatch.errors import MatchExhaustionError


def select_arm(scrutinee: Any, arms: tuple[PatternStatement, ...]) -> tuple[int, PatternStatement]:
    """Return the first arm whose condition holds, with its position.

    Raises MatchExhaustionError if no arm matches.
    """
    for index, arm in enumerate(arms):
        if arm.condition(scrutinee):
            return index, arm
        logger.trace("match.skip arm={}", index)
    logger.debug("match.exhausted arms={}", len(arms))
    raise MatchExhaustionError(scrutinee, len(arms))


@dataclass(frozen=True)
class Matcher:
    """A scrutinee waiting for its arms."""

    scrutinee: Any

    def __call__(self, *arms: PatternStatement) -> Any:
        for index, arm in enumerate(arms):
            if not isinstance(arm, PatternStatement):
                raise TypeError(f"Arm {index} is not bound to a handler: {arm!r}")

        logger.debug("match.start arms={} scrutinee={!r}", len(arms), self.scrutinee)
        index, arm = select_arm(self.scrutinee, arms)
        logger.debug("match.resolved arm={}", index)
        return arm.fire(self.scrutinee)


def match(*values: Any) -> Matcher:
    """Start a match over one value, or over several packed into a tuple.

    Example:
        match(n)(
            when(0) >> 1,
            _ >> (lambda x: x * factorial(x - 1)),
        )
    """
    if len(values) == 1:
        return Matcher(values[0])
    return Matcher(tuple(values))
