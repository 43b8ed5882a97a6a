"""Arms: a pattern bound to a handler.

A handler may be written in one of four shapes:

    constant   the handler itself is the result
    nullary    called with no arguments
    unary      called with the unwrapped value
    spread     called with the elements of an unwrapped tuple

`Bindable.then` (and `>>`) detects the shape when the arm fires, trying
unary, nullary, constant, spread in that order. The explicit builders
`returns`, `call`, `apply` and `spread` fix the shape up front.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from loguru import logger

from easymatch.config import get_settings


class HandlerKind(str, Enum):
    """How a handler receives the unwrapped value."""

    AUTO = "auto"
    CONSTANT = "constant"
    NULLARY = "nullary"
    UNARY = "unary"
    SPREAD = "spread"


def _signature(handler: Any) -> inspect.Signature | None:
    if not callable(handler):
        return None
    try:
        return inspect.signature(handler)
    except (TypeError, ValueError):
        # builtins without introspection data
        return None


def _accepts(sig: inspect.Signature, count: int) -> bool:
    try:
        sig.bind(*range(count))
    except TypeError:
        return False
    return True


def candidate_shapes(handler: Any, sig: inspect.Signature | None, value: Any) -> list[HandlerKind]:
    """Return every shape able to receive `value`, highest priority first."""
    if not callable(handler):
        return [HandlerKind.CONSTANT]
    if sig is None:
        return [HandlerKind.UNARY]

    shapes: list[HandlerKind] = []
    if _accepts(sig, 1):
        shapes.append(HandlerKind.UNARY)
    if _accepts(sig, 0):
        shapes.append(HandlerKind.NULLARY)
    if isinstance(value, tuple) and value and _accepts(sig, len(value)):
        shapes.append(HandlerKind.SPREAD)
    return shapes


@dataclass(frozen=True)
class PatternStatement:
    """One dispatch arm: condition, unwrap and the handler they feed."""

    condition: Callable[[Any], bool]
    unwrap: Callable[[Any], Any]
    handler: Any
    kind: HandlerKind = HandlerKind.AUTO
    strict: bool = False
    signature: inspect.Signature | None = field(default=None, compare=False, repr=False)

    def resolve_kind(self, value: Any) -> HandlerKind:
        """Pick the shape used to call the handler with `value`."""
        if self.kind is not HandlerKind.AUTO:
            return self.kind

        shapes = candidate_shapes(self.handler, self.signature, value)
        if not shapes:
            arity = f" or {len(value)} spread arguments" if isinstance(value, tuple) else ""
            raise TypeError(
                f"Handler {self.handler!r} cannot receive {value!r}: "
                f"expected no arguments, one argument{arity}"
            )
        if self.strict and len(shapes) > 1:
            names = ", ".join(shape.value for shape in shapes)
            raise TypeError(
                f"Ambiguous handler {self.handler!r} for {value!r} (fits {names}); "
                "bind it with returns(), call(), apply() or spread()"
            )
        logger.trace("arm.shape kind={} candidates={}", shapes[0].value, len(shapes))
        return shapes[0]

    def apply_handler(self, value: Any) -> Any:
        """Run the handler on an already unwrapped value."""
        match self.resolve_kind(value):
            case HandlerKind.CONSTANT:
                return self.handler
            case HandlerKind.NULLARY:
                return self.handler()
            case HandlerKind.UNARY:
                return self.handler(value)
            case _:
                return self.handler(*value)

    def fire(self, scrutinee: Any) -> Any:
        """Unwrap the scrutinee and hand the result to the handler.

        Only valid once `condition(scrutinee)` held.
        """
        return self.apply_handler(self.unwrap(scrutinee))


class Bindable:
    """Arm-binding surface shared by patterns and the wildcard."""

    condition: Callable[[Any], bool]
    unwrap: Callable[[Any], Any]

    def _bind(self, handler: Any, kind: HandlerKind, strict: bool | None = None) -> PatternStatement:
        if kind in (HandlerKind.NULLARY, HandlerKind.UNARY, HandlerKind.SPREAD) and not callable(handler):
            raise TypeError(f"{kind.value} handler must be callable, got {handler!r}")
        if strict is None:
            strict = get_settings().strict_handlers if kind is HandlerKind.AUTO else False
        logger.trace("arm.bind kind={} strict={}", kind.value, strict)
        return PatternStatement(
            condition=self.condition,
            unwrap=self.unwrap,
            handler=handler,
            kind=kind,
            strict=strict,
            signature=_signature(handler) if kind is HandlerKind.AUTO else None,
        )

    def then(self, handler: Any, *, strict: bool | None = None) -> PatternStatement:
        """Bind `handler`, detecting its shape when the arm fires."""
        return self._bind(handler, HandlerKind.AUTO, strict)

    def __rshift__(self, handler: Any) -> PatternStatement:
        return self.then(handler)

    def returns(self, value: Any) -> PatternStatement:
        """Bind a constant result, even when `value` is callable."""
        return self._bind(value, HandlerKind.CONSTANT)

    def call(self, fn: Callable[[], Any]) -> PatternStatement:
        return self._bind(fn, HandlerKind.NULLARY)

    def apply(self, fn: Callable[[Any], Any]) -> PatternStatement:
        return self._bind(fn, HandlerKind.UNARY)

    def spread(self, fn: Callable[..., Any]) -> PatternStatement:
        """Bind `fn` to receive the unwrapped tuple as positional arguments."""
        return self._bind(fn, HandlerKind.SPREAD)
