"""Shared type definitions and capability protocols for easymatch."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class SumType(Protocol):
    """Tagged union holding exactly one alternative at a time."""

    def holds(self, alternative: type) -> bool: ...
    def extract(self, alternative: type) -> Any: ...


@runtime_checkable
class OptionalValue(Protocol):
    """Container that either holds a value or is empty."""

    def has_value(self) -> bool: ...
    def value(self) -> Any: ...


@runtime_checkable
class DynamicValue(Protocol):
    """Single-value container with any stored type.

    `cast` must fail fast when asked for a type other than the stored one.
    """

    def type(self) -> type: ...
    def cast(self, target: type) -> Any: ...


def identity(x: Any) -> Any:
    return x


def always(_x: Any) -> bool:
    return True
