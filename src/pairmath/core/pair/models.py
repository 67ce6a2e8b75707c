"""Pair models: the pair-representable contract and its capability views.

A type opts in by providing two functions, a constructor from an ordered pair
and a decomposition back into it. That is the only extension point: every
lifted operator is written against these protocols.

The `*Pair` protocols narrow `to_pair()` to elements with one capability.
They are used as restricted self-types, so a type checker only offers an
operator on pairs whose element type supports it (no negating `Point[UInt8]`).
"""

from __future__ import annotations

from typing import Any, Protocol, Self, runtime_checkable

from pairmath.core.scalar.models import (
    Addable,
    Divisible,
    Multipliable,
    Negatable,
    Subtractable,
)


@runtime_checkable
class PairRepresentable[E](Protocol):
    """Value type losslessly convertible to and from `(E, E)`.

    Component 0 maps to the first named field, component 1 to the second.
    """

    @classmethod
    def from_pair(cls, pair: tuple[E, E], /) -> Self: ...

    def to_pair(self) -> tuple[E, E]: ...


class _Pair(Protocol):
    @classmethod
    def from_pair(cls, pair: tuple[Any, Any], /) -> Self: ...


class AddablePair(_Pair, Protocol):
    def to_pair(self) -> tuple[Addable, Addable]: ...


class SubtractablePair(_Pair, Protocol):
    def to_pair(self) -> tuple[Subtractable, Subtractable]: ...


class MultipliablePair(_Pair, Protocol):
    def to_pair(self) -> tuple[Multipliable, Multipliable]: ...


class DivisiblePair(_Pair, Protocol):
    def to_pair(self) -> tuple[Divisible, Divisible]: ...


class NegatablePair(_Pair, Protocol):
    def to_pair(self) -> tuple[Negatable, Negatable]: ...
