"""Operator mixin for pair-representable types.

Usage:
    @dataclass(frozen=True, slots=True)
    class Velocity[E](PairArithmetic):
        vx: E
        vy: E

        @classmethod
        def from_pair(cls, pair: tuple[E, E], /) -> Self:
            return cls(vx=pair[0], vy=pair[1])

        def to_pair(self) -> tuple[E, E]:
            return (self.vx, self.vy)

    Velocity(1.0, 2.0) * 3          # Velocity(vx=3.0, vy=6.0)
    -Velocity(1.0, 2.0)             # Velocity(vx=-1.0, vy=-2.0)
    position.add_as(Point, velocity)  # cross-type, result type named
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Self

from pairmath.core.lifted import operations
from pairmath.core.pair.models import (
    AddablePair,
    DivisiblePair,
    MultipliablePair,
    NegatablePair,
    PairRepresentable,
    SubtractablePair,
)


class PairArithmetic(ABC):
    """Gives a pair-representable type `+ - * /` and unary `-`.

    Same-type `+`/`-` only: mixing two pair types through an operator returns
    NotImplemented (so Python raises TypeError) because the result type would be
    ambiguous. Use `add_as`/`subtract_as` and name the result type instead.

    Scalars are accepted on either side of `*` but only on the right of `/`.
    Subclasses must implement `from_pair` and `to_pair`; until they do the class
    cannot be instantiated.
    """

    __slots__ = ()

    @classmethod
    @abstractmethod
    def from_pair(cls, pair: tuple[Any, Any], /) -> Self: ...

    @abstractmethod
    def to_pair(self) -> tuple[Any, Any]: ...

    def __add__[V: AddablePair](self: V, other: V) -> V:
        if not isinstance(other, type(self)):
            return NotImplemented
        return operations.add(self, other)

    def __sub__[V: SubtractablePair](self: V, other: V) -> V:
        if not isinstance(other, type(self)):
            return NotImplemented
        return operations.subtract(self, other)

    def __mul__[V: MultipliablePair](self: V, scalar: Any) -> V:
        if isinstance(scalar, PairRepresentable):
            return NotImplemented
        return operations.scale(self, scalar)

    def __rmul__[V: MultipliablePair](self: V, scalar: Any) -> V:
        if isinstance(scalar, PairRepresentable):
            return NotImplemented
        return operations.scale(self, scalar)

    def __truediv__[V: DivisiblePair](self: V, scalar: Any) -> V:
        if isinstance(scalar, PairRepresentable):
            return NotImplemented
        return operations.divide(self, scalar)

    def __neg__[V: NegatablePair](self: V) -> V:
        return operations.negate(self)

    def add_as[R: PairRepresentable[Any]](
        self: AddablePair, result_type: type[R], other: AddablePair
    ) -> R:
        """Add `other` into an explicitly named pair type."""
        return operations.add_as(result_type, self, other)

    def subtract_as[R: PairRepresentable[Any]](
        self: SubtractablePair, result_type: type[R], other: SubtractablePair
    ) -> R:
        """Subtract `other` into an explicitly named pair type."""
        return operations.subtract_as(result_type, self, other)
