"""Scalar capability models: protocols and flags.

Each capability is a single-operation protocol on an element type. They are
declared independently so an element can support a subset of them, e.g.
unsigned integers support everything except negation.
"""

from __future__ import annotations

from enum import Flag, auto
from typing import Protocol, Self, runtime_checkable


@runtime_checkable
class Addable(Protocol):
    """T + T → T."""

    def __add__(self, other: Self, /) -> Self: ...


@runtime_checkable
class Subtractable(Protocol):
    """T - T → T."""

    def __sub__(self, other: Self, /) -> Self: ...


@runtime_checkable
class Multipliable(Protocol):
    """T * T → T."""

    def __mul__(self, other: Self, /) -> Self: ...


@runtime_checkable
class Divisible(Protocol):
    """T / T → T."""

    def __truediv__(self, other: Self, /) -> Self: ...


@runtime_checkable
class Negatable(Protocol):
    """-T → T."""

    def __neg__(self) -> Self: ...


@runtime_checkable
class Arithmeticable(Addable, Subtractable, Multipliable, Divisible, Protocol):
    """The four binary operations."""


@runtime_checkable
class SignedArithmeticable(Arithmeticable, Negatable, Protocol):
    """The four binary operations plus negation."""


class Capability(Flag):
    """Named capabilities an element type may or may not satisfy."""

    ADD = auto()
    SUBTRACT = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    NEGATE = auto()

    ARITHMETIC = ADD | SUBTRACT | MULTIPLY | DIVIDE
    SIGNED_ARITHMETIC = ARITHMETIC | NEGATE

    @property
    def protocol(self) -> type:
        """Get the protocol backing a single capability.

        Returns:
            Protocol class whose method implements this capability.

        Raises:
            ValueError: If called on a combination of capabilities.
        """
        try:
            return _PROTOCOLS[self]
        except KeyError:
            raise ValueError(f"{self!r} is not a single capability") from None


_PROTOCOLS: dict[Capability, type] = {
    Capability.ADD: Addable,
    Capability.SUBTRACT: Subtractable,
    Capability.MULTIPLY: Multipliable,
    Capability.DIVIDE: Divisible,
    Capability.NEGATE: Negatable,
}


class UnsupportedCapabilityError(TypeError):
    """Raised when an element lacks the capability an operator needs."""

    def __init__(self, element_type: type, capability: Capability) -> None:
        self.element_type = element_type
        self.capability = capability
        super().__init__(
            f"{element_type.__name__} does not support {capability.name or capability!r}"
        )
