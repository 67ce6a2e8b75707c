"""Fixed-width integer element types.

Python's int is unbounded and always signed, so these wrap it with the
semantics of machine integers: results outside the representable range raise
OverflowError and division truncates toward zero. Unsigned types deliberately
have no `__neg__`, which keeps them out of the Negatable capability.

Usage:
    >>> UInt8(200) + 55
    UInt8(255)
    >>> Int8(-7) / 2
    Int8(-3)
"""

from __future__ import annotations

import operator
from functools import total_ordering
from typing import Any, ClassVar, Self


@total_ordering
class FixedWidthInt:
    """Base class for fixed-width integers.

    Subclasses pass their width as a class keyword:

        class Int8(SignedInt, bits=8): ...

    Plain `int` operands of arithmetic are coerced into the fixed-width type and
    range-checked, on either side of the operator. Comparisons take any int.
    """

    __slots__ = ("_value",)

    bits: ClassVar[int]
    signed: ClassVar[bool]
    min_value: ClassVar[int]
    max_value: ClassVar[int]

    def __init_subclass__(cls, *, bits: int | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if bits is None:
            return
        cls.bits = bits
        if cls.signed:
            cls.min_value = -(1 << (bits - 1))
            cls.max_value = (1 << (bits - 1)) - 1
        else:
            cls.min_value = 0
            cls.max_value = (1 << bits) - 1

    def __init__(self, value: int) -> None:
        value = operator.index(value)
        if not self.min_value <= value <= self.max_value:
            raise OverflowError(
                f"{value} is out of range for {type(self).__name__} "
                f"[{self.min_value}, {self.max_value}]"
            )
        self._value = value

    def _operand(self, other: object, *, coerce: bool = True) -> int | None:
        if isinstance(other, type(self)):
            return other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return type(self)(other)._value if coerce else other
        return None

    def __add__(self, other: Self | int) -> Self:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return type(self)(self._value + rhs)

    def __sub__(self, other: Self | int) -> Self:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return type(self)(self._value - rhs)

    def __mul__(self, other: Self | int) -> Self:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        return type(self)(self._value * rhs)

    def __radd__(self, other: int) -> Self:
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return type(self)(lhs + self._value)

    def __rsub__(self, other: int) -> Self:
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return type(self)(lhs - self._value)

    def __rmul__(self, other: int) -> Self:
        lhs = self._operand(other)
        if lhs is None:
            return NotImplemented
        return type(self)(lhs * self._value)

    def __truediv__(self, other: Self | int) -> Self:
        rhs = self._operand(other)
        if rhs is None:
            return NotImplemented
        quotient = abs(self._value) // abs(rhs)
        if (self._value < 0) != (rhs < 0):
            quotient = -quotient
        return type(self)(quotient)

    def __eq__(self, other: object) -> bool:
        rhs = self._operand(other, coerce=False)
        if rhs is None:
            return NotImplemented
        return self._value == rhs

    def __lt__(self, other: Self | int) -> bool:
        rhs = self._operand(other, coerce=False)
        if rhs is None:
            return NotImplemented
        return self._value < rhs

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value})"


class SignedInt(FixedWidthInt):
    """Two's-complement range, negatable."""

    __slots__ = ()

    signed = True

    def __neg__(self) -> Self:
        return type(self)(-self._value)


class UnsignedInt(FixedWidthInt):
    """Non-negative range, not negatable."""

    __slots__ = ()

    signed = False


class Int8(SignedInt, bits=8):
    __slots__ = ()


class Int16(SignedInt, bits=16):
    __slots__ = ()


class Int32(SignedInt, bits=32):
    __slots__ = ()


class Int64(SignedInt, bits=64):
    __slots__ = ()


class UInt8(UnsignedInt, bits=8):
    __slots__ = ()


class UInt16(UnsignedInt, bits=16):
    __slots__ = ()


class UInt32(UnsignedInt, bits=32):
    __slots__ = ()


class UInt64(UnsignedInt, bits=64):
    __slots__ = ()
