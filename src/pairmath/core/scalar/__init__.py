"""Scalar functionality: capability protocols, lookup, and fixed-width elements."""

from pairmath.core.scalar.fixed import (
    FixedWidthInt,
    Int8,
    Int16,
    Int32,
    Int64,
    SignedInt,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    UnsignedInt,
)
from pairmath.core.scalar.models import (
    Addable,
    Arithmeticable,
    Capability,
    Divisible,
    Multipliable,
    Negatable,
    SignedArithmeticable,
    Subtractable,
    UnsupportedCapabilityError,
)
from pairmath.core.scalar.operations import capabilities_of, require, supports

__all__ = [
    # Models
    "Addable",
    "Subtractable",
    "Multipliable",
    "Divisible",
    "Negatable",
    "Arithmeticable",
    "SignedArithmeticable",
    "Capability",
    "UnsupportedCapabilityError",
    # Operations
    "capabilities_of",
    "supports",
    "require",
    # Fixed-width elements
    "FixedWidthInt",
    "SignedInt",
    "UnsignedInt",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
]
