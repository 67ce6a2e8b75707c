"""pairmath: capability-based arithmetic for two-component values.

Usage:
    from dataclasses import dataclass
    from pairmath import PairArithmetic, Point, Size, add_as

    size = Size(1.0, 2.0)
    size2 = size + size                 # Size(width=2.0, height=4.0)
    size2 * 4                           # Size(width=8.0, height=16.0)

    point = Point(1.5, 20.3)
    4 * point                           # Point(x=6.0, y=81.2)
    add_as(Point, point, size) * 3      # Point(x=7.5, y=66.9)

    # Any type with from_pair/to_pair gets the operators via the mixin
    @dataclass(frozen=True, slots=True)
    class Velocity[E](PairArithmetic):
        vx: E
        vy: E

        @classmethod
        def from_pair(cls, pair):
            return cls(*pair)

        def to_pair(self):
            return (self.vx, self.vy)
"""

__version__ = "0.1.0"

# Core primitives
from pairmath.core import (
    Addable,
    Arithmeticable,
    Capability,
    Divisible,
    Int8,
    Int16,
    Int32,
    Int64,
    Multipliable,
    Negatable,
    PairArithmetic,
    PairRepresentable,
    SignedArithmeticable,
    Subtractable,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    UnsupportedCapabilityError,
    add,
    add_as,
    approx_equal,
    capabilities_of,
    convert,
    divide,
    negate,
    require,
    scale,
    subtract,
    subtract_as,
    supports,
)

# Configuration
from pairmath.config import PairMathSettings, configure_logging, get_settings

# Geometry
from pairmath.geometry import Point, Size, Vector

__all__ = [
    # Version
    "__version__",
    # Scalar capabilities
    "Addable",
    "Subtractable",
    "Multipliable",
    "Divisible",
    "Negatable",
    "Arithmeticable",
    "SignedArithmeticable",
    "Capability",
    "UnsupportedCapabilityError",
    "capabilities_of",
    "supports",
    "require",
    # Fixed-width elements
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    # Pairs
    "PairRepresentable",
    "PairArithmetic",
    "convert",
    "approx_equal",
    # Lifted operators
    "scale",
    "divide",
    "add",
    "add_as",
    "subtract",
    "subtract_as",
    "negate",
    # Geometry
    "Size",
    "Point",
    "Vector",
    # Config
    "PairMathSettings",
    "get_settings",
    "configure_logging",
]
