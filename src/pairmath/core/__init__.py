"""Core functionalities: stateless protocols, primitives, and lifted operators.

Architecture Note:
    core/ contains pure, stateless functionalities. scalar/ declares what an
    element can do, pair/ declares what a two-component value is, and lifted/
    combines the two into component-wise operators. Concrete pair types live
    in geometry/.
"""

from pairmath.core.lifted import (
    PairArithmetic,
    add,
    add_as,
    divide,
    negate,
    scale,
    subtract,
    subtract_as,
)
from pairmath.core.pair import (
    AddablePair,
    DivisiblePair,
    MultipliablePair,
    NegatablePair,
    PairRepresentable,
    SubtractablePair,
    approx_equal,
    convert,
)
from pairmath.core.scalar import (
    Addable,
    Arithmeticable,
    Capability,
    Divisible,
    FixedWidthInt,
    Int8,
    Int16,
    Int32,
    Int64,
    Multipliable,
    Negatable,
    SignedArithmeticable,
    SignedInt,
    Subtractable,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    UnsignedInt,
    UnsupportedCapabilityError,
    capabilities_of,
    require,
    supports,
)

__all__ = [
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
    # Pair
    "PairRepresentable",
    "AddablePair",
    "SubtractablePair",
    "MultipliablePair",
    "DivisiblePair",
    "NegatablePair",
    "convert",
    "approx_equal",
    # Lifted
    "PairArithmetic",
    "scale",
    "divide",
    "add",
    "add_as",
    "subtract",
    "subtract_as",
    "negate",
]
