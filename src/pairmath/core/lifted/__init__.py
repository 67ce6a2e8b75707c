"""Lifted operator functionality: component-wise operations and the operator mixin."""

from pairmath.core.lifted.mixin import PairArithmetic
from pairmath.core.lifted.operations import (
    add,
    add_as,
    divide,
    negate,
    scale,
    subtract,
    subtract_as,
)

__all__ = [
    # Operations
    "scale",
    "divide",
    "add",
    "add_as",
    "subtract",
    "subtract_as",
    "negate",
    # Mixin
    "PairArithmetic",
]
