"""Pair functionality: the pair-representable contract and conversions."""

from pairmath.core.pair.models import (
    AddablePair,
    DivisiblePair,
    MultipliablePair,
    NegatablePair,
    PairRepresentable,
    SubtractablePair,
)
from pairmath.core.pair.operations import approx_equal, convert

__all__ = [
    # Models
    "PairRepresentable",
    "AddablePair",
    "SubtractablePair",
    "MultipliablePair",
    "DivisiblePair",
    "NegatablePair",
    # Operations
    "convert",
    "approx_equal",
]
