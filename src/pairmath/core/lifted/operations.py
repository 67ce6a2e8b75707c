"""Lifted operators: scalar capabilities applied component-wise to pairs.

Each operator is written once against the pair protocols and works for any
conforming type. The result is rebuilt with `from_pair` on the operand's type,
or on an explicitly requested type for the cross-type forms.

Element errors (overflow, integer division by zero) propagate unchanged.
"""

from __future__ import annotations

from typing import Any

from pairmath.config import get_settings
from pairmath.core.pair.models import (
    AddablePair,
    DivisiblePair,
    MultipliablePair,
    NegatablePair,
    PairRepresentable,
    SubtractablePair,
)
from pairmath.core.scalar.models import Capability
from pairmath.core.scalar.operations import require


def _components(value: PairRepresentable[Any], capability: Capability) -> tuple[Any, Any]:
    """Decompose `value`, checking both components support `capability`."""
    first, second = value.to_pair()
    if get_settings().check_capabilities:
        require(first, capability)
        require(second, capability)
    return first, second


# Multipliable


def scale[V: MultipliablePair](value: V, scalar: Any) -> V:
    """Multiply both components by a scalar.

    Also serves the commuted form, so `v * s == s * v`.

    Args:
        value: Pair to scale.
        scalar: Element-typed factor.

    Returns:
        `V((v0 * s, v1 * s))`.

    Raises:
        UnsupportedCapabilityError: If the elements are not Multipliable.
    """
    first, second = _components(value, Capability.MULTIPLY)
    return type(value).from_pair((first * scalar, second * scalar))


# Divisible


def divide[V: DivisiblePair](value: V, scalar: Any) -> V:
    """Divide both components by a scalar.

    Division by zero behaves as the element's own division does.

    Args:
        value: Pair to divide.
        scalar: Element-typed divisor.

    Returns:
        `V((v0 / s, v1 / s))`.

    Raises:
        UnsupportedCapabilityError: If the elements are not Divisible.
    """
    first, second = _components(value, Capability.DIVIDE)
    return type(value).from_pair((first / scalar, second / scalar))


# Addable


def add[V: AddablePair](lhs: V, rhs: V) -> V:
    """Add two pairs of the same type component-wise."""
    return add_as(type(lhs), lhs, rhs)


def add_as[R: PairRepresentable[Any]](
    result_type: type[R], lhs: AddablePair, rhs: AddablePair
) -> R:
    """Add two pairs of possibly different types into `result_type`.

    Combining e.g. a point and a size is neither a point nor a size, so the
    caller names the result type.

    Args:
        result_type: Pair type to build.
        lhs: First operand.
        rhs: Second operand.

    Returns:
        `R((t0 + u0, t1 + u1))`.

    Raises:
        UnsupportedCapabilityError: If the elements are not Addable.
    """
    l0, l1 = _components(lhs, Capability.ADD)
    r0, r1 = _components(rhs, Capability.ADD)
    return result_type.from_pair((l0 + r0, l1 + r1))


# Subtractable


def subtract[V: SubtractablePair](lhs: V, rhs: V) -> V:
    """Subtract two pairs of the same type component-wise."""
    return subtract_as(type(lhs), lhs, rhs)


def subtract_as[R: PairRepresentable[Any]](
    result_type: type[R], lhs: SubtractablePair, rhs: SubtractablePair
) -> R:
    """Subtract two pairs of possibly different types into `result_type`.

    Args:
        result_type: Pair type to build.
        lhs: Minuend.
        rhs: Subtrahend.

    Returns:
        `R((t0 - u0, t1 - u1))`.

    Raises:
        UnsupportedCapabilityError: If the elements are not Subtractable.
    """
    l0, l1 = _components(lhs, Capability.SUBTRACT)
    r0, r1 = _components(rhs, Capability.SUBTRACT)
    return result_type.from_pair((l0 - r0, l1 - r1))


# Negatable


def negate[V: NegatablePair](value: V) -> V:
    """Negate both components.

    Raises:
        UnsupportedCapabilityError: If the elements are not Negatable
            (e.g. unsigned integers).
    """
    first, second = _components(value, Capability.NEGATE)
    return type(value).from_pair((-first, -second))
