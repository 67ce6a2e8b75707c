"""Pure functions for capability lookup.

Capabilities are derived structurally from the element type's own operator
methods, so built-in numbers (int, float, Fraction, Decimal) are granted the
full signed set without registration.
"""

from __future__ import annotations

import logging

from pairmath.core.scalar.models import Capability, UnsupportedCapabilityError

logger = logging.getLogger(__name__)


def _element_type(element: object) -> type:
    return element if isinstance(element, type) else type(element)


def capabilities_of(element: object) -> Capability:
    """Derive the capabilities of an element value or element type.

    Args:
        element: Element instance or element class.

    Returns:
        Union of every capability whose protocol the element type satisfies.
    """
    element_type = _element_type(element)
    found = Capability(0)
    for capability in Capability.SIGNED_ARITHMETIC:
        if issubclass(element_type, capability.protocol):
            found |= capability
    return found


def supports(element: object, capability: Capability) -> bool:
    """Check whether an element supports every capability in `capability`.

    Args:
        element: Element instance or element class.
        capability: Single capability or combination.

    Returns:
        True if all requested capabilities are present.
    """
    return capability in capabilities_of(element)


def require(element: object, capability: Capability) -> None:
    """Ensure an element supports `capability`.

    Args:
        element: Element instance or element class.
        capability: Single capability or combination.

    Raises:
        UnsupportedCapabilityError: If any requested capability is missing.
    """
    missing = capability & ~capabilities_of(element)
    if missing:
        element_type = _element_type(element)
        logger.debug("%s lacks capability %s", element_type.__qualname__, missing.name)
        raise UnsupportedCapabilityError(element_type, missing)
