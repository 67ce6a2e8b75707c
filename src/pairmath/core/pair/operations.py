"""Pure functions over pair-representable values."""

from __future__ import annotations

import math
from typing import Any, SupportsFloat

from pairmath.config import get_settings
from pairmath.core.pair.models import PairRepresentable


def convert[R: PairRepresentable[Any]](result_type: type[R], value: PairRepresentable[Any]) -> R:
    """Reconstruct `value` as another pair-representable type.

    Args:
        result_type: Pair type to build, e.g. `Point`.
        value: Any pair-representable value.

    Returns:
        New `result_type` instance with the same components in the same order.
    """
    return result_type.from_pair(value.to_pair())


def approx_equal(
    a: PairRepresentable[Any],
    b: PairRepresentable[Any],
    *,
    rel_tol: float | None = None,
    abs_tol: float | None = None,
) -> bool:
    """Compare two pairs component-wise within a tolerance.

    Only the components are compared, so a `Point` and a `Size` holding the same
    numbers are approximately equal.

    Args:
        a: First pair.
        b: Second pair.
        rel_tol: Relative tolerance. Defaults to `PairMathSettings.rel_tol`.
        abs_tol: Absolute tolerance. Defaults to `PairMathSettings.abs_tol`.

    Returns:
        True if both components are close.
    """
    settings = get_settings()
    rel = settings.rel_tol if rel_tol is None else rel_tol
    abs_ = settings.abs_tol if abs_tol is None else abs_tol
    lhs: tuple[SupportsFloat, SupportsFloat] = a.to_pair()
    rhs: tuple[SupportsFloat, SupportsFloat] = b.to_pair()
    return all(
        math.isclose(float(x), float(y), rel_tol=rel, abs_tol=abs_)
        for x, y in zip(lhs, rhs, strict=True)
    )
