"""Configuration module using Pydantic Settings and structlog.

Usage:
    from pairmath.config import configure_logging, get_settings

    configure_logging(verbose=True)
    tolerance = get_settings().rel_tol
"""

from pairmath.config.logging import configure_logging
from pairmath.config.settings import PairMathSettings, get_settings, reset_settings

__all__ = [
    "PairMathSettings",
    "get_settings",
    "reset_settings",
    "configure_logging",
]
