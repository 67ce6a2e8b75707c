"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from pairmath.config import PairMathSettings, get_settings

    # Load from environment variables (PAIRMATH_*)
    settings = get_settings()

    # Or override with explicit values
    settings = PairMathSettings(rel_tol=1e-6)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class PairMathSettings(BaseSettings):  # type: ignore[misc]
    """Library-wide settings.

    Attributes:
        rel_tol: Default relative tolerance for `approx_equal`.
        abs_tol: Default absolute tolerance for `approx_equal`.
        check_capabilities: Check element capabilities at runtime before a
            lifted operator runs. When off, a missing capability surfaces as
            the element's own TypeError instead.
        log_level: Level of the `pairmath` logger set by `configure_logging`
            when not verbose.

    Environment Variables:
        PAIRMATH_REL_TOL
        PAIRMATH_ABS_TOL
        PAIRMATH_CHECK_CAPABILITIES
        PAIRMATH_LOG_LEVEL
    """

    model_config = SettingsConfigDict(
        env_prefix="PAIRMATH_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    rel_tol: float = Field(default=1e-9, ge=0.0)
    abs_tol: float = Field(default=1e-9, ge=0.0)
    check_capabilities: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


@lru_cache(maxsize=1)
def get_settings() -> PairMathSettings:
    """Get the process-wide settings, loaded once from the environment.

    Returns:
        Cached PairMathSettings instance.
    """
    return PairMathSettings()


def reset_settings() -> None:
    """Drop the cached settings so the next `get_settings()` reloads them."""
    get_settings.cache_clear()
