"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from pairmath.config import reset_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Reload settings from the environment for every test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def no_capability_checks(monkeypatch):
    """Disable runtime capability checks via the environment."""
    monkeypatch.setenv("PAIRMATH_CHECK_CAPABILITIES", "false")
    reset_settings()
