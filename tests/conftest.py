"""Pytest configuration and fixtures.

Provides environment isolation, settings-cache hygiene and marker
registration. All fixtures here are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import os

import pytest

from outcomekit.config import reset_settings_cache

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from reading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.dotenv_values", lambda *_args, **_kwargs: {}, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_outcomekit_env(monkeypatch):
    """Clear OUTCOMEKIT_* env vars and the cached settings around each test."""
    for key in list(os.environ.keys()):
        if key.startswith("OUTCOMEKIT_"):
            monkeypatch.delenv(key, raising=False)
    reset_settings_cache()
    yield
    reset_settings_cache()


# =============================================================================
# Shared values (opt-in)
# =============================================================================


@pytest.fixture
def boom() -> ValueError:
    """A fresh exception instance for identity-sensitive assertions."""
    return ValueError("boom")


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_configure(config):
    """Configure custom markers for test organization."""
    markers = [
        "unit: Fast, isolated unit tests",
        "contract: Public API and invariant contracts",
        "allow_dotenv: Let python-dotenv read a real .env file",
    ]
    for marker in markers:
        config.addinivalue_line("markers", marker)
