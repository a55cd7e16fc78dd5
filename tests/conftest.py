"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration, live-server test
skipping, and a scripted transport double. Fixtures here are autouse unless
noted.
"""

from __future__ import annotations

from contextlib import suppress
import logging
import os

import pytest

from orca_api.client import OrcaApi
from tests.helpers import FakeTransport

# =============================================================================
# Test Doubles
# =============================================================================


@pytest.fixture
def fake_transport() -> FakeTransport:
    """A fresh FakeTransport (not autouse)."""
    return FakeTransport()


@pytest.fixture
def orca_api(fake_transport: FakeTransport) -> OrcaApi:
    """Client wired to ``fake_transport`` with karte UID ``"self-karte"``."""
    return OrcaApi(fake_transport, karte_uid="self-karte")


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_orca_env(request, monkeypatch):
    """Clear ORCA_API_* variables so tests never see a developer's server.

    Opt-out: @pytest.mark.allow_env_pollution or @pytest.mark.api
    """
    if request.node.get_closest_marker("allow_env_pollution") or (
        "api" in request.node.keywords
    ):
        return

    for key in list(os.environ.keys()):
        if key.startswith("ORCA_API_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# =============================================================================
# Pytest Hooks
# =============================================================================

API_TESTS_REASON = "API tests require ENABLE_API_TESTS=1 and ORCA_API_URL"


def _api_tests_enabled() -> bool:
    return bool(os.getenv("ENABLE_API_TESTS")) and bool(os.getenv("ORCA_API_URL"))


def pytest_collection_modifyitems(items):
    """Automatically skip live-server tests when not explicitly enabled."""
    if _api_tests_enabled():
        return
    skip_api = pytest.mark.skip(reason=API_TESTS_REASON)
    for item in items:
        if "api" in item.keywords:
            item.add_marker(skip_api)
