"""Live-server smoke tests (read-only).

Skipped unless ENABLE_API_TESTS=1 and ORCA_API_URL point at a test server.
"""

from __future__ import annotations

import pytest

from orca_api import Config, OrcaApi

pytestmark = pytest.mark.api


def test_lock_list_against_live_server() -> None:
    with OrcaApi.from_config(Config()) as api:
        res = api.lock.list()

    assert res.succeeded(), res.message()
    assert isinstance(res.lock_information, list)


def test_physician_list_against_live_server() -> None:
    with OrcaApi.from_config(Config()) as api:
        res = api.physician.list()

    assert res.api_result is not None, res.raw
