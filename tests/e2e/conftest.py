"""E2E test configuration — live API credentials."""

from __future__ import annotations

import pytest


@pytest.fixture
def api_opts(request):
    url = request.config.getoption("--api-url")
    token = request.config.getoption("--api-token")
    if not url or not token:
        pytest.skip("Live API credentials not provided")
    return ["--url", url, "--token", token]
