"""Integration test fixtures.

The application is started through TestClient's context manager so the
startup/shutdown hooks create and release the worker pool and search
client exactly as in production.
"""

import pytest
from fastapi.testclient import TestClient

from serp_analyzer.api.dependencies import get_search_client
from serp_analyzer.main import app


@pytest.fixture
def client():
    """TestClient over the running application; dependency overrides reset after."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_search_results(static_search_client):
    """Route analyses to a static search client instead of the provider."""
    def _install(results):
        stub = static_search_client(results)
        app.dependency_overrides[get_search_client] = lambda: stub
        return stub

    return _install
