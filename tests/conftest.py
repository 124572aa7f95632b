"""Shared test fixtures and configuration for all tests.

This conftest.py provides common fixtures used across unit and integration tests.
"""

import pytest

from serp_analyzer.analysis.aggregator import SectionAggregator
from serp_analyzer.analysis.taxonomy import TaxonomyRegistry, build_default_registry
from serp_analyzer.analysis.worker_pool import WorkerPool
from serp_analyzer.config import Settings
from serp_analyzer.models.search_models import SearchResult
from serp_analyzer.search.base_client import BaseSearchClient


@pytest.fixture
def test_settings() -> Settings:
    """Test settings with safe defaults for local testing.

    Override specific settings in individual tests as needed:
        def test_something(test_settings):
            test_settings.WORKER_POOL_SIZE = 2
    """
    return Settings(
        # === Application ===
        APP_NAME="Academic SERP Analyzer (Test)",
        APP_VERSION="0.1.0",
        DEBUG=True,
        LOG_LEVEL="DEBUG",
        ENVIRONMENT="development",

        # === Serper ===
        SERPER_API_KEY="",  # Never hit the network from tests
        SERPER_TIMEOUT=1.0,
        SERPER_MAX_RESULTS=10,

        # === Analysis Core ===
        WORKER_POOL_SIZE=4,
        CLASSIFICATION_TIMEOUT_SECONDS=5.0,

        PROMETHEUS_ENABLED=False,
    )


@pytest.fixture
def create_result():
    """Factory fixture to create SearchResult with custom text.

    Usage:
        def test_something(create_result):
            result = create_result(title="Our methodology", position=3)
    """
    def _create(
        title: str = "",
        snippet: str = "",
        position: int = 1,
        link: str = "",
        display_link: str = "",
    ) -> SearchResult:
        return SearchResult(
            title=title,
            snippet=snippet,
            position=position,
            link=link,
            display_link=display_link,
        )

    return _create


@pytest.fixture
def scenario_results(create_result) -> list[SearchResult]:
    """Three results: abstract+results, methodology+results, nothing."""
    return [
        create_result(
            title="Abstract of the keynote talk",
            snippet="Key results are reported here.",
            position=1,
        ),
        create_result(
            title="Methodology overview",
            snippet="Results from the lab.",
            position=2,
        ),
        create_result(
            title="Cooking pasta at home",
            snippet="Boil water and add salt.",
            position=3,
        ),
    ]


@pytest.fixture
def registry() -> TaxonomyRegistry:
    """Built-in taxonomy registry."""
    return build_default_registry()


@pytest.fixture
def aggregator(registry: TaxonomyRegistry) -> SectionAggregator:
    """Aggregator over the built-in registry."""
    return SectionAggregator(registry)


@pytest.fixture
def worker_pool():
    """Started worker pool, shut down after the test."""
    pool = WorkerPool(size=4).start()
    yield pool
    pool.shutdown()


class StaticSearchClient(BaseSearchClient):
    """Search client stub returning a fixed result list."""

    def __init__(self, results: list[SearchResult], healthy: bool = True):
        super().__init__(timeout=1.0, max_results=10)
        self.results = results
        self.healthy = healthy
        self.calls: list[tuple[str, int]] = []

    async def fetch_results(self, query: str, limit: int) -> list[SearchResult]:
        self.calls.append((query, limit))
        return self.results[: min(limit, self.max_results)]

    async def health_check(self) -> bool:
        return self.healthy


@pytest.fixture
def static_search_client():
    """Factory for StaticSearchClient stubs."""
    def _create(results: list[SearchResult], healthy: bool = True) -> StaticSearchClient:
        return StaticSearchClient(results, healthy=healthy)

    return _create
