"""
FastAPI dependency injection for the Academic SERP Analyzer.

Long-lived resources (worker pool, search client) are created by the
application lifecycle in main.py and read from app.state here; the
remaining pipeline components are cheap and built per request.
"""

from functools import lru_cache

from fastapi import Depends, Request

from serp_analyzer.analysis.aggregator import SectionAggregator
from serp_analyzer.analysis.dispatcher import ClassificationDispatcher
from serp_analyzer.analysis.pipeline import AnalysisPipeline
from serp_analyzer.analysis.taxonomy import TaxonomyRegistry, build_default_registry
from serp_analyzer.analysis.worker_pool import WorkerPool
from serp_analyzer.config import Settings, settings
from serp_analyzer.search.base_client import BaseSearchClient


@lru_cache()
def get_settings() -> Settings:
    """
    Get settings singleton.
    
    Returns:
        Settings instance
    """
    return settings


@lru_cache()
def get_taxonomy_registry() -> TaxonomyRegistry:
    """
    Get the taxonomy registry.
    
    Built once on first use and shared read-only by all requests.
    
    Returns:
        TaxonomyRegistry with the built-in section labels
    """
    return build_default_registry()


def get_worker_pool(request: Request) -> WorkerPool:
    """
    Get the application's worker pool.
    
    Raises:
        RuntimeError: The application has not been started (no pool on app.state)
    """
    pool = getattr(request.app.state, "worker_pool", None)
    if pool is None:
        raise RuntimeError("Worker pool not initialized; application startup has not run")
    return pool


def get_search_client(request: Request) -> BaseSearchClient:
    """
    Get the application's search client.
    
    Raises:
        RuntimeError: The application has not been started (no client on app.state)
    """
    client = getattr(request.app.state, "search_client", None)
    if client is None:
        raise RuntimeError("Search client not initialized; application startup has not run")
    return client


def get_dispatcher(
    pool: WorkerPool = Depends(get_worker_pool),
    settings: Settings = Depends(get_settings),
) -> ClassificationDispatcher:
    """
    Create a dispatcher bound to the shared worker pool.
    
    Args:
        pool: Worker pool (injected)
        settings: Application settings (injected)
    
    Returns:
        ClassificationDispatcher instance
    """
    return ClassificationDispatcher(
        pool=pool,
        timeout_seconds=settings.CLASSIFICATION_TIMEOUT_SECONDS,
    )


def get_aggregator(
    registry: TaxonomyRegistry = Depends(get_taxonomy_registry),
) -> SectionAggregator:
    """Create an aggregator over the shared registry."""
    return SectionAggregator(registry)


def get_analysis_pipeline(
    search_client: BaseSearchClient = Depends(get_search_client),
    dispatcher: ClassificationDispatcher = Depends(get_dispatcher),
    aggregator: SectionAggregator = Depends(get_aggregator),
) -> AnalysisPipeline:
    """
    Create the analysis pipeline with injected dependencies.
    
    Note: the pipeline is NOT cached because it is lightweight and stateless.
    The heavy resources (pool, HTTP client, registry) are shared.
    
    Args:
        search_client: Search client (injected)
        dispatcher: Classification dispatcher (injected)
        aggregator: Section aggregator (injected)
    
    Returns:
        AnalysisPipeline instance
    """
    return AnalysisPipeline(
        search_client=search_client,
        dispatcher=dispatcher,
        aggregator=aggregator,
    )
