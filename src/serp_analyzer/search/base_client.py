"""
Abstract base client for search providers.

Defines the interface the analysis pipeline depends on. Provider failures
are the client's problem: implementations substitute fallback results
instead of raising, so the pipeline treats live and fallback output alike.
"""

from abc import ABC, abstractmethod

import structlog

from serp_analyzer.models.search_models import SearchResult


logger = structlog.get_logger(__name__)


class BaseSearchClient(ABC):
    """
    Abstract base class for search provider clients.
    
    Responsibilities:
    - Send the query to the provider
    - Parse the response into SearchResult records (1-based positions)
    - Recover from provider failures with fallback results
    
    Does NOT handle:
    - Section classification (that's the dispatcher's job)
    - Aggregation (that's SectionAggregator's job)
    """
    
    def __init__(self, timeout: float = 10.0, max_results: int = 10, **kwargs):
        """
        Initialize base client.
        
        Args:
            timeout: Request timeout in seconds
            max_results: Provider-side cap on results per query
            **kwargs: Additional provider-specific config
        """
        self.timeout = timeout
        self.max_results = max_results
        self.extra_config = kwargs
    
    @abstractmethod
    async def fetch_results(self, query: str, limit: int) -> list[SearchResult]:
        """
        Fetch search results for a query.
        
        Args:
            query: Search query
            limit: Maximum number of results wanted
            
        Returns:
            At most min(limit, max_results) results ordered by position.
            On provider failure, fallback results of the same shape.
        """
        pass
    
    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check whether the provider is usable.
        
        Returns:
            True if live results can be served, False otherwise
            
        Note:
            This should NOT raise exceptions - return False on error.
        """
        pass
    
    async def close(self):
        """
        Close client connections and cleanup resources.
        
        Should be called on shutdown. Default implementation does nothing.
        """
        logger.debug("Closing search client", client_class=self.__class__.__name__)
    
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"timeout={self.timeout}s, "
            f"max_results={self.max_results})"
        )
