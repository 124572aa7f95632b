"""
Serper (Google Search API) client.

Communicates with the Serper API using httpx AsyncClient. Supports:
- Organic result parsing with domain extraction
- Connection pooling via a persistent AsyncClient
- Transparent fallback to mock results on any provider failure
"""

import time
from typing import Any, Optional

import httpx
import structlog

from serp_analyzer.config import SERPER_PLACEHOLDER_KEY
from serp_analyzer.exceptions import SearchProviderError
from serp_analyzer.models.search_models import SearchResult
from serp_analyzer.monitoring.metrics import search_fallbacks_total, search_latency_seconds
from serp_analyzer.search.base_client import BaseSearchClient
from serp_analyzer.search.mock_data import generate_mock_results
from serp_analyzer.search.text_utils import as_text, extract_domain


logger = structlog.get_logger(__name__)

DEFAULT_SERPER_URL = "https://google.serper.dev/search"


class SerperClient(BaseSearchClient):
    """
    Serper-specific search client.

    API:
    - POST /search with {"q": <query>, "num": <n>} and an X-API-KEY header
    - Response: {"organic": [{"title", "link", "snippet", ...}, ...]}

    Any failure (non-200 status, network error, timeout, invalid JSON)
    is logged and answered with generate_mock_results(); callers never see
    a provider error. Without a configured API key the network is skipped.
    """

    def __init__(
        self,
        api_key: str,
        api_url: str = DEFAULT_SERPER_URL,
        timeout: float = 10.0,
        max_results: int = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        **kwargs
    ):
        """
        Initialize Serper client.

        Args:
            api_key: Serper API key (empty or placeholder means mock-only)
            api_url: Search endpoint URL
            timeout: Request timeout in seconds
            max_results: Provider-side cap on results per query
            transport: Optional httpx transport (used by tests)
            **kwargs: Additional config
        """
        super().__init__(timeout, max_results, **kwargs)
        self.api_key = api_key
        self.api_url = api_url
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

        logger.info(
            "Serper client initialized",
            api_url=self.api_url,
            timeout=timeout,
            max_results=max_results,
            api_key_configured=self.has_api_key,
        )

    @property
    def has_api_key(self) -> bool:
        key = (self.api_key or "").strip()
        return bool(key) and key != SERPER_PLACEHOLDER_KEY

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self._transport,
            )
            logger.debug("Created new httpx AsyncClient")
        return self._client

    async def fetch_results(self, query: str, limit: int) -> list[SearchResult]:
        """
        Search Serper and return at most min(limit, max_results) results.

        Falls back to mock results on provider failure.
        """
        num = max(0, min(limit, self.max_results))
        if num == 0:
            return []

        if not self.has_api_key:
            return self._fallback(query, num, reason="no_api_key")

        try:
            payload = await self._search(query, num)
        except SearchProviderError as e:
            logger.warning(
                "Serper search failed, using mock data fallback",
                error=e.message,
                **e.details,
            )
            return self._fallback(query, num, reason=e.details.get("reason", "unknown"))

        results = parse_organic_results(payload)[:num]
        logger.info("Serper search completed", query=query, requested=num, returned=len(results))
        return results

    async def _search(self, query: str, num: int) -> dict[str, Any]:
        """POST the query and return the decoded JSON body."""
        start_time = time.perf_counter()
        success = "false"
        try:
            client = await self._get_client()
            response = await client.post(
                self.api_url,
                json={"q": query, "num": num},
                headers={
                    "X-API-KEY": self.api_key,
                    "Content-Type": "application/json",
                },
            )
            success = "true"
        except httpx.TimeoutException as e:
            raise SearchProviderError(
                f"Request timeout after {self.timeout}s",
                details={"reason": "timeout", "error_type": type(e).__name__},
            ) from e
        except httpx.HTTPError as e:
            raise SearchProviderError(
                f"Network error: {str(e)}",
                details={"reason": "network_error", "error_type": type(e).__name__},
            ) from e
        finally:
            search_latency_seconds.labels(success=success).observe(
                time.perf_counter() - start_time
            )

        if response.status_code != 200:
            raise SearchProviderError(
                f"Serper API returned status {response.status_code}",
                details={"reason": "http_status", "status_code": response.status_code},
            )

        try:
            body = response.json()
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError (non UTF-8 body)
            raise SearchProviderError(
                "Invalid JSON response from Serper",
                details={"reason": "invalid_json", "parse_error": str(e)},
            ) from e

        if not isinstance(body, dict):
            raise SearchProviderError(
                "Unexpected Serper response shape: expected an object",
                details={"reason": "invalid_json"},
            )
        return body

    def _fallback(self, query: str, num: int, reason: str) -> list[SearchResult]:
        search_fallbacks_total.labels(reason=reason).inc()
        logger.info("Serving mock search results", reason=reason, count=num)
        return generate_mock_results(query, num)

    async def health_check(self) -> bool:
        """True when an API key is configured; live results are possible."""
        return self.has_api_key

    async def close(self):
        """Close the HTTP client."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("Closed httpx AsyncClient")
        self._client = None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"api_url={self.api_url}, "
            f"timeout={self.timeout}s)"
        )


def parse_organic_results(payload: dict[str, Any]) -> list[SearchResult]:
    """
    Parse the "organic" array of a Serper response.

    Missing fields become empty strings; positions are assigned 1..n in
    response order. A payload without an organic array yields [].
    """
    organic = payload.get("organic")
    if not isinstance(organic, list):
        logger.info("No organic results found in Serper response")
        return []

    results = []
    for item in organic:
        if not isinstance(item, dict):
            continue
        link = as_text(item.get("link"))
        results.append(
            SearchResult(
                title=as_text(item.get("title")),
                link=link,
                snippet=as_text(item.get("snippet")),
                display_link=extract_domain(link),
                position=len(results) + 1,
            )
        )
    return results
