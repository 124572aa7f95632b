"""
Search provider clients.

Provides an abstract interface (BaseSearchClient) and the Serper
implementation with mock-data fallback.
"""

from serp_analyzer.search.base_client import BaseSearchClient
from serp_analyzer.search.mock_data import generate_mock_results
from serp_analyzer.search.serper_client import SerperClient, parse_organic_results
from serp_analyzer.search.text_utils import extract_domain

__all__ = [
    "BaseSearchClient",
    "SerperClient",
    "parse_organic_results",
    "generate_mock_results",
    "extract_domain",
]
