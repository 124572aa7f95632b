"""
Custom exceptions for the Academic SERP Analyzer.

The hierarchy separates failures the search client recovers from on its own
(provider failures, answered with mock data) from failures that abort an
analysis and surface at the HTTP boundary as an opaque server error.
"""


class SerpAnalyzerError(Exception):
    """
    Base exception for all analyzer errors.
    
    Carries a human-readable message plus structured details for logging.
    Details are never sent to API clients.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class SearchProviderError(SerpAnalyzerError):
    """
    Raised when the search provider call fails or returns unusable data.
    
    Includes non-200 statuses, network errors, timeouts and undecodable
    JSON. The search client catches this and substitutes mock results, so
    it never reaches the analysis pipeline.
    """
    pass


class AnalysisError(SerpAnalyzerError):
    """
    Raised when an analysis cannot be completed.
    
    Wraps any unexpected failure inside the pipeline. The pipeline never
    returns a partial report; it either completes or raises this.
    Mapped to 500 Internal Server Error without internal details.
    """
    pass
