"""
Pydantic data models for the Academic SERP Analyzer.

Includes:
- Enums (SectionLabel, SectionCategory)
- Search models (SearchResult)
- Analysis models (AnalyzeRequest, SubHeading, AnalysisReport)
"""

from serp_analyzer.models.enums import SectionCategory, SectionLabel
from serp_analyzer.models.search_models import SearchResult
from serp_analyzer.models.analysis_models import (
    AnalysisReport,
    AnalyzeRequest,
    SubHeading,
)

__all__ = [
    # Enums
    "SectionLabel",
    "SectionCategory",
    # Search models
    "SearchResult",
    # Analysis models
    "AnalyzeRequest",
    "SubHeading",
    "AnalysisReport",
]
