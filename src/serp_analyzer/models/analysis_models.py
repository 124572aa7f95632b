"""
Analysis data models.

These models define the request accepted by the analyze endpoint and the
report it returns. The JSON form uses camelCase keys (totalResults,
subHeadings, processingTimeMs); snake_case names are accepted on input too.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from serp_analyzer.models.enums import SectionCategory
from serp_analyzer.models.search_models import SearchResult


class AnalyzeRequest(BaseModel):
    """Inbound analysis request: a non-blank query and a result budget."""
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    
    query: str = Field(..., min_length=1, description="Search query")
    max_results: int = Field(
        default=10,
        ge=1,
        description="Maximum number of search results to analyze (capped by the provider client)",
    )
    
    @field_validator("query")
    @classmethod
    def query_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Query cannot be empty")
        return value.strip()


class SubHeading(BaseModel):
    """
    Cross-result summary of one section label.
    
    Derived per analysis, never persisted.
    """
    
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
    
    name: str = Field(..., description="Section label name", examples=["Methodology"])
    description: str = Field(..., description="Section description from the taxonomy")
    count: int = Field(..., ge=0, description="Number of results matching the section")
    category: SectionCategory = Field(..., description="Section category from the taxonomy")
    percentage: float = Field(
        ...,
        ge=0.0,
        le=100.0,
        description="100 * count / total results",
    )


class AnalysisReport(BaseModel):
    """
    Complete analysis of one query.
    
    search_results are ordered by provider rank, sub_headings by count
    descending then by name.
    """
    
    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)
    
    query: str
    total_results: int = Field(..., ge=0)
    search_results: list[SearchResult] = Field(default_factory=list)
    sub_headings: list[SubHeading] = Field(default_factory=list)
    processing_time_ms: int = Field(..., ge=0, description="Wall-clock analysis time")
