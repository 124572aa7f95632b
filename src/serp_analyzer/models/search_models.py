"""
Search result models.

A SearchResult is one organic hit from the search provider (or from the
mock fallback) and is the unit the section classifier works on.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class SearchResult(BaseModel):
    """
    One search-engine result: title, snippet and rank.
    
    Immutable once created. Produced by the search client, read-only for
    the analysis core.
    """
    
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
    
    title: str = Field(default="", description="Result title as returned by the provider")
    link: str = Field(default="", description="Result URL")
    snippet: str = Field(default="", description="Result snippet text")
    display_link: str = Field(
        default="",
        description="Domain of the result URL without leading 'www.'",
        examples=["arxiv.org"],
    )
    position: int = Field(..., ge=1, description="1-based rank in the provider's result list")
