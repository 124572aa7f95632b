"""
API-specific response models for FastAPI endpoints.

The analysis request/report models live in serp_analyzer.models; these
cover the health surface and error bodies.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HealthResponse(BaseModel):
    """Response for health check endpoint."""
    
    status: str = Field(
        description="Overall health status",
        examples=["ok", "degraded"]
    )
    message: str = Field(
        description="Human-readable status line",
        examples=["Academic SERP Analyzer API is running"]
    )
    version: str = Field(
        description="Application version",
        examples=["0.1.0"]
    )
    services: dict[str, str] = Field(
        description="Component-specific status",
        examples=[{"worker_pool": "ok", "search_provider": "configured"}]
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="Health check timestamp (UTC)"
    )


class ErrorResponse(BaseModel):
    """Standard error response format."""
    
    error: str = Field(
        description="Error code or type",
        examples=["invalid_request", "internal_error"]
    )
    message: str = Field(
        description="Human-readable error message"
    )
    details: Optional[list[dict]] = Field(
        default=None,
        description="Field-level validation failures (invalid_request only)"
    )
    timestamp: datetime = Field(
        default_factory=_utcnow,
        description="Error timestamp (UTC)"
    )
