"""
Search analysis API routes.

- POST /api/search/analyze: fetch, classify and aggregate results for a query
- GET /api/search/health: liveness probe with component status
"""

from fastapi import APIRouter, Depends, Request, status

import structlog

from serp_analyzer.analysis.pipeline import AnalysisPipeline
from serp_analyzer.api.dependencies import get_analysis_pipeline, get_settings
from serp_analyzer.api.models import ErrorResponse, HealthResponse
from serp_analyzer.config import Settings
from serp_analyzer.models.analysis_models import AnalysisReport, AnalyzeRequest

logger = structlog.get_logger(__name__)

HEALTH_MESSAGE = "Academic SERP Analyzer API is running"

router = APIRouter(prefix="/api/search")


@router.post(
    "/analyze",
    response_model=AnalysisReport,
    status_code=status.HTTP_200_OK,
    summary="Analyze the section profile of a query's search results",
    description="""
    Fetch up to maxResults search results for the query, detect which
    academic-paper sections each title/snippet implies, and return the
    sections ranked by how many results mention them.
    
    When the search provider is unavailable the analysis runs on
    deterministic mock results instead.
    """,
    responses={
        200: {"description": "Analysis completed"},
        400: {"model": ErrorResponse, "description": "Invalid request (e.g. blank query)"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
)
async def analyze_query(
    request: AnalyzeRequest,
    pipeline: AnalysisPipeline = Depends(get_analysis_pipeline),
) -> AnalysisReport:
    """
    Analyze a query.
    
    Args:
        request: AnalyzeRequest with query and maxResults
        pipeline: Analysis pipeline (injected)
    
    Returns:
        AnalysisReport (serialized with camelCase keys)
    """
    logger.info(
        "Analysis request received",
        query=request.query,
        max_results=request.max_results,
    )
    # AnalysisError propagates to the registered exception handlers
    return await pipeline.analyze(request.query, request.max_results)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="""
    Liveness probe. Reports whether the worker pool is running and whether
    the search provider has an API key (otherwise results are mocked).
    """,
)
async def health_check(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """
    Report service status.
    
    Args:
        request: FastAPI request (for app.state resources)
        settings: Application settings (injected)
    
    Returns:
        HealthResponse with component statuses
    """
    services = {}
    
    pool = getattr(request.app.state, "worker_pool", None)
    services["worker_pool"] = "ok" if pool is not None and pool.is_running else "stopped"
    
    search_client = getattr(request.app.state, "search_client", None)
    if search_client is None:
        services["search_provider"] = "not_initialized"
    elif await search_client.health_check():
        services["search_provider"] = "configured"
    else:
        services["search_provider"] = "mock"
    
    health_status = "ok" if services["worker_pool"] == "ok" else "degraded"
    
    logger.debug("Health check", status=health_status, services=services)
    
    return HealthResponse(
        status=health_status,
        message=HEALTH_MESSAGE,
        version=settings.APP_VERSION,
        services=services,
    )
