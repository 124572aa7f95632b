"""
FastAPI application entry point for the Academic SERP Analyzer.
"""

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from serp_analyzer.analysis.worker_pool import WorkerPool
from serp_analyzer.api.error_handlers import EXCEPTION_HANDLERS
from serp_analyzer.api.middleware import RequestTracingMiddleware
from serp_analyzer.api.routes import router
from serp_analyzer.config import settings
from serp_analyzer.logging_config import configure_logging
from serp_analyzer.search.serper_client import SerperClient

# Configure structured logging before anything logs
configure_logging(settings.LOG_LEVEL, settings.ENVIRONMENT, settings.APP_VERSION)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Section profile of academic search results (Abstract, Methodology, Results, ...)",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# Request tracing middleware (request_id in all logs)
app.add_middleware(RequestTracingMiddleware)

# CORS for the browser frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

for exc_class, handler in EXCEPTION_HANDLERS.items():
    app.add_exception_handler(exc_class, handler)

app.include_router(router, tags=["search"])


@app.on_event("startup")
async def startup():
    """Create the shared worker pool and search client."""
    logger.info(
        "Application startup",
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        worker_pool_size=settings.WORKER_POOL_SIZE,
        classification_timeout_seconds=settings.CLASSIFICATION_TIMEOUT_SECONDS,
    )

    app.state.worker_pool = WorkerPool(size=settings.WORKER_POOL_SIZE).start()
    app.state.search_client = SerperClient(
        api_key=settings.SERPER_API_KEY,
        api_url=settings.SERPER_API_URL,
        timeout=settings.SERPER_TIMEOUT,
        max_results=settings.SERPER_MAX_RESULTS,
    )

    if not await app.state.search_client.health_check():
        logger.warning("SERPER_API_KEY not configured, analyses will use mock results")

    logger.info("Application startup complete")


@app.on_event("shutdown")
async def shutdown():
    """Close the search client and stop the worker pool."""
    logger.info("Application shutdown")

    search_client = getattr(app.state, "search_client", None)
    if search_client is not None:
        await search_client.close()
        app.state.search_client = None

    worker_pool = getattr(app.state, "worker_pool", None)
    if worker_pool is not None:
        worker_pool.shutdown()
        app.state.worker_pool = None

    logger.info("Application shutdown complete")


# Prometheus metrics instrumentation
if settings.PROMETHEUS_ENABLED:
    Instrumentator().instrument(app).expose(app)


@app.get("/")
async def root():
    """Root endpoint with API documentation links."""
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": "/docs",
        "analyze": "/api/search/analyze",
        "health": "/api/search/health",
        "metrics": "/metrics" if settings.PROMETHEUS_ENABLED else None,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "serp_analyzer.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
