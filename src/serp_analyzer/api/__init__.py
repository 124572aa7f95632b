"""
FastAPI API routes and endpoints.

- routes.py: POST /api/search/analyze, GET /api/search/health
- dependencies.py: Dependency injection for pool, search client, pipeline
- models.py: API-specific response models
- error_handlers.py: Exception handlers for structured error responses
- middleware.py: Request id tracing
"""

from serp_analyzer.api import dependencies, error_handlers, models
from serp_analyzer.api.routes import router

__all__ = [
    "router",
    "dependencies",
    "error_handlers",
    "models",
]
