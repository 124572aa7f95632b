"""
FastAPI exception handlers for structured error responses.

Maps request validation failures to 400 and every internal failure to an
opaque 500: no exception text or traceback reaches the client.
"""

from datetime import datetime, timezone

import structlog
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from serp_analyzer.exceptions import AnalysisError

logger = structlog.get_logger(__name__)


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def _error_details(errors: list[dict]) -> list[dict]:
    """Reduce pydantic error dicts to JSON-safe location/message pairs."""
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": str(error.get("msg", "")),
            "type": str(error.get("type", "")),
        }
        for error in errors
    ]


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError | PydanticValidationError
) -> JSONResponse:
    """
    Handle invalid request bodies (blank query, bad maxResults).
    
    Maps to 400 Bad Request (client error).
    
    Args:
        request: FastAPI request
        exc: RequestValidationError or pydantic ValidationError
    
    Returns:
        JSON error response
    """
    details = _error_details(exc.errors())
    logger.warning("Invalid request format", errors=details)
    
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "invalid_request",
            "message": "Request validation failed",
            "details": details,
            "timestamp": _timestamp(),
        },
    )


async def analysis_error_handler(request: Request, exc: AnalysisError) -> JSONResponse:
    """
    Handle failed analyses.
    
    Maps to 500 Internal Server Error. The cause is logged, not returned.
    
    Args:
        request: FastAPI request
        exc: AnalysisError instance
    
    Returns:
        JSON error response
    """
    logger.error(
        "Analysis error",
        error=exc.message,
        details=exc.details,
        cause=type(exc.__cause__).__name__ if exc.__cause__ else None,
    )
    return _internal_error_response()


async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle unexpected errors.
    
    Maps to 500 Internal Server Error.
    
    Args:
        request: FastAPI request
        exc: Exception instance
    
    Returns:
        JSON error response
    """
    logger.exception(
        "Unexpected error",
        error_type=type(exc).__name__,
    )
    return _internal_error_response()


def _internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "message": "An unexpected error occurred",
            "timestamp": _timestamp(),
        },
    )


# Exception handler mapping for FastAPI app.add_exception_handler()
EXCEPTION_HANDLERS = {
    RequestValidationError: request_validation_error_handler,
    PydanticValidationError: request_validation_error_handler,
    AnalysisError: analysis_error_handler,
    Exception: generic_error_handler,
}
