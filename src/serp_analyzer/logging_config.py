"""Structured logging for the analyzer, built on structlog.

Production renders one JSON object per line; development uses the colored
console renderer. Standard library loggers (uvicorn, httpx) are routed
through the same processor chain so every line carries the service context
and the request id bound by RequestTracingMiddleware.
"""

import logging
import sys
from typing import Iterable

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

APP_LOG_NAME = "academic-serp-analyzer"

REDACTED = "***"

# Event keys whose values never reach the log output
SECRET_KEYS = frozenset({"api_key", "serper_api_key", "x-api-key", "authorization"})

NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore", "asyncio")


def service_context(version: str, environment: str) -> Processor:
    """Processor adding service name, version and environment to every event."""
    def add_service_context(
        logger: WrappedLogger, method_name: str, event_dict: EventDict
    ) -> EventDict:
        event_dict.setdefault("app", APP_LOG_NAME)
        event_dict.setdefault("version", version)
        event_dict.setdefault("environment", environment)
        return event_dict

    return add_service_context


def redact_secrets(
    logger: WrappedLogger, method_name: str, event_dict: EventDict
) -> EventDict:
    """Mask credential values, including inside one level of nested dicts."""
    for key, value in event_dict.items():
        if key.lower() in SECRET_KEYS:
            event_dict[key] = REDACTED
        elif isinstance(value, dict):
            event_dict[key] = {
                k: REDACTED if str(k).lower() in SECRET_KEYS else v
                for k, v in value.items()
            }
    return event_dict


def _quiet(loggers: Iterable[str]) -> None:
    for name in loggers:
        logging.getLogger(name).setLevel(logging.WARNING)


def configure_logging(
    log_level: str = "INFO",
    environment: str = "development",
    version: str = "0.1.0",
) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Logging level name; unknown names fall back to INFO
        environment: "production" selects JSON output, anything else the console
        version: Service version stamped on each event
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    json_output = environment.lower() == "production"

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        service_context(version, environment),
        redact_secrets,
    ]
    if json_output:
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=shared_processors,
        )
    )
    handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    _quiet(NOISY_LOGGERS)

    structlog.get_logger(__name__).info(
        "Logging configured",
        log_level=logging.getLevelName(level),
        renderer="json" if json_output else "console",
    )
