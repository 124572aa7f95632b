"""Monitoring and metrics instrumentation for the Academic SERP Analyzer.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from serp_analyzer.monitoring.metrics import (
    analyses_total,
    analysis_duration_seconds,
    classification_task_failures_total,
    classification_timeouts_total,
    search_fallbacks_total,
    search_latency_seconds,
    section_matches_total,
)

__all__ = [
    "analyses_total",
    "analysis_duration_seconds",
    "section_matches_total",
    "classification_task_failures_total",
    "classification_timeouts_total",
    "search_fallbacks_total",
    "search_latency_seconds",
]
