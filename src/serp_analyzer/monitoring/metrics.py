"""Custom Prometheus metrics for the Academic SERP Analyzer.

These metrics are exposed at /metrics endpoint and should be scraped by Prometheus.
Alert rules should be configured for:
- search_fallbacks_total (provider outage or missing API key)
- classification_task_failures_total (classifier bugs)
- classification_timeouts_total (worker pool saturation)
"""

from prometheus_client import Counter, Histogram

# === Analysis Metrics ===

analyses_total = Counter(
    "serp_analyses_total",
    "Total analyses by outcome",
    ["outcome"],
)
"""
Analyses counter by outcome.

Labels:
- outcome: success, error
"""

analysis_duration_seconds = Histogram(
    "serp_analysis_duration_seconds",
    "End-to-end analysis duration in seconds (fetch + classify + aggregate)",
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0],
)

section_matches_total = Counter(
    "serp_section_matches_total",
    "Total search results matched per section label",
    ["label"],
)
"""
Section distribution counter.

Labels:
- label: Abstract, Methodology, Results, etc.

Used to watch the taxonomy coverage over time.
"""

# === Dispatcher Metrics ===

classification_task_failures_total = Counter(
    "serp_classification_task_failures_total",
    "Classification tasks that raised and were degraded to an empty label set",
)

classification_timeouts_total = Counter(
    "serp_classification_timeouts_total",
    "Classification tasks abandoned because the batch deadline elapsed",
)
"""
Abandoned task counter.

Any non-zero rate means the worker pool cannot keep up with the request
volume within CLASSIFICATION_TIMEOUT_SECONDS.

Alert thresholds:
- WARN: any increase
"""

# === Search Provider Metrics ===

search_fallbacks_total = Counter(
    "serp_search_fallbacks_total",
    "Searches answered with mock results instead of provider data",
    ["reason"],
)
"""
Fallback counter by reason.

Labels:
- reason: no_api_key, http_status, network_error, timeout, invalid_json

Alert thresholds:
- WARN: rate > 10% of analyses (when an API key is configured)
"""

search_latency_seconds = Histogram(
    "serp_search_latency_seconds",
    "Search provider request latency in seconds",
    ["success"],
    buckets=[0.1, 0.25, 0.5, 1.0, 2.0, 5.0, 10.0],
)
