"""
Unit tests for the Academic SERP Analyzer.

Test individual components in isolation:
- Models (aliases, validation, constraints)
- Taxonomy, classifier rules, worker pool, dispatcher, aggregator, pipeline
- Serper client (httpx MockTransport) and mock fallback data
- API dependencies and exception handlers
"""
