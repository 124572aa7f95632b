"""
Integration tests for the Academic SERP Analyzer.

Exercise the running FastAPI application end to end:
- Analyze endpoint (validation, classification, aggregation, camelCase JSON)
- Health endpoint and request id propagation
- Opaque error responses
"""
