"""
Academic SERP Analyzer.

Fetches search-engine results for a query and profiles them by the
academic-paper sections their titles and snippets imply:
- Section classification (multi-label keyword rules)
- Bounded concurrent dispatch over a shared worker pool
- Count/percentage aggregation against a fixed taxonomy

Architecture: FastAPI boundary + Serper search client + thread-pool analysis core
"""

__version__ = "0.1.0"
