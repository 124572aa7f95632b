"""
Section analysis core.

- taxonomy.py: Read-only label metadata (description, category)
- classifier.py: Pure keyword rules, one per section label
- worker_pool.py: Fixed-size thread pool with explicit lifecycle
- dispatcher.py: Concurrent classification with a global deadline
- aggregator.py: Count/percentage reduction and ranking
- pipeline.py: fetch -> classify -> aggregate -> report
"""

from serp_analyzer.analysis.aggregator import SectionAggregator
from serp_analyzer.analysis.classifier import SECTION_RULES, SectionRule, classify
from serp_analyzer.analysis.dispatcher import ClassificationDispatcher
from serp_analyzer.analysis.pipeline import AnalysisPipeline
from serp_analyzer.analysis.taxonomy import (
    LabelInfo,
    TaxonomyRegistry,
    build_default_registry,
)
from serp_analyzer.analysis.worker_pool import WorkerPool

__all__ = [
    "TaxonomyRegistry",
    "LabelInfo",
    "build_default_registry",
    "SectionRule",
    "SECTION_RULES",
    "classify",
    "WorkerPool",
    "ClassificationDispatcher",
    "SectionAggregator",
    "AnalysisPipeline",
]
