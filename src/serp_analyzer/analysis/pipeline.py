"""
Analysis pipeline: fetch -> classify -> aggregate -> report.

This module implements the AnalysisPipeline that sequences the search
client, the concurrent dispatcher and the aggregator into one call.

Usage:
    pipeline = AnalysisPipeline(search_client, dispatcher, aggregator)
    report = await pipeline.analyze("transformer models", max_results=10)
"""

import time

import structlog

from serp_analyzer.analysis.aggregator import SectionAggregator
from serp_analyzer.analysis.dispatcher import ClassificationDispatcher
from serp_analyzer.exceptions import AnalysisError
from serp_analyzer.models.analysis_models import AnalysisReport
from serp_analyzer.monitoring.metrics import (
    analyses_total,
    analysis_duration_seconds,
    section_matches_total,
)
from serp_analyzer.search.base_client import BaseSearchClient

logger = structlog.get_logger(__name__)


class AnalysisPipeline:
    """
    Orchestrates one analysis request.

    The pipeline owns no retry logic: provider retries and fallback belong
    to the search client, task-level degradation to the dispatcher. It
    either returns a complete AnalysisReport or raises AnalysisError.

    Attributes:
        search_client: Provider client (returns fallback data on failure)
        dispatcher: Concurrent classifier runner
        aggregator: Label-set reducer
    """

    def __init__(
        self,
        search_client: BaseSearchClient,
        dispatcher: ClassificationDispatcher,
        aggregator: SectionAggregator,
    ):
        self.search_client = search_client
        self.dispatcher = dispatcher
        self.aggregator = aggregator

    async def analyze(self, query: str, max_results: int = 10) -> AnalysisReport:
        """
        Analyze the search results of a query.

        Args:
            query: Search query
            max_results: Maximum number of results to fetch and analyze

        Returns:
            AnalysisReport with results, ranked sub-headings and elapsed time

        Raises:
            AnalysisError: Any unexpected failure; no partial report is returned
        """
        start_time = time.perf_counter()
        log = logger.bind(query=query, max_results=max_results)

        try:
            results = await self.search_client.fetch_results(query, max_results)
            results = sorted(results, key=lambda result: result.position)

            labels_by_index = await self.dispatcher.classify_all(results)
            per_result_labels = [labels_by_index[index] for index in range(len(results))]

            sub_headings = self.aggregator.aggregate(per_result_labels, len(results))

            elapsed = time.perf_counter() - start_time
            report = AnalysisReport(
                query=query,
                total_results=len(results),
                search_results=results,
                sub_headings=sub_headings,
                processing_time_ms=int(elapsed * 1000),
            )
        except Exception as exc:
            analyses_total.labels(outcome="error").inc()
            log.error(
                "Analysis failed",
                error_type=type(exc).__name__,
                exc_info=True,
            )
            raise AnalysisError(
                f"Analysis failed for query: {query}",
                details={"error_type": type(exc).__name__},
            ) from exc

        analyses_total.labels(outcome="success").inc()
        analysis_duration_seconds.observe(elapsed)
        for heading in sub_headings:
            section_matches_total.labels(label=heading.name).inc(heading.count)

        log.info(
            "Analysis completed",
            total_results=report.total_results,
            sub_headings=len(report.sub_headings),
            top_section=sub_headings[0].name if sub_headings else None,
            processing_time_ms=report.processing_time_ms,
        )
        return report
