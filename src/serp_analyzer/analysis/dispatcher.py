"""
Concurrent dispatcher for section classification.

Runs the classifier over every search result on the shared worker pool and
waits for all tasks or for a global deadline, whichever comes first.

Degradation policy:
    - Task raised: its result becomes the empty set (logged, counted)
    - Deadline elapsed: unfinished tasks are cancelled and their results
      become the empty set (logged, counted)
    - Neither case fails the batch

Usage:
    dispatcher = ClassificationDispatcher(pool, timeout_seconds=30.0)
    labels_by_index = await dispatcher.classify_all(results)
"""

import asyncio
import time
from typing import Callable, Sequence

import structlog

from serp_analyzer.analysis.classifier import classify
from serp_analyzer.analysis.worker_pool import WorkerPool
from serp_analyzer.models.enums import SectionLabel
from serp_analyzer.models.search_models import SearchResult
from serp_analyzer.monitoring.metrics import (
    classification_task_failures_total,
    classification_timeouts_total,
)

logger = structlog.get_logger(__name__)

Classifier = Callable[[SearchResult], frozenset[SectionLabel]]

EMPTY_LABELS: frozenset[SectionLabel] = frozenset()


class ClassificationDispatcher:
    """
    Fan-out of classification tasks onto a bounded worker pool.

    Each task returns an immutable label set; nothing is merged here. The
    aggregator reduces the returned mapping after all tasks have joined.

    Attributes:
        pool: Shared worker pool (owned by the application, not the dispatcher)
        timeout_seconds: Global deadline for one batch
        classifier: Function mapping one result to its label set
    """

    def __init__(
        self,
        pool: WorkerPool,
        timeout_seconds: float = 30.0,
        classifier: Classifier = classify,
    ):
        if timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be positive, got {timeout_seconds}")
        self.pool = pool
        self.timeout_seconds = timeout_seconds
        self.classifier = classifier

    async def classify_all(
        self, results: Sequence[SearchResult]
    ) -> dict[int, frozenset[SectionLabel]]:
        """
        Classify every result concurrently.

        Args:
            results: Search results in provider order

        Returns:
            Mapping of result index to its label set, with one entry per
            input index. Failed and timed-out tasks map to the empty set.
        """
        if not results:
            return {}

        loop = asyncio.get_running_loop()
        executor = self.pool.executor
        start_time = time.perf_counter()

        futures: dict[asyncio.Future, int] = {
            loop.run_in_executor(executor, self.classifier, result): index
            for index, result in enumerate(results)
        }

        done, pending = await asyncio.wait(futures, timeout=self.timeout_seconds)

        labels_by_index: dict[int, frozenset[SectionLabel]] = {}
        failures = 0

        for future in done:
            index = futures[future]
            # Cancelled by a pool shutdown while the batch was running
            if future.cancelled():
                failures += 1
                classification_task_failures_total.inc()
                logger.warning(
                    "Classification task cancelled, using empty label set",
                    position=results[index].position,
                )
                labels_by_index[index] = EMPTY_LABELS
                continue
            exc = future.exception()
            if exc is not None:
                failures += 1
                classification_task_failures_total.inc()
                logger.warning(
                    "Classification task failed, using empty label set",
                    position=results[index].position,
                    error_type=type(exc).__name__,
                    error=str(exc),
                )
                labels_by_index[index] = EMPTY_LABELS
            else:
                labels_by_index[index] = future.result()

        if pending:
            for future in pending:
                future.cancel()
                labels_by_index[futures[future]] = EMPTY_LABELS
            classification_timeouts_total.inc(len(pending))
            logger.warning(
                "Classification deadline exceeded, abandoning unfinished tasks",
                timeout_seconds=self.timeout_seconds,
                completed=len(done),
                abandoned=len(pending),
            )

        logger.debug(
            "Classification batch finished",
            results=len(results),
            failures=failures,
            abandoned=len(pending),
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return labels_by_index
