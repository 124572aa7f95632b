"""
Unit tests for ClassificationDispatcher.

Covers fan-out over the worker pool, degradation of failed and timed-out
tasks, and equivalence with sequential classification.
"""

import asyncio
import threading
from unittest.mock import patch

import pytest
from prometheus_client import REGISTRY

from serp_analyzer.analysis.classifier import classify
from serp_analyzer.analysis.dispatcher import ClassificationDispatcher
from serp_analyzer.analysis.worker_pool import WorkerPool
from serp_analyzer.models.enums import SectionLabel


def _sample(name: str) -> float:
    return REGISTRY.get_sample_value(name) or 0.0


def _make_results(create_result, count: int):
    texts = [
        ("Abstract", "results on benchmark datasets"),
        ("A novel framework", "ablation and hyperparameter tuning"),
        ("Related work", "literature review of prior work"),
        ("Cooking pasta", "boil water"),
        ("Future work", "limitations and challenges"),
    ]
    return [
        create_result(
            title=texts[i % len(texts)][0],
            snippet=texts[i % len(texts)][1],
            position=i + 1,
        )
        for i in range(count)
    ]


# ============================================================================
# Construction
# ============================================================================

@pytest.mark.parametrize("timeout", [0, -1.0])
def test_non_positive_timeout_rejected(worker_pool, timeout):
    with pytest.raises(ValueError):
        ClassificationDispatcher(worker_pool, timeout_seconds=timeout)


# ============================================================================
# Normal operation
# ============================================================================

@pytest.mark.asyncio
async def test_empty_input_returns_empty_mapping(worker_pool):
    dispatcher = ClassificationDispatcher(worker_pool)
    assert await dispatcher.classify_all([]) == {}


@pytest.mark.asyncio
async def test_one_entry_per_result(worker_pool, scenario_results):
    dispatcher = ClassificationDispatcher(worker_pool)

    labels_by_index = await dispatcher.classify_all(scenario_results)

    assert set(labels_by_index) == {0, 1, 2}
    assert labels_by_index[0] == {SectionLabel.ABSTRACT, SectionLabel.RESULTS}
    assert labels_by_index[1] == {SectionLabel.METHODOLOGY, SectionLabel.RESULTS}
    assert labels_by_index[2] == frozenset()


@pytest.mark.asyncio
async def test_concurrent_matches_sequential_for_100_results(create_result):
    """Bounded concurrent dispatch gives the same labels as a plain loop."""
    results = _make_results(create_result, 100)
    expected = {index: classify(result) for index, result in enumerate(results)}

    with WorkerPool(size=10) as pool:
        dispatcher = ClassificationDispatcher(pool, timeout_seconds=30.0)
        labels_by_index = await dispatcher.classify_all(results)

    assert labels_by_index == expected


@pytest.mark.asyncio
async def test_pool_size_bounds_concurrency(create_result):
    """No more than pool.size classifications run at the same time."""
    lock = threading.Lock()
    active = 0
    peak = 0
    gate = threading.Barrier(2, timeout=5)

    def tracking_classifier(result):
        nonlocal active, peak
        with lock:
            active += 1
            peak = max(peak, active)
        try:
            if result.position <= 2:
                gate.wait()
            return classify(result)
        finally:
            with lock:
                active -= 1

    results = _make_results(create_result, 20)
    with WorkerPool(size=2) as pool:
        dispatcher = ClassificationDispatcher(pool, classifier=tracking_classifier)
        labels_by_index = await dispatcher.classify_all(results)

    assert len(labels_by_index) == 20
    assert peak == 2


# ============================================================================
# Degradation
# ============================================================================

@pytest.mark.asyncio
async def test_failed_task_degrades_to_empty_set(worker_pool, scenario_results):
    """One raising task does not affect its siblings."""
    def flaky_classifier(result):
        if result.position == 2:
            raise RuntimeError("classifier bug")
        return classify(result)

    failures_before = _sample("serp_classification_task_failures_total")
    dispatcher = ClassificationDispatcher(worker_pool, classifier=flaky_classifier)

    labels_by_index = await dispatcher.classify_all(scenario_results)

    assert labels_by_index[0] == {SectionLabel.ABSTRACT, SectionLabel.RESULTS}
    assert labels_by_index[1] == frozenset()
    assert labels_by_index[2] == frozenset()
    assert _sample("serp_classification_task_failures_total") == failures_before + 1


@pytest.mark.asyncio
async def test_timeout_degrades_unfinished_tasks(worker_pool, scenario_results):
    """Results not classified by the deadline contribute an empty set."""
    release = threading.Event()

    def slow_classifier(result):
        if result.position == 3:
            release.wait(timeout=10)
        return classify(result)

    timeouts_before = _sample("serp_classification_timeouts_total")
    dispatcher = ClassificationDispatcher(
        worker_pool, timeout_seconds=0.2, classifier=slow_classifier
    )

    try:
        labels_by_index = await dispatcher.classify_all(scenario_results)
    finally:
        release.set()

    assert labels_by_index[0] == {SectionLabel.ABSTRACT, SectionLabel.RESULTS}
    assert labels_by_index[1] == {SectionLabel.METHODOLOGY, SectionLabel.RESULTS}
    assert labels_by_index[2] == frozenset()
    assert _sample("serp_classification_timeouts_total") == timeouts_before + 1


@pytest.mark.asyncio
async def test_timeout_with_saturated_pool_abandons_queued_tasks(create_result):
    """Tasks still queued behind a stuck worker are abandoned too."""
    release = threading.Event()

    def blocking_classifier(result):
        release.wait(timeout=10)
        return classify(result)

    results = _make_results(create_result, 4)
    pool = WorkerPool(size=1).start()
    try:
        dispatcher = ClassificationDispatcher(
            pool, timeout_seconds=0.1, classifier=blocking_classifier
        )
        labels_by_index = await dispatcher.classify_all(results)
    finally:
        release.set()
        pool.shutdown()

    assert labels_by_index == {index: frozenset() for index in range(4)}


@pytest.mark.asyncio
async def test_stopped_pool_raises(scenario_results):
    dispatcher = ClassificationDispatcher(WorkerPool(size=1))

    with pytest.raises(RuntimeError):
        await dispatcher.classify_all(scenario_results)


@pytest.mark.asyncio
async def test_tasks_cancelled_by_pool_shutdown_degrade_and_are_logged(scenario_results):
    pool = WorkerPool(size=1).start()
    started = threading.Event()
    release = threading.Event()

    def blocking_classify(result):
        if result.position == 1:
            started.set()
            release.wait(5)
        return classify(result)

    dispatcher = ClassificationDispatcher(pool, timeout_seconds=5.0, classifier=blocking_classify)
    failures_before = _sample("serp_classification_task_failures_total")

    with patch("serp_analyzer.analysis.dispatcher.logger") as mock_logger:
        batch = asyncio.create_task(dispatcher.classify_all(scenario_results))
        assert await asyncio.to_thread(started.wait, 5)
        # Queued tasks for positions 2 and 3 are cancelled by the executor
        pool.shutdown(wait=False)
        release.set()
        labels = await batch

    assert labels[0] == classify(scenario_results[0])
    assert labels[1] == frozenset()
    assert labels[2] == frozenset()
    assert _sample("serp_classification_task_failures_total") - failures_before == 2

    cancelled_positions = sorted(
        call.kwargs["position"]
        for call in mock_logger.warning.call_args_list
        if call.args[0] == "Classification task cancelled, using empty label set"
    )
    assert cancelled_positions == [2, 3]
