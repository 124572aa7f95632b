"""Unit tests for SectionAggregator."""

import itertools
import math

import pytest

from serp_analyzer.analysis.aggregator import SectionAggregator
from serp_analyzer.analysis.taxonomy import LabelInfo, TaxonomyRegistry
from serp_analyzer.models.enums import SectionCategory, SectionLabel

A = SectionLabel.ABSTRACT
M = SectionLabel.METHODOLOGY
R = SectionLabel.RESULTS
D = SectionLabel.DATASETS


def test_counts_percentages_and_order(aggregator):
    sub_headings = aggregator.aggregate([{A, R}, {M, R}, set()], total_results=3)

    assert [(h.name, h.count) for h in sub_headings] == [
        ("Results", 2),
        ("Abstract", 1),
        ("Methodology", 1),
    ]
    assert math.isclose(sub_headings[0].percentage, 200 / 3, abs_tol=1e-9)
    assert math.isclose(sub_headings[1].percentage, 100 / 3, abs_tol=1e-9)


def test_metadata_copied_from_registry(aggregator):
    (heading,) = aggregator.aggregate([{M}], total_results=1)

    assert heading.description == "Detailed description of research methods"
    assert heading.category is SectionCategory.RESEARCH_CONTENT
    assert heading.percentage == 100.0


def test_unknown_label_gets_default_metadata():
    aggregator = SectionAggregator(
        TaxonomyRegistry({R: LabelInfo("Findings", SectionCategory.RESEARCH_CONTENT)})
    )

    (heading,) = aggregator.aggregate([{"Appendix"}], total_results=2)

    assert heading.name == "Appendix"
    assert heading.description == "Common section in academic papers"
    assert heading.category is SectionCategory.GENERAL
    assert heading.percentage == 50.0


def test_ties_broken_by_name(aggregator):
    sub_headings = aggregator.aggregate([{R, D, A, M}], total_results=4)

    assert [h.name for h in sub_headings] == ["Abstract", "Datasets", "Methodology", "Results"]


def test_label_repeated_within_one_result_counts_once(aggregator):
    (heading,) = aggregator.aggregate([[R, R, "Results"]], total_results=1)
    assert heading.count == 1


def test_zero_results_yields_no_sub_headings(aggregator):
    assert aggregator.aggregate([], total_results=0) == []


def test_single_empty_result_yields_no_sub_headings(aggregator):
    assert aggregator.aggregate([frozenset()], total_results=1) == []


def test_missing_label_sets_only_lower_counts(aggregator):
    """Timed-out results simply contribute nothing; total stays the denominator."""
    (heading,) = aggregator.aggregate([{R}], total_results=4)

    assert heading.count == 1
    assert heading.percentage == 25.0


def test_negative_total_rejected(aggregator):
    with pytest.raises(ValueError):
        aggregator.aggregate([], total_results=-1)


def test_more_label_sets_than_results_rejected(aggregator):
    with pytest.raises(ValueError):
        aggregator.aggregate([{R}, {R}], total_results=1)


def test_invariants_hold(aggregator):
    label_sets = [{A, R}, {R}, {M, D, R}, set(), {D}]
    total = len(label_sets)

    sub_headings = aggregator.aggregate(label_sets, total_results=total)

    distinct = set().union(*label_sets)
    assert len(sub_headings) == len(distinct)
    assert sum(h.count for h in sub_headings) >= len(distinct)
    for heading in sub_headings:
        assert 0 < heading.count <= total
        assert math.isclose(heading.percentage, 100 * heading.count / total, abs_tol=1e-9)
        assert 0.0 <= heading.percentage <= 100.0


def test_aggregate_is_idempotent(aggregator):
    label_sets = [{A, R}, {M}, {R, D}]

    first = aggregator.aggregate(label_sets, total_results=3)
    second = aggregator.aggregate(label_sets, total_results=3)

    assert first == second


def test_order_of_label_sets_does_not_matter(aggregator):
    label_sets = [{A, R}, {M, R}, {D}, set()]
    expected = aggregator.aggregate(label_sets, total_results=4)

    for permutation in itertools.permutations(label_sets):
        assert aggregator.aggregate(list(permutation), total_results=4) == expected


def test_accepts_generator_input(aggregator):
    sub_headings = aggregator.aggregate((labels for labels in [{R}, {R}]), total_results=2)
    assert sub_headings[0].count == 2
