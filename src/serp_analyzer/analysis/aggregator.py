"""
Aggregation of per-result section labels into ranked sub-headings.
"""

from collections import Counter
from typing import Iterable

from serp_analyzer.analysis.taxonomy import TaxonomyRegistry, label_name
from serp_analyzer.models.analysis_models import SubHeading
from serp_analyzer.models.enums import SectionLabel


class SectionAggregator:
    """
    Single-threaded reduction of label sets.

    Counting is commutative, so the output does not depend on the order in
    which classification tasks finished. Ties on count are broken by label
    name so that the ordering is reproducible.

    Attributes:
        registry: Taxonomy used for descriptions and categories
    """

    def __init__(self, registry: TaxonomyRegistry):
        self.registry = registry

    def aggregate(
        self,
        per_result_labels: Iterable[Iterable[SectionLabel | str]],
        total_results: int,
    ) -> list[SubHeading]:
        """
        Merge per-result label sets into sub-headings.

        Args:
            per_result_labels: One label collection per search result.
                Results whose classification was lost contribute nothing.
            total_results: Number of search results (percentage denominator)

        Returns:
            Sub-headings for every label seen at least once, sorted by count
            descending then by name. Empty when total_results is 0.

        Raises:
            ValueError: total_results is negative or smaller than the number
                of label collections supplied
        """
        if total_results < 0:
            raise ValueError(f"total_results must be >= 0, got {total_results}")

        counts: Counter[str] = Counter()
        sets_seen = 0
        for labels in per_result_labels:
            sets_seen += 1
            # A label counts once per result
            counts.update({label_name(label) for label in labels})

        if sets_seen > total_results:
            raise ValueError(
                f"Got {sets_seen} label sets for {total_results} results"
            )
        if total_results == 0:
            return []

        sub_headings = []
        for name, count in counts.items():
            description, category = self.registry.describe(name)
            sub_headings.append(
                SubHeading(
                    name=name,
                    description=description,
                    count=count,
                    category=category,
                    percentage=count * 100.0 / total_results,
                )
            )

        sub_headings.sort(key=lambda heading: (-heading.count, heading.name))
        return sub_headings
