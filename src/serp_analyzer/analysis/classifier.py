"""
Keyword-based section classifier.

Maps one search result to the set of academic-paper sections its title and
snippet imply. Each label has its own rule and every rule is evaluated, so a
result can match any number of sections.
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Pattern

from serp_analyzer.models.enums import SectionLabel
from serp_analyzer.models.search_models import SearchResult


@dataclass(frozen=True)
class SectionRule:
    """
    Detection rule for one section label.

    The rule fires when the lower-cased text contains any keyword as a
    substring, or when the optional pattern matches.

    Attributes:
        label: Section label emitted when the rule fires
        keywords: Lower-case substrings, any of which triggers the rule
        pattern: Regex for boundary-sensitive matching
    """

    label: SectionLabel
    keywords: tuple[str, ...] = ()
    pattern: Optional[Pattern[str]] = field(default=None, compare=False)

    def matches(self, text: str) -> bool:
        if any(keyword in text for keyword in self.keywords):
            return True
        return self.pattern is not None and self.pattern.search(text) is not None


SECTION_RULES: tuple[SectionRule, ...] = (
    # "abstract" only as a whole word ("abstraction" is not a section)
    SectionRule(SectionLabel.ABSTRACT, pattern=re.compile(r"\babstract\b")),
    SectionRule(SectionLabel.INTRODUCTION, ("introduction", "background")),
    SectionRule(
        SectionLabel.RELATED_WORK,
        ("related work", "literature review", "prior work", "previous work"),
    ),
    SectionRule(SectionLabel.METHODOLOGY, ("methodolog", "method", "approach", "framework")),
    SectionRule(SectionLabel.ARCHITECTURE, ("architecture", "model", "network", "design")),
    SectionRule(SectionLabel.EXPERIMENTS, ("experiment", "setup", "evaluation")),
    SectionRule(SectionLabel.RESULTS, ("result", "finding", "performance", "accuracy")),
    SectionRule(SectionLabel.DISCUSSION, ("discussion", "analysis", "interpretation")),
    SectionRule(SectionLabel.CONCLUSION, ("conclusion", "summary")),
    SectionRule(SectionLabel.REFERENCES, ("reference", "citation", "bibliograph")),
    SectionRule(
        SectionLabel.FUTURE_WORK,
        ("future work", "future direction", "future research"),
    ),
    SectionRule(SectionLabel.LIMITATIONS, ("limitation", "constraint", "challenge")),
    SectionRule(SectionLabel.DATASETS, ("dataset", "data collection", "benchmark")),
    SectionRule(SectionLabel.IMPLEMENTATION, ("implementation", "code", "detail")),
    SectionRule(SectionLabel.CONTRIBUTIONS, ("contribution", "novel")),
    SectionRule(SectionLabel.ABLATION_STUDY, ("ablation", "component analysis")),
    SectionRule(SectionLabel.BASELINES, ("baseline", "comparison", "state-of-the-art")),
    SectionRule(
        SectionLabel.TRAINING_DETAILS,
        ("hyperparameter", "tuning", "training detail"),
    ),
)


def classification_text(result: SearchResult) -> str:
    """Lower-cased title and snippet, the text every rule runs against."""
    return f"{result.title} {result.snippet}".lower()


def classify(
    result: SearchResult,
    rules: tuple[SectionRule, ...] = SECTION_RULES,
) -> frozenset[SectionLabel]:
    """
    Detect the academic sections a search result implies.

    Pure and deterministic: no shared state, no I/O. A blank result
    classifies to the empty set.

    Args:
        result: Search result to classify
        rules: Rule table (defaults to the built-in taxonomy rules)

    Returns:
        Frozen set of matched section labels

    Examples:
        >>> classify(SearchResult(title="Our methodology", position=1))
        frozenset({<SectionLabel.METHODOLOGY: 'Methodology'>})
    """
    text = classification_text(result)
    if not text.strip():
        return frozenset()
    return frozenset(rule.label for rule in rules if rule.matches(text))
