"""
Section taxonomy registry.

Maps every section label to a human-readable description and a category.
The registry is built once at startup and is read-only afterwards, so it can
be shared by concurrent analyses without locking.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping

from serp_analyzer.models.enums import SectionCategory, SectionLabel

DEFAULT_DESCRIPTION = "Common section in academic papers"
DEFAULT_CATEGORY = SectionCategory.GENERAL


@dataclass(frozen=True)
class LabelInfo:
    """Description and category of one section label."""

    description: str
    category: SectionCategory


_DEFAULT_TABLE: dict[SectionLabel, LabelInfo] = {
    SectionLabel.ABSTRACT: LabelInfo(
        "Brief summary of the entire paper", SectionCategory.PAPER_STRUCTURE
    ),
    SectionLabel.INTRODUCTION: LabelInfo(
        "Background and motivation for the research", SectionCategory.PAPER_STRUCTURE
    ),
    SectionLabel.CONCLUSION: LabelInfo(
        "Summary of findings and final remarks", SectionCategory.PAPER_STRUCTURE
    ),
    SectionLabel.RELATED_WORK: LabelInfo(
        "Review of existing literature and prior research", SectionCategory.RESEARCH_CONTENT
    ),
    SectionLabel.METHODOLOGY: LabelInfo(
        "Detailed description of research methods", SectionCategory.RESEARCH_CONTENT
    ),
    SectionLabel.RESULTS: LabelInfo(
        "Findings and performance metrics", SectionCategory.RESEARCH_CONTENT
    ),
    SectionLabel.EXPERIMENTS: LabelInfo(
        "Experimental setup and evaluation procedures", SectionCategory.RESEARCH_CONTENT
    ),
    SectionLabel.CONTRIBUTIONS: LabelInfo(
        "Key contributions of the research", SectionCategory.RESEARCH_CONTENT
    ),
    SectionLabel.BASELINES: LabelInfo(
        "Comparison with existing methods", SectionCategory.RESEARCH_CONTENT
    ),
    SectionLabel.ARCHITECTURE: LabelInfo(
        "Model structure and technical design", SectionCategory.TECHNICAL_DETAILS
    ),
    SectionLabel.IMPLEMENTATION: LabelInfo(
        "Technical implementation details", SectionCategory.TECHNICAL_DETAILS
    ),
    SectionLabel.DATASETS: LabelInfo(
        "Data sources and benchmark information", SectionCategory.TECHNICAL_DETAILS
    ),
    SectionLabel.TRAINING_DETAILS: LabelInfo(
        "Hyperparameters and training configuration", SectionCategory.TECHNICAL_DETAILS
    ),
    SectionLabel.DISCUSSION: LabelInfo(
        "Interpretation and analysis of results", SectionCategory.ANALYSIS
    ),
    SectionLabel.LIMITATIONS: LabelInfo(
        "Acknowledged constraints and limitations", SectionCategory.ANALYSIS
    ),
    SectionLabel.FUTURE_WORK: LabelInfo(
        "Proposed directions for future research", SectionCategory.ANALYSIS
    ),
    SectionLabel.ABLATION_STUDY: LabelInfo(
        "Component-wise performance analysis", SectionCategory.ANALYSIS
    ),
    SectionLabel.REFERENCES: LabelInfo(
        "Citations and bibliography", SectionCategory.SUPPORTING
    ),
}


class TaxonomyRegistry:
    """
    Immutable lookup of section metadata.

    describe() is total: labels missing from the table get the default
    description and the GENERAL category, so a classifier rule added without
    a registry entry still aggregates cleanly.

    Attributes:
        entries: Read-only mapping of label name to LabelInfo
    """

    def __init__(self, entries: Mapping[SectionLabel | str, LabelInfo]):
        """
        Build a registry from a label table.

        Args:
            entries: Mapping of label (enum member or plain name) to LabelInfo.
                The mapping is copied; later changes to it are not seen.
        """
        self.entries: Mapping[str, LabelInfo] = MappingProxyType(
            {label_name(label): info for label, info in entries.items()}
        )

    def describe(self, label: SectionLabel | str) -> tuple[str, SectionCategory]:
        """Return (description, category) for a label, or the defaults."""
        info = self.entries.get(label_name(label))
        if info is None:
            return DEFAULT_DESCRIPTION, DEFAULT_CATEGORY
        return info.description, info.category

    def labels(self) -> list[str]:
        """Label names known to the registry, in table order."""
        return list(self.entries)

    def __contains__(self, label: object) -> bool:
        if not isinstance(label, str):
            return False
        return label_name(label) in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(labels={len(self.entries)})"


def label_name(label: SectionLabel | str) -> str:
    """Plain string name of a label (enum member or string)."""
    return label.value if isinstance(label, SectionLabel) else str(label)


def build_default_registry() -> TaxonomyRegistry:
    """Registry for the 18 built-in section labels."""
    return TaxonomyRegistry(_DEFAULT_TABLE)
