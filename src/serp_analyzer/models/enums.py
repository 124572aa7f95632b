"""
Enumerations for the Academic SERP Analyzer data models.

Section labels form a closed taxonomy - the classifier never emits a value
outside this set.
"""

from enum import Enum


class SectionLabel(str, Enum):
    """
    Closed taxonomy of academic-paper sections.
    
    Multi-label classification: each search result can match zero, one or
    many sections.
    """
    
    ABSTRACT = "Abstract"
    INTRODUCTION = "Introduction"
    RELATED_WORK = "Related Work"
    METHODOLOGY = "Methodology"
    ARCHITECTURE = "Architecture"
    EXPERIMENTS = "Experiments"
    RESULTS = "Results"
    DISCUSSION = "Discussion"
    CONCLUSION = "Conclusion"
    REFERENCES = "References"
    FUTURE_WORK = "Future Work"
    LIMITATIONS = "Limitations"
    DATASETS = "Datasets"
    IMPLEMENTATION = "Implementation"
    CONTRIBUTIONS = "Contributions"
    ABLATION_STUDY = "Ablation Study"
    BASELINES = "Baselines"
    TRAINING_DETAILS = "Training Details"


class SectionCategory(str, Enum):
    """
    Grouping of section labels.
    
    GENERAL is reserved for labels the taxonomy registry does not know.
    """
    
    PAPER_STRUCTURE = "Paper Structure"
    RESEARCH_CONTENT = "Research Content"
    TECHNICAL_DETAILS = "Technical Details"
    ANALYSIS = "Analysis"
    SUPPORTING = "Supporting"
    GENERAL = "General"
