"""
Deterministic synthetic search results.

Served by the search client when the provider is unavailable or no API key
is configured, so the analysis endpoint keeps working in demos and tests.
"""

from serp_analyzer.models.search_models import SearchResult

MOCK_RESULT_LIMIT = 10

MOCK_SOURCES: tuple[str, ...] = (
    "arXiv",
    "IEEE Xplore",
    "ACM Digital Library",
    "Springer",
    "Nature",
    "Science Direct",
    "JMLR",
    "NeurIPS",
    "ICML",
    "CVPR",
)

MOCK_TOPICS: tuple[str, ...] = (
    "Transformer Models",
    "CNN Architectures",
    "RNN Applications",
    "GANs",
    "Reinforcement Learning",
    "Transfer Learning",
    "Neural Architecture Search",
    "Attention Mechanisms",
    "Meta-Learning",
    "Few-Shot Learning",
)


def generate_mock_results(query: str, count: int) -> list[SearchResult]:
    """
    Build up to ten synthetic academic results.
    
    The output depends only on count; the query is accepted for interface
    symmetry with live searches.
    """
    results = []
    for i in range(min(count, MOCK_RESULT_LIMIT)):
        topic = MOCK_TOPICS[i % len(MOCK_TOPICS)]
        source = MOCK_SOURCES[i % len(MOCK_SOURCES)]
        results.append(
            SearchResult(
                title=f"{topic} in Deep Learning: A Comprehensive Study",
                link=f"https://arxiv.org/abs/2024.{1000 + i}",
                snippet=(
                    f"This paper presents a novel approach to {topic.lower()}. "
                    "We introduce our methodology, describe the experimental setup, "
                    "present results on benchmark datasets, discuss the findings, "
                    "and outline future work. Our architecture demonstrates "
                    "state-of-the-art performance."
                ),
                display_link=source.lower().replace(" ", ""),
                position=i + 1,
            )
        )
    return results
