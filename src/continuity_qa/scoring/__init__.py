"""
Scoring Module
==============

Frame-similarity scoring for continuity QA.

Components:
    - metrics: Cosine similarity, averaging and score mapping
    - ContinuityScorer: Full pipeline (embeddings -> score + issues)
"""

from continuity_qa.scoring.metrics import (
    cosine_similarity,
    compute_pairwise_similarities,
    compute_average_similarity,
    compute_continuity_score,
)
from continuity_qa.scoring.scorer import (
    ContinuityScorer,
    ScoringThresholds,
    detect_issues,
)

__all__ = [
    "cosine_similarity",
    "compute_pairwise_similarities",
    "compute_average_similarity",
    "compute_continuity_score",
    "ContinuityScorer",
    "ScoringThresholds",
    "detect_issues",
]
