"""
Continuity Metrics
==================

Pairwise and aggregate metrics computed from frame embeddings.

Key Metrics:
    - Cosine Similarity: Directional agreement of two embeddings
    - Average Similarity: Mean over all adjacent pairs
    - Continuity Score: Average similarity mapped to an integer in [0, 100]
    - Drop: How far one pair falls below the average

Formulas:
    similarity = (a . b) / (|a| * |b|),  0 if either magnitude is 0
    score      = round_half_up(clamp(avg, 0, 1) * 100)
    drop       = avg - similarity

Design Note:
    A zero-magnitude embedding yields similarity 0, never NaN, so the
    average stays well-defined for degenerate (empty) frames.
"""

import logging
import math
from typing import List, Sequence

import numpy as np


logger = logging.getLogger(__name__)


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """
    Compute cosine similarity of two vectors.

    Args:
        a: First embedding
        b: Second embedding (same length as `a`)

    Returns:
        Similarity in [-1, 1], or 0.0 if either vector has zero magnitude
    """
    mag_a = float(np.linalg.norm(a))
    mag_b = float(np.linalg.norm(b))

    if mag_a == 0.0 or mag_b == 0.0:
        return 0.0

    return float(np.dot(a, b)) / (mag_a * mag_b)


def compute_pairwise_similarities(embeddings: Sequence[np.ndarray]) -> List[float]:
    """
    Compute similarity of each adjacent embedding pair.

    Args:
        embeddings: Embeddings in frame order

    Returns:
        List of length len(embeddings) - 1 (empty for fewer than two);
        entry i compares embedding i and embedding i + 1
    """
    return [
        cosine_similarity(embeddings[i], embeddings[i + 1])
        for i in range(len(embeddings) - 1)
    ]


def compute_average_similarity(similarities: Sequence[float]) -> float:
    """
    Arithmetic mean of pairwise similarities.

    Raises:
        ValueError: If there are no similarities to average
    """
    if len(similarities) == 0:
        raise ValueError("Cannot average an empty similarity sequence")

    return float(np.mean(similarities))


def compute_continuity_score(avg_similarity: float) -> int:
    """
    Map average similarity to an integer score in [0, 100].

    Halves round up (0.865 -> 87), not to even.
    """
    clamped = max(0.0, min(1.0, avg_similarity))
    return int(math.floor(clamped * 100 + 0.5))


def compute_drop(avg_similarity: float, similarity: float) -> float:
    """Distance of one pair's similarity below the sequence average."""
    return avg_similarity - similarity
