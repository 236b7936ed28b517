"""
Continuity Scorer
=================

Scores a frame sequence for visual continuity.

Pipeline:
    1. Short-circuit: fewer than two frames -> default result
    2. Embed each frame independently (EmbeddingExtractor)
    3. Cosine similarity of each adjacent pair
    4. Average similarity -> continuity score
    5. Flag pairs whose similarity drops below the average

Issue Rules:
    drop = avg_similarity - similarity
    drop <  drop_threshold          -> no issue
    drop >  severe_drop_threshold   -> "Severe visual discontinuity ..."
    otherwise                       -> "Abrupt visual change ..."

Note:
    A sequence of identical degenerate frames scores 0 with no issues:
    every pair sits exactly at the average, so nothing drops below it.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from continuity_qa.embedding import ByteStatsExtractor, EmbeddingExtractor
from continuity_qa.models.analysis import AnalysisResult, Issue, IssueType
from continuity_qa.scoring.metrics import (
    compute_average_similarity,
    compute_continuity_score,
    compute_drop,
    compute_pairwise_similarities,
)


logger = logging.getLogger(__name__)


ABRUPT_CHANGE_DESCRIPTION = "Abrupt visual change detected between frames."
SEVERE_DISCONTINUITY_DESCRIPTION = "Severe visual discontinuity between frames."


@dataclass(frozen=True)
class ScoringThresholds:
    """
    Drop thresholds for issue detection.

    Loaded from configuration file.
    """

    drop_threshold: float = 0.1
    severe_drop_threshold: float = 0.3

    def __post_init__(self) -> None:
        if self.drop_threshold < 0:
            raise ValueError("drop_threshold must be non-negative")
        if self.severe_drop_threshold < self.drop_threshold:
            raise ValueError("severe_drop_threshold must be >= drop_threshold")


def detect_issues(
    similarities: Sequence[float],
    avg_similarity: float,
    thresholds: ScoringThresholds,
) -> List[Issue]:
    """
    Flag adjacent pairs whose similarity drops below the average.

    Args:
        similarities: Pairwise similarities in frame order
        avg_similarity: Mean of `similarities`
        thresholds: Drop thresholds

    Returns:
        Issues in ascending frame-pair order
    """
    issues: List[Issue] = []

    for idx, similarity in enumerate(similarities):
        drop = compute_drop(avg_similarity, similarity)
        if drop < thresholds.drop_threshold:
            continue

        if drop > thresholds.severe_drop_threshold:
            description = SEVERE_DISCONTINUITY_DESCRIPTION
        else:
            description = ABRUPT_CHANGE_DESCRIPTION

        issues.append(
            Issue(
                frame_pair=(idx + 1, idx + 2),
                type=IssueType.VISUAL_JUMP,
                description=description,
                similarity=similarity,
            )
        )

    return issues


class ContinuityScorer:
    """
    Stateless continuity scorer.

    Safe to share between concurrent requests: `analyze` keeps no state
    between calls and has no side effects.

    Attributes:
        extractor: Embedding backend
        thresholds: Issue detection thresholds

    Example:
        scorer = ContinuityScorer()
        result = scorer.analyze([frame_a_bytes, frame_b_bytes])
        print(result.continuity_score, result.issues)
    """

    def __init__(
        self,
        extractor: Optional[EmbeddingExtractor] = None,
        thresholds: Optional[ScoringThresholds] = None,
    ) -> None:
        self.extractor = extractor if extractor is not None else ByteStatsExtractor()
        self.thresholds = thresholds if thresholds is not None else ScoringThresholds()

        logger.info(
            f"ContinuityScorer initialized: extractor={type(self.extractor).__name__}, "
            f"drop_threshold={self.thresholds.drop_threshold}, "
            f"severe_drop_threshold={self.thresholds.severe_drop_threshold}"
        )

    def analyze(self, buffers: Sequence[bytes]) -> AnalysisResult:
        """
        Score an ordered sequence of frame buffers.

        Args:
            buffers: Raw frame contents in upload order

        Returns:
            AnalysisResult; the fixed default for fewer than two frames
        """
        if len(buffers) < 2:
            return AnalysisResult.default()

        embeddings = [self.extractor.extract(data) for data in buffers]
        similarities = compute_pairwise_similarities(embeddings)

        avg_similarity = compute_average_similarity(similarities)
        score = compute_continuity_score(avg_similarity)
        issues = detect_issues(similarities, avg_similarity, self.thresholds)

        logger.debug(
            f"Scored {len(buffers)} frames: avg_similarity={avg_similarity:.4f}, "
            f"score={score}, issues={len(issues)}"
        )

        return AnalysisResult(
            continuity_score=score,
            similarities=similarities,
            issues=issues,
        )
