"""
Analysis Output Models
======================

This module defines the response contract of the continuity scorer.

Output Contract:
    {
        "continuityScore": 86,
        "similarities": [1.0, 1.0, 0.5831],
        "issues": [
            {
                "framePair": [3, 4],
                "type": "visual_jump",
                "description": "Abrupt visual change detected between frames.",
                "similarity": 0.5831
            }
        ]
    }

Design Rules:
    - Field names on the wire are camelCase (aliases); Python attributes are snake_case
    - `similarities[i]` compares frame i and frame i+1 (0-based)
    - `framePair` uses 1-based frame numbers for display
    - Results are deterministic for a given input sequence
"""

from enum import Enum
from typing import List, Tuple

from pydantic import BaseModel, Field


class IssueType(str, Enum):
    """
    Kinds of discontinuity the scorer can report.

    Attributes:
        VISUAL_JUMP: Similarity between adjacent frames dropped below the average
    """

    VISUAL_JUMP = "visual_jump"


class Issue(BaseModel):
    """
    A discontinuity between two adjacent frames.

    Attributes:
        frame_pair: 1-based numbers of the two adjacent frames
        type: Issue type tag
        description: Human-readable description
        similarity: Pairwise similarity that triggered the issue
    """

    frame_pair: Tuple[int, int] = Field(
        ...,
        alias="framePair",
        description="1-based adjacent frame numbers",
    )

    type: IssueType = Field(
        default=IssueType.VISUAL_JUMP,
        description="Issue type tag",
    )

    description: str = Field(
        ...,
        description="Human-readable description of the discontinuity",
    )

    similarity: float = Field(
        ...,
        description="Cosine similarity of the frame pair",
    )

    class Config:
        """Pydantic model configuration."""

        populate_by_name = True


class AnalysisResult(BaseModel):
    """
    Complete output of one continuity analysis.

    Attributes:
        continuity_score: Aggregate consistency, 100 = maximal
        similarities: Pairwise similarities, one per adjacent frame pair
        issues: Detected discontinuities in frame order
    """

    continuity_score: int = Field(
        ...,
        alias="continuityScore",
        ge=0,
        le=100,
        description="Continuity score (0 to 100)",
    )

    similarities: List[float] = Field(
        default_factory=list,
        description="Similarity of each adjacent frame pair",
    )

    issues: List[Issue] = Field(
        default_factory=list,
        description="Detected discontinuities, ascending by frame pair",
    )

    class Config:
        """Pydantic model configuration."""

        populate_by_name = True
        json_schema_extra = {
            "example": {
                "continuityScore": 100,
                "similarities": [],
                "issues": [],
            }
        }

    @classmethod
    def default(cls) -> "AnalysisResult":
        """Result for sequences too short to compare (fewer than two frames)."""
        return cls(continuity_score=100, similarities=[], issues=[])

    def to_response(self) -> dict:
        """Export as the camelCase JSON payload."""
        return self.model_dump(mode="json", by_alias=True)
