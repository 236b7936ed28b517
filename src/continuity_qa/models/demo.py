"""
Demo Report Models
==================

Schema of the randomized mock report shown by the interactive dashboard.

IMPORTANT: These models describe MOCK data. Nothing here is produced by the
continuity scorer, and no field is derived from frame content. Every report
carries `source = "demo_mock"` so consumers can tell the two paths apart.
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


DEMO_SOURCE = "demo_mock"


class Severity(str, Enum):
    """Display severity of a mock issue."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DemoIssueType(str, Enum):
    """Mock discontinuity categories shown on the dashboard."""

    PROP_DISCONTINUITY = "prop_discontinuity"
    COLOR_SHIFT = "color_shift"
    WARDROBE_CHANGE = "wardrobe_change"
    LIGHTING_INCONSISTENCY = "lighting_inconsistency"
    POSITION_JUMP = "position_jump"


class Location(BaseModel):
    """Pixel position of a mock issue marker."""

    x: int
    y: int


class ColorDelta(BaseModel):
    """Mock colour shift measurement."""

    delta_e: float = Field(..., alias="deltaE", ge=0.0)
    temp: str

    class Config:
        """Pydantic model configuration."""

        populate_by_name = True


class DemoIssue(BaseModel):
    """
    A mock issue as rendered by the dashboard.

    Attributes:
        id: 1-based issue number within the report
        type: Mock discontinuity category
        severity: Display severity
        frames: 0-based indices of the two adjacent frames
        description: Human-readable description
        confidence: Mock confidence in [0, 1]
        location: Marker position (prop and wardrobe issues)
        color_delta: Colour measurement (colour shift issues)
        exposure: Exposure delta, e.g. "-0.2 EV" (lighting issues)
        displacement: Position jump, e.g. "17px" (position issues)
    """

    id: int = Field(..., ge=1)
    type: DemoIssueType
    severity: Severity
    frames: Tuple[int, int]
    description: str
    confidence: float = Field(..., ge=0.0, le=1.0)
    location: Optional[Location] = None
    color_delta: Optional[ColorDelta] = Field(default=None, alias="colorDelta")
    exposure: Optional[str] = None
    displacement: Optional[str] = None

    class Config:
        """Pydantic model configuration."""

        populate_by_name = True


class DemoMetrics(BaseModel):
    """Mock per-category consistency percentages."""

    color_consistency: int = Field(..., alias="colorConsistency", ge=0, le=100)
    object_tracking: int = Field(..., alias="objectTracking", ge=0, le=100)
    lighting_consistency: int = Field(..., alias="lightingConsistency", ge=0, le=100)
    spatial_continuity: int = Field(..., alias="spatialContinuity", ge=0, le=100)

    class Config:
        """Pydantic model configuration."""

        populate_by_name = True


class DemoReport(BaseModel):
    """
    Complete mock QA report.

    Attributes:
        source: Always "demo_mock"
        total_frames: Number of uploaded frames
        scene_name: Generated scene label, e.g. "Scene_042_Shot_7"
        analysis_date: Generation time, ISO 8601
        continuity_score: Mock score in [60, 95]
        issues: Mock issues
        metrics: Mock category percentages
    """

    source: str = Field(default=DEMO_SOURCE)
    total_frames: int = Field(..., alias="totalFrames", ge=0)
    scene_name: str = Field(..., alias="sceneName")
    analysis_date: str = Field(..., alias="analysisDate")
    continuity_score: int = Field(..., alias="continuityScore", ge=0, le=100)
    issues: List[DemoIssue] = Field(default_factory=list)
    metrics: DemoMetrics

    class Config:
        """Pydantic model configuration."""

        populate_by_name = True

    def to_response(self) -> dict:
        """Export as the camelCase JSON payload."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
