"""
Mock Issue Generator
====================

Randomized QA report for the interactive dashboard demo.

THIS IS NOT THE CONTINUITY SCORER. Issues, metrics and score are random
and depend only on the number of frames, never on their content. The
real analysis lives in continuity_qa.scoring; the two paths are kept
separate and every report is labelled "demo_mock".

Issue schedule (by frame count):
    >= 3 frames: prop_discontinuity     (high)
    >= 4 frames: color_shift            (medium)
    >= 5 frames: wardrobe_change        (high)
    >= 6 frames: lighting_inconsistency (low)
    >= 7 frames: position_jump          (medium)

Score:
    95 - 8 * high - 4 * medium, clamped to [60, 95]
"""

import logging
import random
from datetime import datetime
from typing import List, Optional, Tuple

from continuity_qa.models.demo import (
    ColorDelta,
    DemoIssue,
    DemoIssueType,
    DemoMetrics,
    DemoReport,
    Location,
    Severity,
)


logger = logging.getLogger(__name__)


BASE_SCORE = 95
MIN_SCORE = 60
HIGH_PENALTY = 8
MEDIUM_PENALTY = 4


class MockIssueGenerator:
    """
    Generates randomized demo reports.

    Attributes:
        seed: Optional RNG seed; a seeded generator is reproducible
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = random.Random(seed)

    def _pair(self, frame_count: int, offset: int) -> Tuple[int, int]:
        """Random adjacent 0-based pair starting at or after `offset`."""
        start = offset + int(self._rng.random() * (frame_count - 1 - offset))
        return start, start + 1

    def _confidence(self, base: float, spread: float) -> float:
        return base + self._rng.random() * spread

    def generate_issues(self, frame_count: int) -> List[DemoIssue]:
        """Generate the mock issue list for a frame count."""
        rng = self._rng
        issues: List[DemoIssue] = []

        if frame_count >= 3:
            first, second = self._pair(frame_count, 0)
            issues.append(DemoIssue(
                id=len(issues) + 1,
                type=DemoIssueType.PROP_DISCONTINUITY,
                severity=Severity.HIGH,
                frames=(first, second),
                description=f"Object disappears between frame {first + 1} and {second + 1}",
                confidence=self._confidence(0.92, 0.06),
                location=Location(x=300 + rng.randrange(200), y=400 + rng.randrange(200)),
            ))

        if frame_count >= 4:
            first, second = self._pair(frame_count, 1)
            kelvin = 300 + rng.randrange(300)
            issues.append(DemoIssue(
                id=len(issues) + 1,
                type=DemoIssueType.COLOR_SHIFT,
                severity=Severity.MEDIUM,
                frames=(first, second),
                description=f"Color temperature shift detected (+{kelvin}K)",
                confidence=self._confidence(0.85, 0.08),
                color_delta=ColorDelta(delta_e=10 + rng.random() * 5, temp=f"+{kelvin}K"),
            ))

        if frame_count >= 5:
            first, second = self._pair(frame_count, 2)
            issues.append(DemoIssue(
                id=len(issues) + 1,
                type=DemoIssueType.WARDROBE_CHANGE,
                severity=Severity.HIGH,
                frames=(first, second),
                description=f"Wardrobe inconsistency detected in frame {first + 1}",
                confidence=self._confidence(0.88, 0.08),
                location=Location(x=450 + rng.randrange(150), y=150 + rng.randrange(100)),
            ))

        if frame_count >= 6:
            first, second = self._pair(frame_count, 1)
            stops = f"{rng.random() * 0.5 - 0.3:.1f}"
            issues.append(DemoIssue(
                id=len(issues) + 1,
                type=DemoIssueType.LIGHTING_INCONSISTENCY,
                severity=Severity.LOW,
                frames=(first, second),
                description=f"Minor exposure variation ({stops} stops)",
                confidence=self._confidence(0.72, 0.08),
                exposure=f"{stops} EV",
            ))

        if frame_count >= 7:
            first, second = self._pair(frame_count, 2)
            pixels = 10 + rng.randrange(20)
            issues.append(DemoIssue(
                id=len(issues) + 1,
                type=DemoIssueType.POSITION_JUMP,
                severity=Severity.MEDIUM,
                frames=(first, second),
                description=f"Background element position jump ({pixels}px)",
                confidence=self._confidence(0.78, 0.08),
                displacement=f"{pixels}px",
            ))

        return issues

    def generate(self, frame_count: int) -> DemoReport:
        """
        Generate a complete mock report.

        Args:
            frame_count: Number of uploaded frames

        Returns:
            DemoReport labelled "demo_mock"
        """
        rng = self._rng
        issues = self.generate_issues(frame_count)

        high = sum(1 for issue in issues if issue.severity == Severity.HIGH)
        medium = sum(1 for issue in issues if issue.severity == Severity.MEDIUM)
        score = BASE_SCORE - high * HIGH_PENALTY - medium * MEDIUM_PENALTY

        report = DemoReport(
            total_frames=frame_count,
            scene_name=f"Scene_{rng.randint(1, 100):03d}_Shot_{rng.randint(1, 20)}",
            analysis_date=datetime.now().isoformat(timespec="seconds"),
            continuity_score=max(MIN_SCORE, min(BASE_SCORE, score)),
            issues=issues,
            metrics=DemoMetrics(
                color_consistency=75 + rng.randrange(15),
                object_tracking=70 + rng.randrange(20),
                lighting_consistency=80 + rng.randrange(15),
                spatial_continuity=72 + rng.randrange(18),
            ),
        )

        logger.debug(f"Generated demo report: frames={frame_count}, issues={len(issues)}")
        return report
