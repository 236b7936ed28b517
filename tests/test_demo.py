"""
Demo Mock Tests
===============

Tests for the randomized dashboard report generator.
"""

import pytest

from continuity_qa.demo import MockIssueGenerator
from continuity_qa.models.demo import DEMO_SOURCE, DemoIssueType, Severity


class TestMockIssueGenerator:
    """Tests for MockIssueGenerator."""

    @pytest.mark.parametrize(
        "frame_count, expected_types",
        [
            (0, []),
            (2, []),
            (3, [DemoIssueType.PROP_DISCONTINUITY]),
            (5, [
                DemoIssueType.PROP_DISCONTINUITY,
                DemoIssueType.COLOR_SHIFT,
                DemoIssueType.WARDROBE_CHANGE,
            ]),
            (12, list(DemoIssueType)),
        ],
    )
    def test_issue_schedule(self, frame_count, expected_types):
        issues = MockIssueGenerator(seed=7).generate_issues(frame_count)
        assert [issue.type for issue in issues] == expected_types
        assert [issue.id for issue in issues] == list(range(1, len(issues) + 1))

    @pytest.mark.parametrize("frame_count, expected_score", [(2, 95), (3, 87), (4, 83), (7, 71)])
    def test_score_formula(self, frame_count, expected_score):
        report = MockIssueGenerator(seed=1).generate(frame_count)
        assert report.continuity_score == expected_score

    def test_frames_stay_in_range(self):
        for seed in range(50):
            for frame_count in range(3, 10):
                for issue in MockIssueGenerator(seed=seed).generate_issues(frame_count):
                    first, second = issue.frames
                    assert 0 <= first < second < frame_count
                    assert second == first + 1

    def test_seeded_generator_is_reproducible(self):
        first = MockIssueGenerator(seed=42).generate(9)
        second = MockIssueGenerator(seed=42).generate(9)
        assert first.issues == second.issues
        assert first.scene_name == second.scene_name
        assert first.metrics == second.metrics

    def test_report_fields(self):
        report = MockIssueGenerator(seed=3).generate(7)
        payload = report.to_response()

        assert payload["source"] == DEMO_SOURCE
        assert payload["sceneName"].startswith("Scene_")
        assert "_Shot_" in payload["sceneName"]
        assert set(payload["metrics"]) == {
            "colorConsistency",
            "objectTracking",
            "lightingConsistency",
            "spatialContinuity",
        }

        by_type = {issue.type: issue for issue in report.issues}
        color = by_type[DemoIssueType.COLOR_SHIFT]
        assert color.severity == Severity.MEDIUM
        assert 10 <= color.color_delta.delta_e <= 15
        assert color.description.endswith(f"({color.color_delta.temp})")
        assert by_type[DemoIssueType.LIGHTING_INCONSISTENCY].exposure.endswith(" EV")
        assert by_type[DemoIssueType.POSITION_JUMP].displacement.endswith("px")
        assert by_type[DemoIssueType.PROP_DISCONTINUITY].location is not None
