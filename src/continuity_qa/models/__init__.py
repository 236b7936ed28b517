"""
Data Models
===========

Typed data passed through the continuity QA service.

Models:
    Input:
        - Frame: One uploaded frame (opaque bytes)

    Analysis:
        - IssueType: Issue type tags
        - Issue: Discontinuity between adjacent frames
        - AnalysisResult: Scorer output contract

    Demo (mock data, unrelated to the scorer):
        - DemoIssue, DemoMetrics, DemoReport
"""

from continuity_qa.models.frame import Frame
from continuity_qa.models.analysis import AnalysisResult, Issue, IssueType
from continuity_qa.models.demo import (
    DEMO_SOURCE,
    DemoIssue,
    DemoIssueType,
    DemoMetrics,
    DemoReport,
    Severity,
)

__all__ = [
    # Input
    "Frame",
    # Analysis
    "IssueType",
    "Issue",
    "AnalysisResult",
    # Demo
    "DEMO_SOURCE",
    "Severity",
    "DemoIssueType",
    "DemoIssue",
    "DemoMetrics",
    "DemoReport",
]
