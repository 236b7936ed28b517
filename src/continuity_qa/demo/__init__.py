"""
Demo Module
===========

Mock report generation for the interactive dashboard.

Reports produced here are random and unrelated to frame content. They are
served only from the demo endpoint and labelled "demo_mock".
"""

from continuity_qa.demo.mock_issues import MockIssueGenerator

__all__ = ["MockIssueGenerator"]
