"""
Test Configuration
==================

Pytest fixtures and test configuration for ContinuityQA.
"""

import pytest


@pytest.fixture
def steady_frame():
    """10 bytes, all value 5."""
    return bytes([5] * 10)


@pytest.fixture
def cut_frame():
    """Short bright buffer, far from steady_frame in embedding space."""
    return bytes([200] * 2)


@pytest.fixture
def scorer():
    """Scorer with default extractor and thresholds."""
    from continuity_qa.scoring import ContinuityScorer

    return ContinuityScorer()


@pytest.fixture
def client():
    """Test client with application lifespan running."""
    from fastapi.testclient import TestClient
    from continuity_qa.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_uploads():
    """Build multipart `files` entries under the "frames" field."""
    def _make(*buffers):
        return [
            ("frames", (f"frame_{i:03d}.png", data, "image/png"))
            for i, data in enumerate(buffers)
        ]
    return _make
