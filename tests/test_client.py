"""
Client Tests
============

Tests for the upload client, with the HTTP call stubbed out.
"""

import pytest

from continuity_qa import client


class FakeResponse:
    def __init__(self, payload):
        self.payload = payload

    def raise_for_status(self):
        pass

    def json(self):
        return self.payload


class TestCollectFrames:
    """Tests for collect_frames."""

    def test_sorted_images_only(self, tmp_path):
        for name in ("shot_002.png", "shot_001.PNG", "notes.txt", "shot_003.jpg"):
            (tmp_path / name).write_bytes(b"data")
        (tmp_path / "nested.png").mkdir()

        paths = client.collect_frames(tmp_path)
        assert [path.name for path in paths] == ["shot_001.PNG", "shot_002.png", "shot_003.jpg"]


class TestAnalyze:
    """Tests for analyze."""

    def test_posts_frames_in_order(self, tmp_path, monkeypatch):
        paths = []
        for i in range(3):
            path = tmp_path / f"f{i}.png"
            path.write_bytes(bytes([i]) * 4)
            paths.append(path)

        calls = {}

        def fake_post(url, files, timeout):
            calls["url"] = url
            calls["fields"] = [field for field, _ in files]
            calls["names"] = [entry[0] for _, entry in files]
            return FakeResponse({"continuityScore": 100, "similarities": [1.0, 1.0], "issues": []})

        monkeypatch.setattr(client.requests, "post", fake_post)

        report = client.analyze("http://qa.local:8002/", paths, demo=False, timeout=5.0)

        assert report["continuityScore"] == 100
        assert calls["url"] == "http://qa.local:8002/api/analyze"
        assert calls["fields"] == ["frames", "frames", "frames"]
        assert calls["names"] == ["f0.png", "f1.png", "f2.png"]

    def test_demo_endpoint(self, monkeypatch):
        seen = []

        def fake_post(url, files, timeout):
            seen.append(url)
            return FakeResponse({})

        monkeypatch.setattr(client.requests, "post", fake_post)
        client.analyze("http://qa.local", [], demo=True, timeout=5.0)
        assert seen == ["http://qa.local/api/demo/analyze"]


class TestLogReport:
    """Tests for log_report."""

    def test_logs_issues(self, caplog):
        report = {
            "continuityScore": 86,
            "similarities": [1.0, 1.0, 0.58],
            "issues": [{
                "framePair": [3, 4],
                "type": "visual_jump",
                "description": "Abrupt visual change detected between frames.",
                "similarity": 0.58,
            }],
        }
        with caplog.at_level("INFO", logger="continuity_qa.client"):
            client.log_report(report)

        assert "Continuity score: 86" in caplog.text
        assert "frames 3-4" in caplog.text

    def test_demo_report_labelled(self, caplog):
        report = {
            "source": "demo_mock",
            "sceneName": "Scene_007_Shot_3",
            "continuityScore": 87,
            "issues": [{"type": "prop_discontinuity", "frames": [0, 1], "description": "Object disappears"}],
        }
        with caplog.at_level("INFO", logger="continuity_qa.client"):
            client.log_report(report)

        assert "DEMO MOCK REPORT" in caplog.text
        assert "frames 1-2" in caplog.text
