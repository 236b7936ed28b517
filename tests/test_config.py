"""
Configuration Tests
===================

Tests for YAML loading and environment overrides.
"""

import pytest
from pydantic import ValidationError

from continuity_qa.config import Settings, load_config


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "PORT",
        "CONTINUITY_QA_PORT",
        "CONTINUITY_QA_EMBEDDING_BACKEND",
        "CONTINUITY_QA_DROP_THRESHOLD",
        "CONTINUITY_QA_SEVERE_DROP_THRESHOLD",
        "CONTINUITY_QA_DEMO_ENABLED",
        "CONTINUITY_QA_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:
    """Tests for configuration loading."""

    def test_defaults(self):
        settings = Settings()
        assert settings.embedding.backend == "byte_stats"
        assert settings.scoring.drop_threshold == 0.1
        assert settings.scoring.severe_drop_threshold == 0.3
        assert settings.demo.enabled is True

    def test_yaml_values(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text(
            "scoring:\n"
            "  drop_threshold: 0.2\n"
            "  severe_drop_threshold: 0.4\n"
            "server:\n"
            "  port: 9100\n"
        )
        settings = load_config(str(path))
        assert settings.scoring.drop_threshold == 0.2
        assert settings.scoring.severe_drop_threshold == 0.4
        assert settings.server.port == 9100

    def test_env_overrides_yaml(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text("server:\n  port: 9100\ndemo:\n  enabled: true\n")

        clean_env.setenv("PORT", "8080")
        clean_env.setenv("CONTINUITY_QA_DEMO_ENABLED", "false")
        clean_env.setenv("CONTINUITY_QA_DROP_THRESHOLD", "0.05")

        settings = load_config(str(path))
        assert settings.server.port == 8080
        assert settings.demo.enabled is False
        assert settings.scoring.drop_threshold == 0.05

    def test_threshold_ordering_validated(self, tmp_path, clean_env):
        path = tmp_path / "config.yaml"
        path.write_text("scoring:\n  drop_threshold: 0.5\n  severe_drop_threshold: 0.2\n")

        with pytest.raises(ValidationError):
            load_config(str(path))
