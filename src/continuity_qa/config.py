"""
ContinuityQA Configuration
==========================

This module handles configuration loading for the continuity QA service.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    CONTINUITY_QA_EMBEDDING_BACKEND     -> embedding.backend
    CONTINUITY_QA_DROP_THRESHOLD        -> scoring.drop_threshold
    CONTINUITY_QA_SEVERE_DROP_THRESHOLD -> scoring.severe_drop_threshold
    CONTINUITY_QA_DEMO_ENABLED          -> demo.enabled
    CONTINUITY_QA_PORT                  -> server.port
    CONTINUITY_QA_LOG_LEVEL             -> logging.level
    PORT                                -> server.port (Cloud Run)

Example:
    from continuity_qa.config import settings

    print(settings.service.name)
    print(settings.scoring.drop_threshold)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, model_validator


logger = logging.getLogger(__name__)


# =============================================================================
# Configuration Models
# =============================================================================

class ServiceConfig(BaseModel):
    """Service identification configuration."""

    name: str = Field(default="continuity-qa", description="Service name")
    version: str = Field(default="v0.1.0", description="API version")


class EmbeddingConfig(BaseModel):
    """Frame embedding backend configuration."""

    backend: str = Field(
        default="byte_stats",
        description="Embedding backend: 'byte_stats'",
    )


class ScoringConfig(BaseModel):
    """Thresholds for flagging similarity drops as issues."""

    drop_threshold: float = Field(
        default=0.1,
        ge=0,
        description="Minimum drop below average similarity that is reported",
    )
    severe_drop_threshold: float = Field(
        default=0.3,
        ge=0,
        description="Drop above which an issue is described as severe",
    )

    @model_validator(mode="after")
    def _check_ordering(self) -> "ScoringConfig":
        if self.severe_drop_threshold < self.drop_threshold:
            raise ValueError(
                "severe_drop_threshold must be >= drop_threshold"
            )
        return self


class DemoConfig(BaseModel):
    """Mock dashboard report configuration."""

    enabled: bool = Field(
        default=True,
        description="Serve the randomized demo report at /api/demo/analyze",
    )


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8002, ge=1, le=65535, description="Bind port")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for ContinuityQA.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    embedding: EmbeddingConfig = Field(default_factory=EmbeddingConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.warning("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    if env_backend := os.environ.get("CONTINUITY_QA_EMBEDDING_BACKEND"):
        config_data.setdefault("embedding", {})["backend"] = env_backend

    # Scoring thresholds
    if env_drop := os.environ.get("CONTINUITY_QA_DROP_THRESHOLD"):
        config_data.setdefault("scoring", {})["drop_threshold"] = float(env_drop)
    if env_severe := os.environ.get("CONTINUITY_QA_SEVERE_DROP_THRESHOLD"):
        config_data.setdefault("scoring", {})["severe_drop_threshold"] = float(env_severe)

    if env_demo := os.environ.get("CONTINUITY_QA_DEMO_ENABLED"):
        config_data.setdefault("demo", {})["enabled"] = env_demo.lower() in ("1", "true", "yes")

    # Server settings (Cloud Run uses PORT env var)
    if env_port := os.environ.get("PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)
    elif env_port := os.environ.get("CONTINUITY_QA_PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)

    if env_log := os.environ.get("CONTINUITY_QA_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

# Loaded on import
settings = load_config()
setup_logging(settings)
