"""
Configuration for the Edge Function CDK application.

Values are read from ``config.json`` next to this file when it exists,
otherwise the defaults below are used. ``EDGE_LOG_LEVEL`` overrides the
configured log level.
"""

import json
import os
from pathlib import Path
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator

ROOT_PATH = Path(__file__).parent
CONFIG_FILE_PATH = ROOT_PATH / "config.json"

LAMBDA_BASE_PATH = str(ROOT_PATH / "lambdas")
READER_LAMBDA_PATH = str(
    ROOT_PATH / "lambdas" / "edge" / "cross_region_parameter_reader"
)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return level


class EdgeConfig(BaseModel):
    """Settings for the cross-region parameter reader provider."""

    reader_timeout_seconds: int = Field(default=60, ge=1, le=900)
    reader_memory_size: int = Field(default=128, ge=128, le=10240)
    powertools_layer_version: int = Field(default=7, ge=1)


class AppConfig(BaseModel):
    environment: str = "dev"
    resource_prefix: str = "edgefn"
    resource_application_tag: Optional[str] = None
    primary_region: str = "eu-west-1"
    account_id: Optional[str] = None
    tags: Dict[str, str] = Field(default_factory=dict)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    edge: EdgeConfig = Field(default_factory=EdgeConfig)


def load_config(path: Path = CONFIG_FILE_PATH) -> AppConfig:
    data = {}
    if path.exists():
        with open(path, "r") as f:
            data = json.load(f)

    app_config = AppConfig(**data)

    env_level = os.environ.get("EDGE_LOG_LEVEL")
    if env_level:
        app_config.logging = LoggingConfig(level=env_level)

    return app_config


config = load_config()
