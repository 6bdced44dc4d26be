from pathlib import Path
from typing import Literal

import yaml
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Conversion settings, overridable through DEXA_* environment variables."""

    output_format: Literal["json", "csv"] = "json"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # printf-style format for numeric CSV cells
    float_format: str = "%f"
    json_indent: int = 2

    model_config = SettingsConfigDict(env_prefix="DEXA_")

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        return value.upper() if isinstance(value, str) else value


def load_config(config_path: str | Path) -> dict:
    with open(config_path) as f:
        return yaml.safe_load(f) or {}


def load_settings(config_path: str | Path | None = None) -> Settings:
    if config_path is None:
        return Settings()
    return Settings(**load_config(config_path))
