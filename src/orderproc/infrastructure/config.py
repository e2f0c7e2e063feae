"""Application settings loaded from environment variables and .env files."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):

    model_config = SettingsConfigDict(
        env_prefix="ORDERPROC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Field(
        default=Path("data"), description="Directory holding the JSON data files"
    )
    log_level: str = Field(default="INFO", description="Root log level")
    log_json: bool = Field(default=False, description="Render logs as JSON lines")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @property
    def products_file(self) -> Path:
        return self.data_dir / "products.json"

    @property
    def orders_file(self) -> Path:
        return self.data_dir / "orders.json"


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
