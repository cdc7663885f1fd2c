"""Runtime defaults.

Values come from `LOOKTHROUGH_*` environment variables or a `.env` file in the
working directory; command-line flags override them.
"""
from __future__ import annotations

import logging
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LOOKTHROUGH_", env_file=".env", extra="ignore")

    log_level: str = "INFO"
    # Max bars per chart
    limit: int = Field(default=25, ge=1)
    currency: str = "€"
    # Percentage points allowed above/below 100% before a breakdown is rejected or padded
    tolerance: float = Field(default=1e-3, ge=0.0)
    image_width: int = 1920
    image_height: int = 1080
    reference_tables: Optional[str] = None


def get_settings() -> Settings:
    return Settings()


def setup_logging(level_name: str) -> None:
    """Configure the root logger once for command-line runs."""
    level = getattr(logging, str(level_name).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
