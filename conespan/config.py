"""Application configuration from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "warning"

    # Strategy used when the caller names none and supplies no kernel
    default_strategy: Literal["approximate", "exact"] = "approximate"

    # Significant digits when the CLI prints exact results as decimals
    evalf_digits: int = 15

    model_config = {
        "env_prefix": "CONESPAN_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
