"""Server settings, read from the environment."""

from __future__ import annotations

import logging
import os

from pydantic import BaseModel, Field

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseModel):
    """Runtime settings for the API server."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")
    log_level: str = Field(default="INFO", description="Root log level name")
    tariff_file: str | None = Field(
        default=None,
        description="Optional YAML tariff table. None = built-in Naver Maps price list.",
    )

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            host=os.getenv("MAP_BILLING_HOST", "0.0.0.0"),
            port=os.getenv("MAP_BILLING_PORT", "8000"),
            log_level=os.getenv("MAP_BILLING_LOG_LEVEL", "INFO").upper(),
            tariff_file=os.getenv("MAP_BILLING_TARIFF_FILE") or None,
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
