"""Library configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgtransform_log_level: str = "warning"

    # Default rounding used when callers pass no explicit options
    svgtransform_float_precision: int = 3
    svgtransform_transform_precision: int = 5

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at the configured level (idempotent, like basicConfig)."""
    name = (level or settings.svgtransform_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
