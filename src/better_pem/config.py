"""
Configuration — typed, validated settings for parse_pems.

Uses pydantic-settings so the defaults can be overridden from the
environment (prefix BETTER_PEM_, e.g. BETTER_PEM_STREAM_CHUNK_SIZE=4096)
or by passing a ParserSettings instance explicitly. Invalid values raise
pydantic.ValidationError at construction, never halfway through a parse.
"""

from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from better_pem.adapters.input_normalizer import DEFAULT_CHUNK_SIZE


class ParserSettings(BaseSettings):
    """
    Settings for one parse_pems call.

    Load order (highest priority first):
      1. Explicit constructor arguments
      2. Environment variables (BETTER_PEM_*)
      3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="BETTER_PEM_",
        extra="ignore",
    )

    stream_chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE,
        ge=1,
        description="Bytes requested per read() when draining a stream input",
    )
    log_level: str = Field(default="INFO", description="Level passed to configure_structlog")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Accept standard logging level names in any case; store them upper-cased."""
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level
