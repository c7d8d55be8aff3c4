"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from statuslint.parser.loader import DEFAULT_MAX_DEPTH, DEFAULT_MAX_DOCUMENT_SIZE


class Settings(BaseSettings):
    """Configuration for statuslint.

    Values are read from ``STATUSLINT_*`` environment variables and from a
    ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(
        env_prefix="STATUSLINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"

    # Parser safety limits
    max_document_size: int = DEFAULT_MAX_DOCUMENT_SIZE
    max_depth: int = DEFAULT_MAX_DEPTH
