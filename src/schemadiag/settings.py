"""Shared settings loaded from environment / .env file."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for diagnostic rendering.

    Values are read from environment variables and from a ``.env`` file
    in the working directory.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Rendering
    diagnostic_color: bool = False  # ANSI colour on "error" and the caret
    diagnostic_source_label: str = "schema"  # shown in " --> schema:1:1"
