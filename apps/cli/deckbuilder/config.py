"""Deck builder configuration settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Builder configuration loaded from environment variables."""

    # Content root holding the notes/ and practice/ folders
    root: Path = Path(".")

    # Build preset: "practice" or "flashcards"
    preset: str = "practice"

    # Output file; defaults to data.js / flash-card-data.js under the root
    output: Path | None = None

    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="STUDYDECK_", env_file=".env", env_file_encoding="utf-8"
    )


settings = Settings()
