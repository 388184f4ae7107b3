"""Configuration management for Column Press."""

import json
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict


class JobError(Exception):
    """A job file could not be read or is invalid."""

    pass


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # Typography
    font_name: str = Field(default="Helvetica", alias="COLUMN_PRESS_FONT")
    body_size: float = Field(default=8.0, alias="COLUMN_PRESS_BODY_SIZE")
    header_size: float = Field(default=12.0, alias="COLUMN_PRESS_HEADER_SIZE")
    header_minor_size: float = Field(
        default=10.0,
        alias="COLUMN_PRESS_HEADER_MINOR_SIZE",
    )
    footer_size: float = Field(default=6.0, alias="COLUMN_PRESS_FOOTER_SIZE")

    # Pagination
    footer_on_last_page: bool = Field(
        default=False,
        alias="COLUMN_PRESS_FOOTER_ON_LAST_PAGE",
    )

    log_level: str = Field(default="WARNING", alias="COLUMN_PRESS_LOG_LEVEL")


class DocumentJob(BaseModel):
    """One document to build, as read from a JSON job file.

    Keys may be given in camelCase (as job files are usually written)
    or snake_case. Unknown keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str = ""
    website: str = ""
    keywords: str = ""
    creator: str = ""
    sub_header_1: str = Field(default="", alias="subHeader1")
    sub_header_2: str = Field(default="", alias="subHeader2")
    body: str = ""
    footer: str = ""
    output_file: Optional[Path] = Field(default=None, alias="outputFile")

    @property
    def document_title(self) -> str:
        if self.website:
            return f"{self.website} - {self.title}"
        return self.title


def load_job(path: Path) -> DocumentJob:
    """Read and validate a JSON job file.

    Raises:
        JobError: If the file is missing, not JSON, or fails validation
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise JobError(f"Cannot read job file {path}: {e}") from e

    try:
        return DocumentJob.model_validate(json.loads(raw))
    except json.JSONDecodeError as e:
        raise JobError(f"Job file {path} is not valid JSON: {e}") from e
    except ValidationError as e:
        raise JobError(f"Job file {path} is invalid: {e}") from e


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
