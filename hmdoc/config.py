"""Validated options for one documentation run."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .generators import OutputFormat
from .reader import DEFAULT_EXTENSIONS, normalize_extensions


def default_log_level() -> int:
    """Log level from HMDOC_LOG_LEVEL (a level name such as DEBUG), else WARNING."""
    name = os.environ.get("HMDOC_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


class GenerateOptions(BaseModel):
    project_name: str = Field(min_length=1)
    source: Path
    output_format: OutputFormat = OutputFormat.HTML
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    output: Path | None = None
    strict: bool = False
    verbose: bool = False

    @field_validator("project_name")
    @classmethod
    def strip_project_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("project name must not be blank")
        return value

    @field_validator("output_format", mode="before")
    @classmethod
    def parse_output_format(cls, value):
        if isinstance(value, str):
            return OutputFormat.from_name(value)
        return value

    @field_validator("extensions", mode="before")
    @classmethod
    def add_default_extensions(cls, value):
        if value is None:
            return DEFAULT_EXTENSIONS
        if isinstance(value, str):
            value = [value]
        return normalize_extensions(value)

    @property
    def log_level(self) -> int:
        return logging.DEBUG if self.verbose else default_log_level()
