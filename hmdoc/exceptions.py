"""Exceptions raised by hmdoc."""

from __future__ import annotations

from pathlib import Path


class HmdocError(Exception):
    """Base exception for hmdoc operations."""


class SourceReadError(HmdocError):
    """Raised when a source path is missing or cannot be read."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class UnsupportedFileError(SourceReadError):
    """Raised when a single-file target does not have a recognized extension."""

    pass


class ModuleParseError(HmdocError):
    """Raised when a file's comments do not yield a module header.

    Contained by the project parser: the file is skipped, the run goes on.
    """

    pass


class UnknownFormatError(HmdocError, ValueError):
    """Raised for an output format name other than html or markdown."""

    pass
