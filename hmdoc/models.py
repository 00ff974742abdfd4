"""Data models for documentation extraction."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FunctionDoc:
    """Extracted function documentation."""

    name: str = ""  # "parseModule"
    signature: str = ""  # "[string] -> DocModule"
    description: str = ""


@dataclass(frozen=True)
class ModuleDoc:
    """Extracted module documentation (header comment plus functions)."""

    name: str = ""  # First header line, verbatim
    authors: tuple[str, ...] = ()  # From the "written by" line
    date: str = ""  # From the "on" line
    description: str = ""
    functions: tuple[FunctionDoc, ...] = ()  # Sorted by name


@dataclass(frozen=True)
class SourceFile:
    """One source file handed to the parser by the reader."""

    path: Path
    text: str


@dataclass(frozen=True)
class ParseOutcome:
    """Result of parsing one source: a module, or the reason it was skipped."""

    source: str  # Path or "<source N>" label
    module: ModuleDoc | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.module is not None


@dataclass
class ValidationResult:
    """Results from documentation validation."""

    errors: list[str] = field(default_factory=list)  # Run fails if non-empty
    warnings: list[str] = field(default_factory=list)  # Printed but allowed
