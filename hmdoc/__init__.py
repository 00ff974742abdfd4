"""hmdoc: HTML and Markdown documentation from /** ... */ doc comments.

A module header comment names the module, its authors ("written by A and B")
and date ("on 6/18/2017"), followed by a blank line and a description. Every
later comment documents one function as ``name :: signature`` plus free text.
"""

from .exceptions import (
    HmdocError,
    ModuleParseError,
    SourceReadError,
    UnknownFormatError,
    UnsupportedFileError,
)
from .extractors import extract_doc_comments, first_match, recognize_author, recognize_date
from .generators import OutputFormat, generate_html, generate_markdown
from .models import FunctionDoc, ModuleDoc, ParseOutcome, SourceFile, ValidationResult
from .parser import parse_function, parse_module, parse_modules, parse_sources, try_parse_module
from .reader import collect_sources, read_files

__version__ = "0.1.0"

__all__ = [
    "FunctionDoc",
    "HmdocError",
    "ModuleDoc",
    "ModuleParseError",
    "OutputFormat",
    "ParseOutcome",
    "SourceFile",
    "SourceReadError",
    "UnknownFormatError",
    "UnsupportedFileError",
    "ValidationResult",
    "collect_sources",
    "extract_doc_comments",
    "first_match",
    "generate_html",
    "generate_markdown",
    "parse_function",
    "parse_module",
    "parse_modules",
    "parse_sources",
    "read_files",
    "recognize_author",
    "recognize_date",
    "try_parse_module",
]
