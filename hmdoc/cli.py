"""Command line entry point for hmdoc.

Usage:
    hmdoc "Name of Project" path/to/src > output.html
    hmdoc "Name of Project" file.js --format markdown > README.md
    hmdoc "Name of Project" src --ext .ts --ext .jsx --output docs.html
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from pydantic import ValidationError

from .config import GenerateOptions
from .exceptions import HmdocError
from .generators import OutputFormat
from .parser import collect_modules, parse_sources
from .reader import collect_sources
from .validators import compute_coverage, validate_outcomes

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hmdoc",
        description="Generate HTML or Markdown documentation from /** ... */ doc comments.",
    )
    parser.add_argument("project_name", help="name shown in the documentation title")
    parser.add_argument("source", help="source file or directory to document")
    parser.add_argument(
        "-f",
        "--format",
        dest="output_format",
        default=OutputFormat.HTML.value,
        choices=[f.value for f in OutputFormat],
        help="output format (default: html)",
    )
    parser.add_argument(
        "-e",
        "--ext",
        dest="extensions",
        action="append",
        default=[],
        metavar="EXT",
        help="additional file extension to read besides .js (repeatable)",
    )
    parser.add_argument("-o", "--output", help="write to this file instead of stdout")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="fail when a source file has no module header",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser


def run(options: GenerateOptions) -> int:
    """Read, parse, validate and render; return the process exit code."""
    try:
        sources = collect_sources(options.source, options.extensions)
    except HmdocError as e:
        log.error("%s", e)
        return 1

    outcomes = parse_sources(sources)
    modules = collect_modules(outcomes)
    log.info("Parsed %d module(s) from %d source file(s)", len(modules), len(sources))

    validation = validate_outcomes(outcomes, strict=options.strict)
    for warning in validation.warnings:
        log.warning("%s", warning)
    if validation.errors:
        for err in validation.errors:
            log.error("%s", err)
        return 1

    coverage = compute_coverage(outcomes)
    log.info(
        "Coverage: modules %.0f%%, functions %.0f%%",
        coverage["modules"] * 100,
        coverage["functions"] * 100,
    )

    document = options.output_format.render(options.project_name, modules)
    if options.output is None:
        sys.stdout.write(document)
        return 0

    try:
        options.output.write_text(document, encoding="utf-8")
    except OSError as e:
        log.error("Cannot write %s: %s", options.output, e)
        return 1
    log.info("Wrote %s", options.output)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Generate documentation for a project."""
    args = build_parser().parse_args(argv)

    try:
        options = GenerateOptions(
            project_name=args.project_name,
            source=args.source,
            output_format=args.output_format,
            extensions=args.extensions,
            output=args.output,
            strict=args.strict,
            verbose=args.verbose,
        )
    except ValidationError as e:
        print(f"hmdoc: invalid arguments\n{e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=options.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(options)


if __name__ == "__main__":
    sys.exit(main())
