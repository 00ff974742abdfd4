"""Documentation validation and quality checks."""

from __future__ import annotations

from typing import Sequence

from .models import ParseOutcome, ValidationResult


def validate_outcomes(
    outcomes: Sequence[ParseOutcome],
    strict: bool = False,
) -> ValidationResult:
    """Validate parsed documentation.

    Checks:
    1. Every source should yield a module (warning in normal mode, error in strict)
    2. Module headers should name authors and a date (warning)
    3. Function comments should carry a "::" signature (warning)

    Args:
        outcomes: Per-file parse outcomes, in input order
        strict: If True, skipped sources are errors instead of warnings

    Returns:
        ValidationResult with errors and warnings
    """
    result = ValidationResult()

    for outcome in outcomes:
        module = outcome.module
        if module is None:
            msg = f"{outcome.source}: skipped ({outcome.reason})"
            if strict:
                result.errors.append(msg)
            else:
                result.warnings.append(msg)
            continue

        if not module.authors:
            result.warnings.append(f"{module.name}: missing 'written by' line")
        if not module.date:
            result.warnings.append(f"{module.name}: missing 'on' date line")

        for fn in module.functions:
            if not fn.signature:
                result.warnings.append(f"{module.name}.{fn.name}: missing '::' signature")

    return result


def compute_coverage(outcomes: Sequence[ParseOutcome]) -> dict[str, float]:
    """Compute documentation coverage.

    Returns:
        Dict with 'modules' (sources that parsed) and 'functions'
        (functions with a description) coverage (0.0 - 1.0)
    """
    modules = [o.module for o in outcomes if o.module is not None]
    functions = [fn for m in modules for fn in m.functions]
    described = sum(1 for fn in functions if fn.description)

    return {
        "modules": len(modules) / len(outcomes) if outcomes else 1.0,
        "functions": described / len(functions) if functions else 1.0,
    }
