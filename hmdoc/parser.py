"""Parses doc comments into FunctionDoc and ModuleDoc records."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Iterable, Sequence

from pyuca import Collator

from .exceptions import ModuleParseError
from .extractors import extract_doc_comments, first_match, recognize_author, recognize_date
from .models import FunctionDoc, ModuleDoc, ParseOutcome, SourceFile

log = logging.getLogger(__name__)

SEPARATOR = "::"
# Header layout: name, author line, date line, blank line, description
DESCRIPTION_OFFSET = 3


@lru_cache(maxsize=1)
def _collator() -> Collator:
    """Unicode Collation Algorithm collator (the DUCET table loads once)."""
    return Collator()


def collation_key(name: str) -> tuple[tuple[int, ...], str]:
    """Sort key for locale-aware name ordering.

    Accents and case only break ties between otherwise equal names, lower case
    first ("a" < "A" < "b", "beta" < "Émile" < "zeta"). The exact spelling
    is the final tie-breaker so that the order is total.
    """
    return _collator().sort_key(name), name


def parse_function(comment: str) -> FunctionDoc:
    """Parse one function comment: ``name :: signature`` followed by text.

    Without a ``::`` on the first line the whole line becomes the name and
    the signature is empty. Never raises.
    """
    first, *rest = comment.split("\n")

    name, separator, signature = first.partition(SEPARATOR)
    if not separator:
        signature = ""

    return FunctionDoc(
        name=name.strip(),
        signature=signature.strip(),
        description="\n".join(line.strip() for line in rest),
    )


def parse_module(comments: Sequence[str]) -> ModuleDoc:
    """Parse the comments of one file into a ModuleDoc.

    The first comment is the module header, whatever it looks like; every
    following comment describes a function.

    Raises:
        ModuleParseError: If there is no header comment.
    """
    if not comments:
        raise ModuleParseError("no doc comments found")

    header = comments[0].split("\n")
    authors = first_match(recognize_author, header) or []
    date = first_match(recognize_date, header) or ""
    description = "\n".join(header[DESCRIPTION_OFFSET:]).strip()

    functions = sorted(
        (parse_function(c) for c in comments[1:]),
        key=lambda f: collation_key(f.name),
    )

    return ModuleDoc(
        name=header[0],
        authors=tuple(authors),
        date=date,
        description=description,
        functions=tuple(functions),
    )


def try_parse_module(comments: Sequence[str], source: str = "<source>") -> ParseOutcome:
    """Parse a module, turning any failure into a skip outcome.

    Never raises: a file that cannot be parsed is left out of the project and
    the rest of the batch goes on.
    """
    try:
        module = parse_module(comments)
    except ModuleParseError as e:
        log.debug("Skipping %s: %s", source, e)
        return ParseOutcome(source=source, reason=str(e))
    except Exception as e:
        reason = f"{e.__class__.__name__}: {e}"
        log.warning("Skipping %s: %s", source, reason)
        return ParseOutcome(source=source, reason=reason)
    return ParseOutcome(source=source, module=module)


def _label(src: SourceFile | str, index: int) -> tuple[str, str]:
    """Return (label, text) for a source file or raw source text."""
    if isinstance(src, SourceFile):
        return str(src.path), src.text
    return f"<source {index}>", src


def parse_sources(srcs: Iterable[SourceFile | str]) -> list[ParseOutcome]:
    """Extract and parse every source, one outcome per input, in input order."""
    outcomes = []
    for index, src in enumerate(srcs):
        label, text = _label(src, index)
        outcomes.append(try_parse_module(extract_doc_comments(text), label))
    return outcomes


def collect_modules(outcomes: Iterable[ParseOutcome]) -> list[ModuleDoc]:
    """Keep the parsed modules and sort them by name."""
    modules = [o.module for o in outcomes if o.module is not None]
    modules.sort(key=lambda m: collation_key(m.name))
    return modules


def parse_modules(srcs: Iterable[SourceFile | str]) -> list[ModuleDoc]:
    """Parse module sources into ModuleDocs sorted by name.

    Sources without a module header are left out.
    """
    return collect_modules(parse_sources(srcs))
