"""Doc comment extraction and header field recognizers."""

from __future__ import annotations

import re
from typing import Callable, Iterable, TypeVar

T = TypeVar("T")

AUTHOR_MARKER = "written by"
DATE_MARKER = "on"

# Non-greedy: the first "*/" after "/**" closes the comment
_DOC_COMMENT = re.compile(r"/\*\*(.*?)\*/", re.DOTALL)
# Leading " *" decoration on each comment line, plus one optional tab
_DECORATION = re.compile(r"^[ \t]*\*\t?", re.MULTILINE)


def _strip_decoration(body: str) -> str:
    """Remove the per-line " *" decoration from a comment body and trim it."""
    return _DECORATION.sub("", body).strip()


def extract_doc_comments(src: str) -> list[str]:
    """Return the bodies of all ``/** ... */`` comments in ``src``, in file order.

    A comment may span any number of lines and is returned as one unit.
    An unterminated ``/**`` produces nothing; a source without doc comments
    yields an empty list.
    """
    return [_strip_decoration(m.group(1)) for m in _DOC_COMMENT.finditer(src)]


def recognize_author(line: str) -> list[str] | None:
    """Parse ``written by A and B`` into ``["A", "B"]``.

    Returns None when the line is not an author line so that callers can keep
    scanning. The split is on the bare substring "and".
    """
    if not line.startswith(AUTHOR_MARKER):
        return None
    author_text = line[len(AUTHOR_MARKER + " ") :]
    return [author.strip() for author in author_text.split("and")]


def recognize_date(line: str) -> str | None:
    """Parse ``on 6/18/2017`` into ``"6/18/2017"``, or None for other lines."""
    if not line.startswith(DATE_MARKER):
        return None
    return line[len(DATE_MARKER + " ") :]


def first_match(recognizer: Callable[[str], T | None], lines: Iterable[str]) -> T | None:
    """Apply ``recognizer`` to each line in order and return the first hit.

    Scanning stops at the first line for which the recognizer returns
    something other than None.
    """
    for line in lines:
        result = recognizer(line)
        if result is not None:
            return result
    return None
