"""Reads the source files of a project (recursively)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .exceptions import SourceReadError, UnsupportedFileError
from .models import SourceFile

log = logging.getLogger(__name__)

DEFAULT_EXTENSIONS: tuple[str, ...] = (".js",)


def normalize_extensions(extra: Iterable[str] = ()) -> tuple[str, ...]:
    """Default extensions plus ``extra``, each with a leading dot, no duplicates."""
    extensions: list[str] = list(DEFAULT_EXTENSIONS)
    for ext in extra:
        ext = ext.strip()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = f".{ext}"
        if ext not in extensions:
            extensions.append(ext)
    return tuple(extensions)


def _is_hidden(path: Path) -> bool:
    return path.name.startswith(".")


def _matches(path: Path, extensions: tuple[str, ...]) -> bool:
    return path.name.endswith(extensions)


def _read(path: Path) -> SourceFile:
    """Read one file as UTF-8."""
    try:
        return SourceFile(path=path, text=path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Cannot read {path}: {e}", path) from e


def _walk(
    directory: Path, extensions: tuple[str, ...], visited: set[Path] | None = None
) -> list[SourceFile]:
    """Files of ``directory`` first, then each subdirectory, both sorted by name.

    Directories reached twice through symlinks are read only once.
    """
    visited = set() if visited is None else visited
    real = directory.resolve()
    if real in visited:
        log.debug("Skipping %s: already read as %s", directory, real)
        return []
    visited.add(real)

    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise SourceReadError(f"Cannot list {directory}: {e}", directory) from e

    files = [
        p for p in entries if p.is_file() and not _is_hidden(p) and _matches(p, extensions)
    ]
    subdirs = [p for p in entries if p.is_dir() and not _is_hidden(p)]

    sources = [_read(p) for p in files]
    for subdir in subdirs:
        sources.extend(_walk(subdir, extensions, visited))
    return sources


def collect_sources(
    root: Path | str, extensions: Iterable[str] = DEFAULT_EXTENSIONS
) -> list[SourceFile]:
    """Read every matching source file under ``root``.

    ``root`` may also be a single file, which must carry one of
    ``extensions``.

    Raises:
        SourceReadError: If ``root`` does not exist or a file cannot be read.
        UnsupportedFileError: If ``root`` is a file with another extension.
    """
    root = Path(root)
    extensions = tuple(extensions)

    if root.is_file():
        if not _matches(root, extensions):
            raise UnsupportedFileError(
                f"Expected a {' or '.join(extensions)} file: {root}", root
            )
        return [_read(root)]

    if not root.is_dir():
        raise SourceReadError(f"No such file or directory: {root}", root)

    sources = _walk(root, extensions)
    log.debug("Read %d source file(s) from %s", len(sources), root)
    return sources


def read_files(root: Path | str, extensions: Iterable[str] = DEFAULT_EXTENSIONS) -> list[str]:
    """Like collect_sources, but return only the file contents."""
    return [source.text for source in collect_sources(root, extensions)]
