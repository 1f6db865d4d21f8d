"""File discovery and reading for the scan and clean commands.

Pure filesystem I/O. No scanner dependency.
"""

from __future__ import annotations

import fnmatch
from collections.abc import Iterable, Iterator
from pathlib import Path

from cxxclean.core.errors import ScanError

# Never entered, even in recursive mode
SKIPPED_DIRS: frozenset[str] = frozenset((".git", ".svn", ".hg", ".bzr", ".cxxclean"))


def _iter_files(directory: Path, recursive: bool) -> Iterator[Path]:
    for item in sorted(directory.iterdir()):
        if item.is_dir():
            if recursive and item.name not in SKIPPED_DIRS and not item.is_symlink():
                yield from _iter_files(item, recursive)
            continue
        if item.is_file():
            yield item


def matches_any(path: Path, base: Path, patterns: Iterable[str]) -> bool:
    """Check whether ``path`` matches one of ``patterns``.

    A pattern is tried against both the file name and the posix path
    relative to ``base``, so ``*.o`` and ``build/*.o`` both work.
    """
    rel_str = path.relative_to(base).as_posix()
    return any(
        fnmatch.fnmatch(path.name, pattern) or fnmatch.fnmatch(rel_str, pattern)
        for pattern in patterns
    )


def collect_files(directory: Path, patterns: Iterable[str], *, recursive: bool = False) -> list[Path]:
    """Collect regular files under ``directory`` matching any pattern.

    Args:
        directory: Directory to search
        patterns: fnmatch-style glob patterns
        recursive: Descend into subdirectories

    Returns:
        Matching files, sorted
    """
    pattern_list = list(patterns)
    if not pattern_list:
        return []
    return sorted(
        path for path in _iter_files(directory, recursive) if matches_any(path, directory, pattern_list)
    )


def collect_sources(
    paths: Iterable[Path],
    extensions: Iterable[str],
    *,
    recursive: bool = False,
) -> list[Path]:
    """Expand ``paths`` into source files.

    Files are kept as given. Directories contribute the files whose extension
    is one of ``extensions``. Duplicates are dropped, first occurrence wins.
    """
    wanted = {ext.lower() for ext in extensions}
    found: list[Path] = []
    for path in paths:
        if path.is_dir():
            found.extend(p for p in _iter_files(path, recursive) if p.suffix.lower() in wanted)
        else:
            found.append(path)
    return list(dict.fromkeys(found))


def read_source(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a source file as text.

    Line endings are kept exactly as stored so region offsets match the file.

    Raises:
        ScanError: If the file cannot be read or decoded.
    """
    try:
        with path.open(encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ScanError.decode_error(str(path), str(e)) from e
