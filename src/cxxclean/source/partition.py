"""Partition C-like source text into macros, literals, comments and code.

The scanner makes a single forward pass. At each cursor position the
matchers from ``build_matchers`` are tried in priority order; a match closes
the plain-code run in front of it and the cursor jumps past the region.
Whatever follows the last region becomes the trailing plain-code run.

Extraction then pulls include targets out of macros, and namespace and
typedef declarations out of plain code, deleting the matched text.
"""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType

from cxxclean.core.errors import ScanError
from cxxclean.core.languages import CPP_LANGUAGE, LanguageDescriptor
from cxxclean.core.logging import get_logger
from cxxclean.files import read_source
from cxxclean.source.extract import strip_includes, strip_namespaces, strip_typedefs
from cxxclean.source.matchers import build_matchers
from cxxclean.source.models import Partition, RegionKind, SourceItem, SourcePiece

log = get_logger("source.partition")


def scan_regions(text: str, language: LanguageDescriptor = CPP_LANGUAGE) -> Partition:
    """Split ``text`` into disjoint regions without extracting anything.

    Raises:
        ScanError: On an unterminated literal or block comment.
    """
    matchers = build_matchers(language)
    macros: list[SourcePiece] = []
    literals: list[SourcePiece] = []
    comments: list[SourcePiece] = []
    sources: list[SourcePiece] = []
    buckets: dict[RegionKind, list[SourcePiece]] = {
        RegionKind.MACRO: macros,
        RegionKind.LITERAL: literals,
        RegionKind.INLINE_COMMENT: comments,
        RegionKind.BLOCK_COMMENT: comments,
    }

    last_index = 0
    i = 0
    n = len(text)
    while i < n:
        for matcher in matchers:
            piece = matcher.match(text, i, last_index)
            if piece is not None:
                break
        else:
            i += 1
            continue

        sources.append(SourcePiece(start=last_index, content=text[last_index : piece.start]))
        buckets[matcher.kind].append(piece)
        last_index = piece.end
        i = last_index

    # Trailing run, kept even when empty
    sources.append(SourcePiece(start=last_index, content=text[last_index:]))

    return Partition(
        macros=tuple(macros),
        sources=tuple(sources),
        comments=tuple(comments),
        literals=tuple(literals),
    )


def _non_empty(pieces: list[SourcePiece] | tuple[SourcePiece, ...]) -> tuple[SourcePiece, ...]:
    return tuple(p for p in pieces if p.content)


def _unique(values: list[str]) -> tuple[str, ...]:
    return tuple(v for v in dict.fromkeys(values) if v)


def partition(text: str, language: LanguageDescriptor = CPP_LANGUAGE) -> SourceItem:
    """Partition ``text`` and extract dependencies, namespaces and typedefs.

    Raises:
        ScanError: On an unterminated literal or block comment. No partial
            result is produced.
    """
    regions = scan_regions(text, language)

    dependencies: list[str] = []
    macros: list[SourcePiece] = []
    for macro in regions.macros:
        content, found = strip_includes(macro.content, language.macro_mark)
        dependencies.extend(found)
        macros.append(SourcePiece(start=macro.start, content=content))

    namespaces: list[str] = []
    typedefs: dict[str, str] = {}
    sources: list[SourcePiece] = []
    for source in regions.sources:
        content, names = strip_namespaces(source.content)
        namespaces.extend(names)
        content, aliases = strip_typedefs(content)
        typedefs.update(aliases)
        sources.append(SourcePiece(start=source.start, content=content))

    item = SourceItem(
        macros=_non_empty(macros),
        sources=_non_empty(sources),
        comments=_non_empty(regions.comments),
        literals=_non_empty(regions.literals),
        dependencies=_unique(dependencies),
        namespaces=_unique(namespaces),
        typedefs=MappingProxyType(typedefs),
    )
    log.debug(
        "partitioned",
        language=language.name,
        macros=len(item.macros),
        sources=len(item.sources),
        comments=len(item.comments),
        literals=len(item.literals),
        dependencies=len(item.dependencies),
    )
    return item


def scan_file(
    path: Path,
    language: LanguageDescriptor = CPP_LANGUAGE,
    *,
    encoding: str = "utf-8",
) -> SourceItem:
    """Read ``path`` and partition its contents.

    Raises:
        ScanError: If the file cannot be decoded or is malformed. The error's
            details name the file.
    """
    text = read_source(path, encoding=encoding)
    try:
        return partition(text, language)
    except ScanError as e:
        raise e.with_path(str(path)) from e
