"""Data models for partitioned source text."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


class RegionKind(str, Enum):
    """Kind of region a matcher recognizes."""

    MACRO = "macro"
    LITERAL = "literal"
    INLINE_COMMENT = "inline_comment"
    BLOCK_COMMENT = "block_comment"


@dataclass(frozen=True, slots=True)
class SourcePiece:
    """A contiguous span of the original text.

    ``start`` is an offset into the original document. After extraction the
    content may be shorter than the span it was cut from; ``start`` is kept.
    """

    start: int
    content: str

    @property
    def end(self) -> int:
        return self.start + len(self.content)

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start, "content": self.content}


@dataclass(frozen=True, slots=True)
class Partition:
    """Raw scanner output, before extraction and filtering.

    Laying every piece end to end in ``start`` order reproduces the text.
    """

    macros: tuple[SourcePiece, ...]
    sources: tuple[SourcePiece, ...]
    comments: tuple[SourcePiece, ...]
    literals: tuple[SourcePiece, ...]

    def pieces(self) -> Iterator[SourcePiece]:
        """All pieces in document order."""
        merged = [*self.macros, *self.sources, *self.comments, *self.literals]
        merged.sort(key=lambda p: (p.start, p.end))
        yield from merged

    def reconstruct(self) -> str:
        return "".join(p.content for p in self.pieces())


@dataclass(frozen=True, slots=True)
class SourceItem:
    """Everything extracted from one scanned document."""

    macros: tuple[SourcePiece, ...] = ()
    sources: tuple[SourcePiece, ...] = ()
    comments: tuple[SourcePiece, ...] = ()
    literals: tuple[SourcePiece, ...] = ()
    dependencies: tuple[str, ...] = ()
    namespaces: tuple[str, ...] = ()
    typedefs: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "macros": [p.to_dict() for p in self.macros],
            "sources": [p.to_dict() for p in self.sources],
            "comments": [p.to_dict() for p in self.comments],
            "literals": [p.to_dict() for p in self.literals],
            "dependencies": list(self.dependencies),
            "namespaces": list(self.namespaces),
            "typedefs": dict(self.typedefs),
        }
