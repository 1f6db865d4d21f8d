"""Region matchers for the partition scanner.

Each matcher recognizes one region kind. ``match`` is called at every
cursor position; it returns None unless the kind's introducer token starts
exactly at ``offset``, in which case it returns the whole region.

``floor`` is the end of the region emitted before this one. Matchers that
absorb leading indentation never extend below it, so regions stay disjoint.

Matchers are ordered by priority in ``build_matchers``: macro, literal,
inline comment, block comment. The first one that matches wins.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from functools import lru_cache

from cxxclean.core.errors import ScanError
from cxxclean.core.languages import LanguageDescriptor
from cxxclean.source.models import RegionKind, SourcePiece

_HORIZONTAL_WHITESPACE = " \t"


def _extend_left(text: str, start: int, floor: int) -> int:
    """Move start back over spaces and tabs on the same line."""
    while start > floor and text[start - 1] in _HORIZONTAL_WHITESPACE:
        start -= 1
    return start


def match_macro(text: str, start: int, mark: str = "#", floor: int = 0) -> SourcePiece:
    """Match a preprocessor directive starting at ``start``.

    The directive runs to the first newline, inclusive. A backslash swallows
    the whitespace after it, newlines included, which is how line
    continuations and the indentation of the continued line stay inside the
    macro.
    """
    begin = _extend_left(text, start, floor)
    n = len(text)
    end = start + len(mark)
    while end < n:
        letter = text[end]
        if letter == "\n":
            break
        if letter == "\\":
            end += 1
            while end < n and text[end].isspace():
                end += 1
            continue
        end += 1
    return SourcePiece(start=begin, content=text[begin : end + 1])


def match_literal(text: str, start: int) -> SourcePiece:
    """Match a quoted literal whose opening quote is at ``start``.

    Raises:
        ScanError: If the text ends before the closing quote.
    """
    quote = text[start]
    n = len(text)
    end = start + 1
    while end < n:
        letter = text[end]
        if letter == quote:
            break
        if letter == "\\":
            end += 1  # escaped character
        end += 1

    if end >= n:
        raise ScanError.unterminated_literal(start)

    return SourcePiece(start=start, content=text[start : end + 1])


def match_inline_comment(text: str, start: int, mark: str = "//") -> SourcePiece:
    """Match a comment running to the next newline, exclusive.

    A comment on the last line without a trailing newline ends at end of text.
    """
    end = text.find("\n", start + len(mark))
    if end == -1:
        end = len(text)
    return SourcePiece(start=start, content=text[start:end])


def match_block_comment(
    text: str,
    start: int,
    marks: tuple[str, str] = ("/*", "*/"),
    floor: int = 0,
) -> SourcePiece:
    """Match a block comment whose open token is at ``start``.

    Leading indentation is absorbed, and so are trailing spaces and the
    newlines right after the close token, so a comment on its own line takes
    its line terminator with it.

    Raises:
        ScanError: If the close token never appears.
    """
    open_mark, close_mark = marks
    begin = _extend_left(text, start, floor)
    close_at = text.find(close_mark, start + len(open_mark))
    if close_at == -1:
        raise ScanError.unterminated_block_comment(start)

    n = len(text)
    end = close_at + len(close_mark)
    while end < n and text[end] in _HORIZONTAL_WHITESPACE:
        end += 1
    while end < n and text[end] == "\n":
        end += 1

    return SourcePiece(start=begin, content=text[begin:end])


class RegionMatcher(ABC):
    """One region kind the scanner can recognize."""

    kind: RegionKind

    @abstractmethod
    def match(self, text: str, offset: int, floor: int = 0) -> SourcePiece | None:
        """Return the region starting at ``offset``, or None if none starts there."""


class MacroMatcher(RegionMatcher):
    kind = RegionKind.MACRO

    def __init__(self, mark: str) -> None:
        self._mark = mark

    def match(self, text: str, offset: int, floor: int = 0) -> SourcePiece | None:
        if not text.startswith(self._mark, offset):
            return None
        return match_macro(text, offset, self._mark, floor)


class LiteralMatcher(RegionMatcher):
    kind = RegionKind.LITERAL

    def __init__(self, quote_marks: frozenset[str]) -> None:
        self._quote_marks = tuple(sorted(quote_marks))

    def match(self, text: str, offset: int, floor: int = 0) -> SourcePiece | None:  # noqa: ARG002
        for quote in self._quote_marks:
            if text.startswith(quote, offset):
                return match_literal(text, offset)
        return None


class InlineCommentMatcher(RegionMatcher):
    kind = RegionKind.INLINE_COMMENT

    def __init__(self, mark: str) -> None:
        self._mark = mark

    def match(self, text: str, offset: int, floor: int = 0) -> SourcePiece | None:  # noqa: ARG002
        if not text.startswith(self._mark, offset):
            return None
        return match_inline_comment(text, offset, self._mark)


class BlockCommentMatcher(RegionMatcher):
    kind = RegionKind.BLOCK_COMMENT

    def __init__(self, marks: tuple[str, str]) -> None:
        self._marks = marks

    def match(self, text: str, offset: int, floor: int = 0) -> SourcePiece | None:
        if not text.startswith(self._marks[0], offset):
            return None
        return match_block_comment(text, offset, self._marks, floor)


@lru_cache(maxsize=16)
def build_matchers(language: LanguageDescriptor) -> tuple[RegionMatcher, ...]:
    """Matchers for ``language`` in priority order."""
    return (
        MacroMatcher(language.macro_mark),
        LiteralMatcher(language.quote_marks),
        InlineCommentMatcher(language.inline_comment_mark),
        BlockCommentMatcher(language.block_comment_marks),
    )
