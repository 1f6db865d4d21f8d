"""Pattern extraction over partitioned regions.

Every pass is a pure function ``(text) -> (stripped_text, captures)`` that
deletes all matches of one pattern and returns what they captured. Pieces
are frozen, so callers rebuild them from the stripped text.

Patterns match ASCII identifiers and paths only.
"""

from __future__ import annotations

import re
from functools import lru_cache

NAMESPACE_RX = re.compile(r"using\s+namespace\s+(\w+)\s*;\s*", re.ASCII)

TYPEDEF_RX = re.compile(r"typedef\s+([\w* <>]+)\s+(\w+)\s*;\s*", re.ASCII)


@lru_cache(maxsize=16)
def include_rx(macro_mark: str = "#") -> re.Pattern[str]:
    """Pattern for ``#include <path>`` / ``#include "path"`` directives.

    Only ``include`` is recognized; the directive must end with a newline.
    """
    return re.compile(
        re.escape(macro_mark) + r"include\s*[<\"]([\w\-.:/\\]+)[>\"]\s*?\n",
        re.ASCII,
    )


def strip_matches(pattern: re.Pattern[str], text: str) -> tuple[str, list[tuple[str, ...]]]:
    """Delete every match of ``pattern`` from ``text``.

    Returns:
        The remaining text and the groups of each match, in order.
    """
    captures: list[tuple[str, ...]] = []

    def _collect(m: re.Match[str]) -> str:
        captures.append(m.groups())
        return ""

    return pattern.sub(_collect, text), captures


def strip_includes(text: str, macro_mark: str = "#") -> tuple[str, list[str]]:
    stripped, captures = strip_matches(include_rx(macro_mark), text)
    return stripped, [path for (path,) in captures]


def strip_namespaces(text: str) -> tuple[str, list[str]]:
    stripped, captures = strip_matches(NAMESPACE_RX, text)
    return stripped, [name for (name,) in captures]


def strip_typedefs(text: str) -> tuple[str, list[tuple[str, str]]]:
    """Delete typedef declarations.

    Returns:
        The remaining text and ``(alias, underlying_type)`` pairs.
    """
    stripped, captures = strip_matches(TYPEDEF_RX, text)
    return stripped, [(alias, raw) for raw, alias in captures]
