"""File operations module - discovery and reading."""

from cxxclean.files.ops import (
    SKIPPED_DIRS,
    collect_files,
    collect_sources,
    matches_any,
    read_source,
)

__all__ = ["SKIPPED_DIRS", "collect_files", "collect_sources", "matches_any", "read_source"]
