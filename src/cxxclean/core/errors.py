"""cxxclean error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Scan
- 4xxx: Clean
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Scan (3xxx)
    SCAN_UNTERMINATED_LITERAL = 3001
    SCAN_UNTERMINATED_BLOCK_COMMENT = 3002
    SCAN_DECODE_ERROR = 3003

    # Clean (4xxx)
    CLEAN_REMOVE_FAILED = 4001
    CLEAN_NOT_A_DIRECTORY = 4002



@dataclass(frozen=True, slots=True)
class CxxCleanError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'SCAN_UNTERMINATED_LITERAL')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(CxxCleanError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class ScanError(CxxCleanError):
    """A source document that cannot be partitioned.

    Both structural failures are detected only when the scanner runs off the
    end of the text while a region is still open. ``details["offset"]`` is the
    start offset of the offending region.
    """

    @property
    def offset(self) -> int | None:
        return self.details.get("offset")

    @property
    def kind(self) -> str | None:
        return self.details.get("kind")

    @classmethod
    def unterminated_literal(cls, offset: int) -> "ScanError":
        return cls(
            code=ErrorCode.SCAN_UNTERMINATED_LITERAL,
            message=f"Bad source file: the quotation mark at offset {offset} is not closed",
            details={"offset": offset, "kind": "UnterminatedLiteral"},
        )

    @classmethod
    def unterminated_block_comment(cls, offset: int) -> "ScanError":
        return cls(
            code=ErrorCode.SCAN_UNTERMINATED_BLOCK_COMMENT,
            message=f"Bad source file: the block comment at offset {offset} is not closed",
            details={"offset": offset, "kind": "UnterminatedBlockComment"},
        )

    @classmethod
    def decode_error(cls, path: str, reason: str) -> "ScanError":
        return cls(
            code=ErrorCode.SCAN_DECODE_ERROR,
            message=f"Failed to read {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    def with_path(self, path: str) -> "ScanError":
        """Copy of this error that also names the file it came from."""
        return type(self)(
            code=self.code,
            message=f"{path}: {self.message}",
            retryable=self.retryable,
            details={**self.details, "path": path},
        )


class CleanError(CxxCleanError):
    """Errors raised by the clean workflow."""

    @classmethod
    def remove_failed(cls, path: str, reason: str) -> "CleanError":
        return cls(
            code=ErrorCode.CLEAN_REMOVE_FAILED,
            message=f"Failed to remove {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def not_a_directory(cls, path: str) -> "CleanError":
        return cls(
            code=ErrorCode.CLEAN_NOT_A_DIRECTORY,
            message=f"Not a directory: {path}",
            details={"path": path},
        )
