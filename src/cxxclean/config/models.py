"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CXXCLEAN__SECTION__KEY)
3. Project YAML (<project>/.cxxclean/config.yaml)
4. Global YAML (~/.config/cxxclean/config.yaml)
5. Built-in defaults (this file)

Examples:
    CXXCLEAN__LOGGING__LEVEL=DEBUG
    CXXCLEAN__CLEAN__RECURSIVE=true
    CXXCLEAN__CLEAN__PATTERNS='["*.o", "*.d"]'
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from cxxclean.core.languages import CPP_LANGUAGE, LanguageDescriptor

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        CXXCLEAN__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. Use -v on the command line for DEBUG.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class CleanConfig(BaseModel):
    """Defaults for ``cxc clean``.

    Env vars:
        CXXCLEAN__CLEAN__PATTERNS: JSON list of glob patterns
        CXXCLEAN__CLEAN__RECURSIVE: Descend into subdirectories
        CXXCLEAN__CLEAN__FORCE: Delete without confirmation
    """

    patterns: list[str] = Field(
        default_factory=lambda: ["*.o", "*.obj", "*.a", "*.so", "*.exe", "*.out", "*.gch", "*.pch"],
        description="Files matching any of these globs are removed. "
        "Patterns given with -p on the command line replace this list.",
    )
    recursive: bool = Field(
        default=False,
        description="Remove matching files in subdirectories too.",
    )
    force: bool = Field(
        default=False,
        description="Remove without asking. RISK: deletion cannot be undone.",
    )

    @field_validator("patterns")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        cleaned = [p.strip() for p in v if p.strip()]
        if len(cleaned) != len(v):
            raise ValueError("Patterns must not be empty")
        return cleaned


class LanguageConfig(BaseModel):
    """Token set used by ``cxc scan``. Defaults describe C/C++.

    Env vars:
        CXXCLEAN__LANGUAGE__ENCODING: Source file encoding
    """

    name: str = CPP_LANGUAGE.name
    macro_mark: str = CPP_LANGUAGE.macro_mark
    quote_marks: list[str] = Field(default_factory=lambda: sorted(CPP_LANGUAGE.quote_marks))
    inline_comment_mark: str = CPP_LANGUAGE.inline_comment_mark
    block_comment_marks: tuple[str, str] = CPP_LANGUAGE.block_comment_marks
    extensions: list[str] = Field(default_factory=lambda: sorted(CPP_LANGUAGE.extensions))
    encoding: str = Field(
        default="utf-8",
        description="Encoding used to read source files.",
    )

    @field_validator("macro_mark", "inline_comment_mark")
    @classmethod
    def validate_mark(cls, v: str) -> str:
        if not v:
            raise ValueError("Marks must not be empty")
        return v

    @field_validator("quote_marks")
    @classmethod
    def validate_quote_marks(cls, v: list[str]) -> list[str]:
        for quote in v:
            if len(quote) != 1:
                raise ValueError(f"Quote marks must be single characters, got {quote!r}")
        return v

    @field_validator("block_comment_marks")
    @classmethod
    def validate_block_comment_marks(cls, v: tuple[str, str]) -> tuple[str, str]:
        if not all(v):
            raise ValueError("Block comment marks must not be empty")
        return v

    @field_validator("extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]

    def to_descriptor(self) -> LanguageDescriptor:
        return LanguageDescriptor(
            name=self.name,
            macro_mark=self.macro_mark,
            quote_marks=frozenset(self.quote_marks),
            inline_comment_mark=self.inline_comment_mark,
            block_comment_marks=self.block_comment_marks,
            extensions=frozenset(self.extensions),
        )


class CxxCleanConfig(BaseModel):
    """Root configuration for cxxclean."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    clean: CleanConfig = Field(default_factory=CleanConfig)
    language: LanguageConfig = Field(default_factory=LanguageConfig)
