"""Core module exports."""

from cxxclean.core.errors import (
    CleanError,
    ConfigError,
    CxxCleanError,
    ErrorCode,
    ScanError,
)
from cxxclean.core.languages import CPP_LANGUAGE, LanguageDescriptor
from cxxclean.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)
from cxxclean.core.progress import pluralize, status

__all__ = [
    # Errors
    "CleanError",
    "ConfigError",
    "CxxCleanError",
    "ErrorCode",
    "ScanError",
    # Languages
    "CPP_LANGUAGE",
    "LanguageDescriptor",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
    # Progress
    "pluralize",
    "status",
]
