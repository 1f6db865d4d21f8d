"""Config module exports."""

from cxxclean.config.loader import load_config
from cxxclean.config.models import (
    CleanConfig,
    CxxCleanConfig,
    LanguageConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "load_config",
    "CleanConfig",
    "CxxCleanConfig",
    "LanguageConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
