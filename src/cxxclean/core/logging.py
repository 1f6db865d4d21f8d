"""Logging setup for cxc runs.

structlog builds the event; stdlib handlers render it, one handler per
configured output, each with its own level and format (console or JSON).

Loggers returned by ``get_logger`` resolve the structlog configuration on
every call, so module-level loggers created at import time follow whatever
``configure_logging`` installs later.

Commands that print machine-readable results on stdout (``cxc scan --json``)
configure logging with ``reserve_stdout=True``: outputs pointed at stdout are
written to stderr instead.

Every event of one run carries the same ``run_id``.
"""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import TYPE_CHECKING, Any
from uuid import uuid4

import structlog

if TYPE_CHECKING:
    from cxxclean.config.models import LoggingConfig, LogOutputConfig

_run_id: ContextVar[str | None] = ContextVar("run_id", default=None)

_CONSOLE_DESTINATIONS = ("stderr", "stdout")


def get_run_id() -> str | None:
    return _run_id.get()


def set_run_id(run_id: str | None = None) -> str:
    """Set or generate the id shared by every event of this run."""
    rid = run_id or uuid4().hex[:12]
    _run_id.set(rid)
    return rid


def clear_run_id() -> None:
    _run_id.set(None)


def _add_run_id(
    _logger: structlog.types.WrappedLogger,
    _method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if rid := get_run_id():
        event_dict["run_id"] = rid
    return event_dict


_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    _add_run_id,  # type: ignore[list-item]
]


def _to_level(name: str | None, default: int) -> int:
    if name is None:
        return default
    return logging.getLevelNamesMapping().get(name.upper(), default)


def _open_handler(destination: str, *, reserve_stdout: bool) -> logging.Handler:
    if destination == "stdout" and not reserve_stdout:
        return logging.StreamHandler(sys.stdout)
    if destination in _CONSOLE_DESTINATIONS:
        return logging.StreamHandler(sys.stderr)
    path = Path(destination)
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="a", encoding="utf-8")


def _make_formatter(output: LogOutputConfig, handler: logging.Handler) -> logging.Formatter:
    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        stream = getattr(handler, "stream", None)
        colors = (
            output.destination in _CONSOLE_DESTINATIONS
            and stream is not None
            and stream.isatty()
        )
        renderer = structlog.dev.ConsoleRenderer(colors=colors, pad_event_to=0, pad_level=False)
    return structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=_SHARED_PROCESSORS,
    )


def configure_logging(
    *,
    config: LoggingConfig | None = None,
    level: str = "WARNING",
    json_format: bool = False,
    reserve_stdout: bool = False,
) -> None:
    """Install logging for this process, replacing any earlier setup.

    Args:
        config: Level and outputs from the project config. When omitted a
            single stderr output at ``level`` is used.
        level: Level for the default output
        json_format: Render the default output as JSON
        reserve_stdout: Keep stdout free for command results
    """
    from cxxclean.config.models import LoggingConfig, LogOutputConfig

    if config is None:
        config = LoggingConfig(
            level=level.upper(),  # type: ignore[arg-type]
            outputs=[LogOutputConfig(format="json" if json_format else "console")],
        )
    root_level = _to_level(config.level, logging.WARNING)

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    for old in list(root_logger.handlers):
        root_logger.removeHandler(old)
        old.close()
    root_logger.setLevel(root_level)

    for output in config.outputs:
        handler = _open_handler(output.destination, reserve_stdout=reserve_stdout)
        handler.setLevel(_to_level(output.level, root_level))
        handler.setFormatter(_make_formatter(output, handler))
        root_logger.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Logger tagged with ``name``, resolved lazily on each call."""
    if name:
        return structlog.get_logger(logger=name)  # type: ignore[no-any-return]
    return structlog.get_logger()  # type: ignore[no-any-return]
