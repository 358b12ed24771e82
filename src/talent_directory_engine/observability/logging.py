"""structlog setup for the directory views and the CLI.

Engine events (``candidates_ranked``, ``candidates_filtered``,
``highlights_grouped``) and stdlib records from SQLAlchemy share one
formatter. Each CLI invocation binds a ``request_id`` and the command name,
so every event emitted while serving it can be correlated.
"""

from __future__ import annotations

import logging
import uuid
from typing import TYPE_CHECKING

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

if TYPE_CHECKING:
    from talent_directory_core.config.settings import Settings

# Storage drivers only surface warnings, even in verbose runs.
_QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncpg")


def configure_logging(settings: Settings) -> None:
    """Install the structlog pipeline on the root logger.

    ``settings.log_format`` picks the renderer and ``settings.log_level`` the
    root level. Calling it again replaces the previous handler.
    """
    level = _resolve_level(settings.log_level)
    pre_chain = _shared_processors()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(settings.log_format),
            ],
            foreign_pre_chain=pre_chain,
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def bind_command_context(command: str) -> str:
    """Start a fresh log context for one CLI command and return its request id."""
    request_id = uuid.uuid4().hex[:12]
    clear_contextvars()
    bind_contextvars(request_id=request_id, command=command)
    return request_id


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _resolve_level(level_name: str) -> int:
    """Map a level name to its logging constant; unknown names mean INFO."""
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO
