"""Observability: structured logging."""

from talent_directory_engine.observability.logging import (
    bind_command_context,
    configure_logging,
)

__all__ = [
    "bind_command_context",
    "configure_logging",
]
