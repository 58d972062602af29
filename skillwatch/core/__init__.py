"""
Core infrastructure layer for Skillwatch.

Purpose
-------
Provide a single import surface for the infrastructure the snapshot engine
runs on:

- Configuration management (Config, Environment)
- Logging (structured logging, logger factory, log context)

Non-Responsibilities
--------------------
- Snapshot computation (skillwatch.modules.snapshots)
- Any side effects beyond those of the submodules on import
"""

from .config import Config, Environment
from .logging import (
    LogContext,
    clear_log_context,
    get_log_context,
    get_logger,
    get_logging_health,
    set_log_context,
    setup_logging,
    shutdown_logging,
)

__all__ = [
    "Config",
    "Environment",
    "get_logger",
    "setup_logging",
    "shutdown_logging",
    "get_logging_health",
    "LogContext",
    "set_log_context",
    "get_log_context",
    "clear_log_context",
]
