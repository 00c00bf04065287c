# Area: Shared
"""
Shared utilities used by the dictionary, the game engine and the registries.

This package contains:
- Logging configuration
- The reader/writer lock guarding the registries
"""

from .logging_config import setup_logging, log_engine_error, TerminalFormatter, JSONFormatter
from .rwlock import RWLock

__all__ = [
    "setup_logging",
    "log_engine_error",
    "TerminalFormatter",
    "JSONFormatter",
    "RWLock",
]
