# System Module - Infrastructure foundations

"""
System module

Infrastructure foundations:
- logging: log setup and secret redaction
- session: browser session lifecycle
"""

from .logging import cleanup_old_logs, get_logger, setup_logging
from .session import SessionManager

__all__ = [
    "setup_logging",
    "get_logger",
    "cleanup_old_logs",
    "SessionManager",
]
