"""
Logging Module

Log configuration and maintenance:
- application log setup (console + rotating file)
- secret redaction for provider credentials
- cleanup of old log files
"""

from __future__ import annotations

import logging
import re
import sys
from datetime import datetime, timedelta
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from logging import Logger

REDACTED = "[REDACTED]"

# Credential-shaped values that must never reach a log sink
SECRET_PATTERNS = [
    # Browserbase API keys
    (re.compile(r"\bbb_(?:live|test)_[A-Za-z0-9_\-]+"), REDACTED),
    # OpenAI style keys
    (re.compile(r"\bsk-[A-Za-z0-9_\-]{16,}"), REDACTED),
    # Header echoes such as "X-BB-API-Key: ..." or "x-api-key=..."
    (re.compile(r"(?i)(x-(?:bb-)?api-key[\"']?\s*[:=]\s*[\"']?)[^\s\"',}]+"), r"\1" + REDACTED),
    # Bearer tokens
    (re.compile(r"(?i)(bearer\s+)[A-Za-z0-9._\-]+"), r"\1" + REDACTED),
]


class SecretFilter(logging.Filter):
    """Redacts credentials from log messages and their arguments."""

    def __init__(self, name: str = "", enabled: bool = True, extra_secrets: list[str] | None = None):
        super().__init__(name)
        self.enabled = enabled
        self.extra_secrets = [s for s in (extra_secrets or []) if s]

    def filter(self, record: logging.LogRecord) -> bool:
        if self.enabled and record.msg:
            record.msg = self.redact(str(record.msg))
            if record.args:
                record.args = tuple(
                    self.redact(arg) if isinstance(arg, str) else arg
                    for arg in record.args
                )
        return True

    def redact(self, text: str) -> str:
        for secret in self.extra_secrets:
            text = text.replace(secret, REDACTED)
        for pattern, replacement in SECRET_PATTERNS:
            text = pattern.sub(replacement, text)
        return text


def setup_logging(
    *,
    log_dir: Path | None = None,
    level: int | str = logging.INFO,
    log_to_console: bool = True,
    log_to_file: bool = True,
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    redact_secrets: bool = True,
    extra_secrets: list[str] | None = None,
    app_name: str = "operator",
) -> Logger:
    """
    Configure the root logger.

    Args:
        log_dir: Directory for the log file (no file output when None)
        level: Log level
        log_to_console: Enable console output
        log_to_file: Enable file output
        max_bytes: Maximum size of a log file before rotation
        backup_count: Number of rotated files to keep
        redact_secrets: Attach a SecretFilter to every handler
        extra_secrets: Literal secret values to redact in addition to the patterns
        app_name: Application name (used for the log file name)

    Returns:
        The configured root logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handlers: list[logging.Handler] = []

    if log_to_console:
        handlers.append(logging.StreamHandler(sys.stdout))

    if log_to_file and log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_dir / f"{app_name}.log",
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        )

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        if redact_secrets:
            handler.addFilter(SecretFilter(enabled=True, extra_secrets=extra_secrets))
        root_logger.addHandler(handler)

    return root_logger


def get_logger(name: str) -> Logger:
    return logging.getLogger(name)


def cleanup_old_logs(
    log_dir: Path,
    max_age_days: int = 7,
    patterns: list[str] | None = None,
) -> int:
    """
    Delete log files older than ``max_age_days``.

    Args:
        log_dir: Directory holding the log files
        max_age_days: Age after which a file is deleted
        patterns: Glob patterns to match (default: ["*.log", "*.log.*"])

    Returns:
        Number of deleted files
    """
    logger = get_logger(__name__)

    if patterns is None:
        patterns = ["*.log", "*.log.*"]

    if not log_dir.exists():
        logger.debug("Log directory does not exist: %s", log_dir)
        return 0

    cutoff = datetime.now() - timedelta(days=max_age_days)
    deleted_count = 0
    seen: set[Path] = set()

    for pattern in patterns:
        for log_file in log_dir.glob(pattern):
            if log_file in seen or not log_file.is_file():
                continue
            seen.add(log_file)

            mtime = datetime.fromtimestamp(log_file.stat().st_mtime)
            if mtime < cutoff:
                try:
                    log_file.unlink()
                    deleted_count += 1
                    logger.info(
                        "Deleted old log file: %s (age: %s days)",
                        log_file.name,
                        (datetime.now() - mtime).days,
                    )
                except OSError as e:
                    logger.warning("Failed to delete log file %s: %s", log_file, e)

    if deleted_count > 0:
        logger.info("Cleaned up %d old log files from %s", deleted_count, log_dir)

    return deleted_count
