"""Centralized logging configuration.

Every handler installed here carries a SecretRedactingFilter, so provider API
keys that end up in a message (for instance inside an upstream error string)
are masked before they reach a console or a log file.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.config import Settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Anthropic (sk-ant-...), OpenRouter (sk-or-...) and OpenBao service tokens (s./hvs.)
SECRET_PATTERNS = [
    re.compile(r"sk-(?:ant|or)-[A-Za-z0-9_\-]{8,}"),
    re.compile(r"\b(?:hvs|s)\.[A-Za-z0-9]{16,}"),
]
REDACTED = "[REDACTED]"


class SecretRedactingFilter(logging.Filter):
    """Mask anything that looks like a credential in log records."""

    def __init__(self, patterns: list[re.Pattern[str]] | None = None):
        super().__init__()
        self._patterns = patterns if patterns is not None else SECRET_PATTERNS

    def redact(self, text: str) -> str:
        for pattern in self._patterns:
            text = pattern.sub(REDACTED, text)
        return text

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = self.redact(message)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


def setup_logging(
    name: str = "console_core",
    level: str | None = None,
    log_file: Path | None = None,
) -> logging.Logger:
    """Configure root logging with consistent format and secret redaction.

    Args:
        name: Logger name to return
        level: Log level (defaults to LOG_LEVEL env var or INFO)
        log_file: Optional file path for logging output

    Returns:
        Configured logger instance
    """
    level = level or os.getenv("LOG_LEVEL", "INFO")

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    redactor = SecretRedactingFilter()
    for handler in handlers:
        handler.addFilter(redactor)

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    return logging.getLogger(name)


def setup_logging_from_settings(settings: Settings, component: str = "console") -> logging.Logger:
    """Configure logging from Settings, writing to the component's daily log file."""
    return setup_logging(
        name=f"console_core.{component}",
        level=settings.log_level,
        log_file=settings.get_log_file(component),
    )
