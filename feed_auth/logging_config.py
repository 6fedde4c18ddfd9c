r"""
Logging configuration module for feed-auth.

Provides a clean, configurable logging setup using colorlog library with
structured error logging.
"""

import logging
import os
import re
import sys
from typing import Any

import colorlog

_CODE_PARAM_RE = re.compile(r"(code=)[^&\s]+")


class RefreshTokenFilter(logging.Filter):
    """Filter that masks refresh tokens carried in ``code=`` query parameters."""

    def filter(self, record):
        """Rewrite the record message with the ``code`` value masked."""
        message = record.getMessage()
        masked = _CODE_PARAM_RE.sub(r"\1***", message)
        if masked != message:
            record.msg = masked
            record.args = None
        return True


def log_structured_error(
    error_type: str,
    message: str,
    exception: Exception = None,
    context: dict[str, Any] = None,
    level: int = logging.ERROR,
) -> None:
    """Log an error with structured context.

    Args:
        error_type: Category of the error (e.g., 'network', 'auth', 'config')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)
    """
    structured_message = f"[{error_type.upper()}] {message}"

    if exception:
        structured_message += f" | Exception: {type(exception).__name__}: {str(exception)}"

    if context:
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    logging.log(level, structured_message)


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog.

    Supports environment variable configuration for log levels.
    """

    def __init__(self, config=None):
        """Initialize the configurator.

        Args:
            config: Optional config dict for future extensibility.
        """
        self.config = config or {}

    def configure(self):
        """Configure logging with colored output using colorlog.

        Uses environment variables:
        - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO
        """
        debug_env = os.environ.get("DEBUG", "").lower()
        log_level = logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

        formatter = colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

        # Logs go to stderr; stdout carries the access token for piping.
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)

        logging.basicConfig(
            level=log_level,
            handlers=[handler],
            format="%(message)s",
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)

        # aiohttp logs request URLs at DEBUG
        logging.getLogger("aiohttp").setLevel(logging.INFO)

        for h in root_logger.handlers:
            h.setFormatter(formatter)
            if not any(isinstance(f, RefreshTokenFilter) for f in h.filters):
                h.addFilter(RefreshTokenFilter())
