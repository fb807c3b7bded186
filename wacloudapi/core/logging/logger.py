"""
Rich-based logger with tenant and user context support.

Context is added as message prefixes (``[T:<phone_id>][U:<wa_id>]``) read
from context variables on every call, so a logger created at import time
still reflects the request currently being handled.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from wacloudapi.core.config.settings import settings

from .context import get_current_tenant_context, get_current_user_context


class CompactFormatter(logging.Formatter):
    """Formatter that shortens long ``wacloudapi.*`` logger names."""

    def format(self, record):
        if record.name.startswith("wacloudapi."):
            # wacloudapi.resources.messages -> resources.messages
            parts = record.name.split(".")
            if len(parts) > 2:
                record.name = ".".join(parts[-2:])

        return super().format(record)


_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim white",
    }
)
_console = Console(theme=_theme)


class ContextLogger:
    """Logger wrapper that prefixes messages with tenant and user context."""

    def __init__(
        self,
        logger: logging.Logger,
        tenant_id: str | None = None,
        user_id: str | None = None,
    ):
        self.logger = logger
        self.tenant_id = tenant_id or "---"
        self.user_id = user_id or "---"

    def _format_message(self, message: str) -> str:
        current_tenant = get_current_tenant_context() or self.tenant_id
        current_user = get_current_user_context() or self.user_id

        prefix = ""
        if current_tenant != "---":
            prefix += f"[T:{current_tenant}]"
        if current_user != "---":
            prefix += f"[U:{current_user}]"
        return f"{prefix} {message}" if prefix else message

    def debug(self, message: str, *args, **kwargs) -> None:
        self.logger.debug(self._format_message(message), *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self.logger.info(self._format_message(message), *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self.logger.warning(self._format_message(message), *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self.logger.error(self._format_message(message), *args, **kwargs)

    def critical(self, message: str, *args, **kwargs) -> None:
        self.logger.critical(self._format_message(message), *args, **kwargs)

    def exception(self, message: str, *args, **kwargs) -> None:
        self.logger.exception(self._format_message(message), *args, **kwargs)

    def bind(self, **kwargs) -> ContextLogger:
        """
        Create a new ContextLogger with additional or updated context.

        Returns a new instance; the current logger is left untouched.

        Example:
            logger = get_logger(__name__).bind(tenant_id="106540352242922")
        """
        return ContextLogger(
            self.logger,
            tenant_id=kwargs.get("tenant_id", self.tenant_id),
            user_id=kwargs.get("user_id", self.user_id),
        )


def setup_logging(
    *,
    level: str = "INFO",
    mode: str = "PROD",
    log_dir: str | None = None,
    console_fmt: str | None = None,
    file_fmt: str | None = None,
) -> None:
    """
    Initialize the root logger with Rich formatting.

    Parameters
    ----------
    level : str
        Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
    mode : str
        "DEV" creates daily log files + console; anything else → console only
    log_dir : str, optional
        Directory for log files (DEV mode only)
    console_fmt : str, optional
        Console format string
    file_fmt : str, optional
        File format string
    """
    lvl = level.upper()
    lvl = lvl if lvl in ("DEBUG", "INFO", "WARNING", "ERROR") else "INFO"

    # RichHandler already shows level and time
    console_format = console_fmt or "[%(name)s] %(message)s"
    file_format = file_fmt or "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    rich_handler = RichHandler(
        console=_console,
        rich_tracebacks=True,
        show_time=True,
        show_level=True,
        markup=False,
    )
    rich_handler.setFormatter(CompactFormatter(console_format))

    handlers: list[logging.Handler] = [rich_handler]

    if mode.upper() == "DEV" and log_dir:
        os.makedirs(log_dir, exist_ok=True)
        logfile = os.path.join(log_dir, f"wacloudapi_{datetime.now():%Y%m%d}.log")
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(CompactFormatter(file_format))
        handlers.append(file_handler)

    logging.basicConfig(level=lvl, handlers=handlers, force=True)
    logging.getLogger("wacloudapi.setup").debug(f"Logging initialized ({lvl})")


def setup_sdk_logging() -> None:
    """Initialize logging from the global settings."""
    setup_logging(
        level=settings.log_level,
        mode="DEV" if settings.is_development else "PROD",
        log_dir=settings.log_dir if settings.is_development else None,
    )


def get_logger(name: str) -> ContextLogger:
    """
    Get a logger that automatically uses request context variables.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextLogger instance with automatic context from context variables
    """
    return ContextLogger(
        logging.getLogger(name),
        tenant_id=get_current_tenant_context(),
        user_id=get_current_user_context(),
    )


def mask_token(token: str | None) -> str:
    """Render an access token safe for logs."""
    if not token:
        return "<unset>"
    if len(token) <= 8:
        return "***"
    return f"{token[:4]}...{token[-4:]}"
