"""Logging configuration using loguru.

The default stderr handler is removed so that importing the package stays
quiet inside host applications. Set THEMESYNTAX_LOG_DIR to also write rotating
log files, kept for 1 week.
"""

import os
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import loguru

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"

# Remove default handler
logger.remove()


class _LoggingState:
    """Internal state tracker for logging configuration."""

    def __init__(self) -> None:
        """Initialize logging state without a file handler."""
        self.file_handler_id: int | None = None


_state = _LoggingState()


def configure_file_logging(log_dir: Path) -> int:
    """Write DEBUG logs to daily rotated files in ``log_dir``.

    Calling this again replaces the previous file handler.

    Args:
        log_dir: Directory that receives the log files.

    Returns:
        The handler ID of the file sink.
    """
    if _state.file_handler_id is not None:
        logger.remove(_state.file_handler_id)

    log_dir = log_dir.expanduser().resolve()
    log_dir.mkdir(parents=True, exist_ok=True)
    _state.file_handler_id = logger.add(
        log_dir / "themesyntax_{time:YYYY-MM-DD}.log",
        level="DEBUG",
        format=LOG_FORMAT,
        rotation="00:00",  # New file at midnight
        retention="1 week",
        compression="gz",
        backtrace=True,
        diagnose=False,
    )
    return _state.file_handler_id


_env_log_dir = os.environ.get("THEMESYNTAX_LOG_DIR")
if _env_log_dir:
    configure_file_logging(Path(_env_log_dir))


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logger.bind(name=name)


def add_sink(sink_func: Callable[[object], None], level: str = "WARNING") -> int:
    """Attach a host application sink to the package logs.

    Args:
        sink_func: A callable that accepts loguru message objects.
        level: Minimum log level for the sink.

    Returns:
        The sink ID that can be used to remove the sink later.
    """
    return logger.add(sink_func, level=level, format="{message}")


def remove_sink(sink_id: int) -> None:
    """Remove a sink added with add_sink.

    Args:
        sink_id: The sink ID returned by add_sink.
    """
    logger.remove(sink_id)


def disable_file_logging() -> None:
    """Remove the file handler added by configure_file_logging, if any."""
    if _state.file_handler_id is not None:
        logger.remove(_state.file_handler_id)
        _state.file_handler_id = None
