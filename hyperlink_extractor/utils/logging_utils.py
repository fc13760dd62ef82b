"""
hyperlink_extractor/utils/logging_utils.py
------------------------------------------
Shared loguru logger for the package.

Importing this module (which every engine module does) calls
logger.disable("hyperlink_extractor"), so the package emits nothing even
when the host application already has loguru sinks. To see its output,
either call configure_logging() once at startup (console plus rotating
file sink) or keep your own sinks and call
logger.enable("hyperlink_extractor").
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from hyperlink_extractor.utils.config import CONFIG

_LOGGER_CONFIGURED = False
_NAMESPACE = "hyperlink_extractor"

# Library code stays silent until the host application opts in.
logger.disable(_NAMESPACE)


def configure_logging(log_dir: Optional[str] = None, level: Optional[str] = None) -> None:
    """
    Configure loguru logger to log to both stdout and a file, and enable
    messages emitted from the hyperlink_extractor package.
    Idempotent: safe to call multiple times.
    """
    global _LOGGER_CONFIGURED
    if _LOGGER_CONFIGURED:
        return

    level = (level or CONFIG.LOG_LEVEL).upper()
    log_path = Path(log_dir or CONFIG.LOG_DIR)
    log_path.mkdir(parents=True, exist_ok=True)

    # Remove default handlers (so we don't double-log)
    logger.remove()

    # Console
    logger.add(
        sink=lambda msg: print(msg, end=""),
        level=level,
        backtrace=False,
        diagnose=False,
    )

    # File
    logger.add(
        log_path / "extractor.log",
        rotation="10 MB",
        retention="14 days",
        level=level,
        backtrace=False,
        diagnose=False,
        enqueue=True,
        encoding="utf-8",
    )

    logger.enable(_NAMESPACE)
    _LOGGER_CONFIGURED = True


def reset_logging() -> None:
    """
    Drop configured sinks and silence the package again. Used by tests.
    """
    global _LOGGER_CONFIGURED
    logger.remove()
    logger.disable(_NAMESPACE)
    _LOGGER_CONFIGURED = False


def get_logger():
    """
    Return the shared loguru logger. Call configure_logging() once at
    application startup to see its output.
    """
    return logger
