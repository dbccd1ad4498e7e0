"""Logging setup for refdb_merge.

All modules obtain their logger through :func:`get_logger`; the CLI calls
:func:`configure_logging` once before a merge runs. Messages go either to a
log file or to STDERR, leaving STDOUT for the merge summary.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def configure_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    force: bool = False,
) -> None:
    """Install a single handler on the root logger.

    Args:
        level: Logging level as int or name (e.g. ``"DEBUG"``); unknown
            names fall back to INFO
        log_file: Optional path to a log file. If None, logs go to STDERR
        force: Reconfigure even if logging was already configured

    Examples:
        >>> configure_logging(level="DEBUG", log_file="merge.log")
        >>> configure_logging(level="WARNING", force=True)
    """
    global _configured

    if _configured and not force:
        return

    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass ``__name__``)."""
    return logging.getLogger(name)
