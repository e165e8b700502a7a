from __future__ import annotations

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from ..model import Applied, ReflowResult


LOG_LEVEL_ENV = "COMMENTWRAP_LOG_LEVEL"


def setup_logger(level: Optional[str] = None) -> logging.Logger:
    level_name = (level or os.getenv(LOG_LEVEL_ENV, "INFO")).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)
    console = Console(stderr=True, highlight=False)
    # Comment text often holds "[...]"; never read it as rich markup.
    handler = RichHandler(
        console=console, show_time=False, show_path=False, markup=False, rich_tracebacks=True
    )
    fmt = "%(message)s"
    logging.basicConfig(level=numeric_level, format=fmt, handlers=[handler], force=True)
    logger = logging.getLogger("commentwrap")
    logger.setLevel(numeric_level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    return logging.getLogger(name or "commentwrap")


def log_result(logger: logging.Logger, result: ReflowResult) -> None:
    span = f"lines {result.line_range.location + 1}-{result.line_range.end}"
    if isinstance(result, Applied):
        logger.debug(f"Reflowed {span}: {len(result.original)} -> {len(result.lines)} lines")
    else:
        logger.debug(f"Skipped {span}: {result.reason.value}")
