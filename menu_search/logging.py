"""loguru configuration and bound loggers for menu search."""

from __future__ import annotations

import os
import sys
import time
import uuid
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from loguru import Logger, Message

from loguru import logger

DEFAULT_LOG_DIR = Path(
    os.environ.get(
        "MENU_SEARCH_LOG_DIR",
        Path.home() / ".local" / "state" / "menu-search" / "logs",
    )
)

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[source]: <10}</cyan> | "
    "{message}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[source]: <10} | {extra[job_id]} | {message}"


def _should_log_query(record) -> bool:
    """Per-query search logs only pass at TRACE; hosts search on every keystroke."""
    if "query" in record["extra"].get("tags", []):
        return record["level"].no <= logger.level("TRACE").no
    return True


def setup_logging(
    *,
    debug: bool = False,
    trace: bool = False,
    log_dir: Path | None = None,
    extra_sink: Callable[[Message], None] | None = None,
) -> Logger:
    """
    Route menu search logs to stderr, a rotating file and an optional host sink.

    Args:
        debug: Enable DEBUG level logging
        trace: Enable TRACE level logging, including per-query search logs
        log_dir: Directory for ``menu-search.log`` (defaults to MENU_SEARCH_LOG_DIR)
        extra_sink: Host-provided sink, e.g. an in-app log panel
    """
    level = "TRACE" if trace else "DEBUG" if debug else "INFO"

    logger.remove()
    logger.configure(extra={"job_id": "-", "tags": [], "source": "APP"})
    logger.add(sys.stderr, level=level, filter=_should_log_query, colorize=True, format=CONSOLE_FORMAT)

    log_dir = log_dir or DEFAULT_LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_dir / "menu-search.log",
        level=level,
        rotation="5 MB",
        retention="7 days",
        enqueue=True,
        format=FILE_FORMAT,
    )

    if extra_sink is not None:
        logger.add(extra_sink, level=level, enqueue=True, filter=_should_log_query)

    return logger


@contextmanager
def operation_context(operation: str, **details):
    """
    Time an operation, logging its start, completion or failure.

    Example:
        with operation_context("index", strategy="searchStrategy.mainMenu") as log:
            log.debug("Walking menu forest")
    """
    job_id = f"{operation}-{uuid.uuid4().hex[:8]}"
    log = logger.bind(source=operation, job_id=job_id, tags=[operation], **details)
    title = operation.capitalize()
    start_time = time.monotonic()

    log.info(f"{title} started")
    try:
        yield log
    except Exception as error:
        log.error(
            f"{title} failed",
            error=str(error),
            error_type=type(error).__name__,
            duration_seconds=round(time.monotonic() - start_time, 3),
        )
        raise
    log.success(f"{title} completed", duration_seconds=round(time.monotonic() - start_time, 3))


class LoggerFactory:
    """Loggers pre-bound with the source and tags of a menu search component."""

    @staticmethod
    def for_indexer() -> Logger:
        return logger.bind(source="indexer", tags=["index", "menu"])

    @staticmethod
    def for_search() -> Logger:
        return logger.bind(source="search", tags=["search", "query"])

    @staticmethod
    def for_system() -> Logger:
        return logger.bind(source="system", tags=["system"])
