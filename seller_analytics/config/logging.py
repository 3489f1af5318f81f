"""
Logging Configuration for Seller Performance Analytics

structlog on top of the stdlib root logger. The report itself is written
to stdout, so log records go to stderr and, optionally, to a file.
"""

import logging
import sys
from typing import List, Optional

import structlog
from structlog.processors import JSONRenderer, TimeStamper
from structlog.stdlib import add_log_level, ProcessorFormatter

from seller_analytics.config.settings import get_settings


def _shared_processors() -> list:
    """Processors applied to both structlog and foreign stdlib records"""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        add_log_level,
        TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _build_handlers(level: int, formatter: logging.Formatter, log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
    return handlers


def configure_logging(log_level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """
    Route structlog output through the root logger.

    Args:
        log_level: Overrides LOG_LEVEL (DEBUG, INFO, WARNING, ERROR)
        log_format: Overrides LOG_FORMAT; "json" or anything else for
            colored console output
    """
    monitoring = get_settings().monitoring
    level_name = (log_level or monitoring.log_level).upper()
    fmt = log_format or monitoring.log_format
    level = getattr(logging, level_name, logging.INFO)

    processors = _shared_processors()
    structlog.configure(
        processors=processors + [ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer = JSONRenderer() if fmt == "json" else structlog.dev.ConsoleRenderer(colors=True)
    formatter = ProcessorFormatter(processor=renderer, foreign_pre_chain=processors)

    root = logging.getLogger()
    root.handlers = _build_handlers(level, formatter, monitoring.log_file)
    root.setLevel(level)

    structlog.get_logger(__name__).debug("Logging configured", level=level_name, format=fmt)
