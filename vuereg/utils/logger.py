import logging
import sys
from typing import Optional

import structlog


def setup_logging(level: str = "info", console: Optional[bool] = None) -> None:
    """Configure structured logging on stderr.

    Events render for humans at debug level or on a terminal, as JSON lines
    otherwise (CI logs). Pass ``console`` to force either.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    if console is None:
        console = level == "debug" or sys.stderr.isatty()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer()
            if console
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(level=log_level, format="%(message)s", stream=sys.stderr)


def bind_run_context(**values) -> None:
    """Attach key/values (e.g. the source root) to every event of this run."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(**values)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named logger."""
    return structlog.get_logger(name)
