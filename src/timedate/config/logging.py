"""structlog setup shared by the CLI and the MCP server.

Everything is written to stderr: stdout carries command results, and
under ``serve`` it is the MCP stdio channel. Stdlib loggers
(``logging.getLogger(__name__)`` in the domain modules) are rendered by
the same processor chain as structlog loggers.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "timedate"

# Libraries that log chattily at DEBUG; capped at WARNING even with --verbose.
NOISY_LOGGERS = ("mcp", "tzlocal", "httpx", "uvicorn")


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging to a single stderr handler.

    Safe to call repeatedly; each call replaces the previous handler.

    Args:
        verbose: Log the ``timedate`` hierarchy at DEBUG instead of WARNING.
        log_json: One JSON object per line instead of the console renderer.
    """
    shared = _shared_processors()

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
