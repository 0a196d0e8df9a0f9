"""structlog configuration for pkgdoc.

Everything logs to stderr so stdout stays clean for results: colored
console lines for humans, JSON lines with ``--log-json``. Core modules log
through stdlib ``logging.getLogger(__name__)``; a ProcessorFormatter gives
those records the same rendering as structlog events.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Third-party loggers that stay at WARNING even under --verbose.
_QUIET_LOGGERS = ("MARKDOWN",)


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _stderr_handler(*, log_json: bool) -> logging.Handler:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_shared_processors(),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging to a single stderr handler.

    Safe to call repeatedly; the root handler is replaced, not stacked.

    Args:
        verbose: Log ``pkgdoc`` at DEBUG instead of WARNING.
        log_json: Render JSON lines instead of console output.
    """
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(log_json=log_json)]
    root.setLevel(logging.WARNING)

    logging.getLogger("pkgdoc").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
