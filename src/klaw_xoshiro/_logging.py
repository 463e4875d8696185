"""Structured logging for klaw-xoshiro.

Engines log only on their slow, rare paths (forced all-zero states, rejected
seed sequences and state text, stream derivation). `next()` and `discard()`
never log.

Loggers wrap stdlib loggers under the `klaw_xoshiro` namespace, which carries a
`NullHandler`. An application that never configures logging sees nothing.
`configure_logging` attaches a structlog `ProcessorFormatter` handler to that
namespace only, so the host application's own handlers are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'configure_logging',
    'get_logger',
]

_PACKAGE = 'klaw_xoshiro'

logging.getLogger(_PACKAGE).addHandler(logging.NullHandler())

_handler: logging.Handler | None = None


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def _get_renderer(json_output: bool = True) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> None:
    """Route klaw-xoshiro events to stderr at the given level.

    Calling again replaces the handler installed by the previous call.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use colored console output.
    """
    global _handler  # noqa: PLW0603

    structlog.configure(
        processors=[
            *_get_shared_processors(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_get_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _get_renderer(json_output),
        ],
    )

    package_logger = logging.getLogger(_PACKAGE)
    if _handler is not None:
        package_logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(formatter)
    package_logger.addHandler(_handler)
    package_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    package_logger.propagate = False


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger backed by the stdlib logger `name`.

    Events go through stdlib level filtering and handlers, so nothing is
    written unless the application or `configure_logging` sets that up.
    """
    return structlog.wrap_logger(
        logging.getLogger(name or _PACKAGE),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
