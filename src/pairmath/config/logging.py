"""Log output for applications built on pairmath.

The library itself only emits stdlib records under the `pairmath` logger
namespace (today: capability refusals at debug). Nothing is printed until an
application calls `configure_logging`, which renders those records through
structlog, either as console lines or as JSON lines on stderr.

Usage:
    configure_logging()                 # level from PAIRMATH_LOG_LEVEL
    configure_logging(verbose=True)     # show capability refusals
    configure_logging(log_json=True)    # one JSON object per record
"""

from __future__ import annotations

import logging
import sys

import structlog

from pairmath.config.settings import get_settings

LIBRARY_LOGGER = "pairmath"

# Applied to structlog events and to stdlib records alike.
_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def _library_level(verbose: bool) -> int:
    if verbose:
        return logging.DEBUG
    return logging.getLevelNamesMapping()[get_settings().log_level]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route pairmath's records to stderr.

    Replaces the root handlers with a single stderr handler, so repeated calls
    do not duplicate output. Third-party loggers stay at WARNING; only the
    `pairmath` namespace follows `verbose` or `PairMathSettings.log_level`.

    Args:
        verbose: Lower the pairmath level to DEBUG.
        log_json: Render JSON lines instead of console lines.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger(LIBRARY_LOGGER).setLevel(_library_level(verbose))
