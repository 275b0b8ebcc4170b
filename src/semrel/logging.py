"""Structured logging for semrel.

semrel logs through `structlog <https://www.structlog.org/>`_ bridged onto
the standard library, so records from semrel and from the embedding
application share one stderr handler. Two renderings are available:

- console (default): key/value lines, colored when stderr is a TTY
- JSON: one object per line, for CI logs and log shippers

Library modules only call :func:`get_logger`. Nothing is printed until the
application calls :func:`configure_logging`::

    from semrel.logging import configure_logging, get_logger

    configure_logging(verbose=True)
    log = get_logger(__name__)
    log.info("release level decided", release_level="minor", commits=12)

Event keys are passed as keyword arguments. ``level`` is reserved for the
log level, so release levels are logged as ``release_level``.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Processors applied to structlog events and to plain stdlib records alike
_PRE_CHAIN: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
]


def _log_level(*, verbose: bool, quiet: bool) -> int:
    if quiet:
        return logging.WARNING
    return logging.DEBUG if verbose else logging.INFO


def _renderer(*, json_log: bool) -> structlog.types.Processor:
    if json_log:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
) -> None:
    """Route semrel's events to stderr.

    Calling it again replaces the previous configuration.

    Args:
        verbose: Include debug events, such as the level of every commit
        quiet: Only warnings and errors; wins over ``verbose``
        json_log: Render JSON lines instead of console output
    """
    final_processors: list[structlog.types.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if json_log:
        final_processors.append(structlog.processors.format_exc_info)
    final_processors.append(_renderer(json_log=json_log))

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_PRE_CHAIN,
            processors=final_processors,
        )
    )
    logging.basicConfig(
        handlers=[handler],
        level=_log_level(verbose=verbose, quiet=quiet),
        force=True,
    )

    structlog.configure(
        processors=[
            *_PRE_CHAIN,
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = "semrel") -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named after the calling module."""
    return structlog.get_logger(name)


__all__ = [
    "configure_logging",
    "get_logger",
]
