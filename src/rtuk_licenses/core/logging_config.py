"""Structured logging configuration using structlog.

Call ``configure_logging()`` once at process startup in ``main.py``.
All modules can then use either the stdlib logging API or structlog directly:

Stdlib usage::

    import logging
    logger = logging.getLogger(__name__)
    logger.info("pipeline: wrote %d records to %s", count, path)

Structlog usage (richer context binding)::

    import structlog
    logger = structlog.get_logger(__name__)
    logger.info("records_written", path=path, count=count)

Run context is bound with ``structlog.contextvars`` and lands in every
record emitted inside the block, stdlib records included::

    with structlog.contextvars.bound_contextvars(pipeline="satellite"):
        logger.info("pipeline: running %s", "satellite")
"""

from __future__ import annotations

import logging
import sys

import structlog

# Loggers that are chatty at INFO and only useful when debugging transport.
_NOISY_LOGGERS: tuple[str, ...] = ("httpx", "httpcore")


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structlog with JSON output, or console output for DEBUG.

    Outside DEBUG, every record is rendered as one line of JSON.  At DEBUG
    level structlog's ``ConsoleRenderer`` is used for human-readable output.

    Standard fields added to every log record:

    - ``timestamp``: ISO 8601 string.
    - ``level``: Log level name (``"info"``, ``"warning"``, etc.).
    - ``logger``: Module name that emitted the record.
    - ``event``: The log message string.

    Context fields bound by the pipelines while a step runs:

    - ``pipeline``: ``"internet"`` or ``"satellite"``.
    - ``listing``: ``"Radio"`` or ``"TV"`` during a satellite step.

    Calling this function more than once is safe: the root handlers are
    replaced each time.

    Args:
        log_level: Logging verbosity string.  One of ``"DEBUG"``, ``"INFO"``,
            ``"WARNING"``, ``"ERROR"``, ``"CRITICAL"``.  Case-insensitive.
    """
    level_upper = log_level.upper()
    numeric_level = getattr(logging, level_upper, logging.INFO)
    is_development = level_upper == "DEBUG"

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if is_development:
        final_renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer(
            colors=True,
        )
    else:
        final_renderer = structlog.processors.JSONRenderer(ensure_ascii=False)

    # Route ``logging.getLogger(__name__)`` records through structlog.
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            final_renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    if not is_development:
        for noisy_logger in _NOISY_LOGGERS:
            logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    structlog.configure(
        processors=shared_processors
        + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
