"""
FFM — Structured logging configuration.

Library loggers write through the standard ``logging`` module, so nothing is
emitted until the host enables it.  Hosts that want FFM's structured output
call ``configure_logging()`` once at start-up; it installs a stdout handler
on the root logger that renders both structlog and stdlib records with the
structlog processor chain.
"""

from __future__ import annotations

import logging
import sys

import structlog

from ffm.config import Settings, get_settings

HANDLER_NAME = "ffm"


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog and the root logger for FFM.

    JSON output by default; ``LOG_JSON=false`` switches to the console
    renderer for local development.  Records below ``LOG_LEVEL`` are dropped.
    Calling this again replaces the previously installed handler.
    """
    settings = settings or get_settings()

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_JSON
        else structlog.dev.ConsoleRenderer()
    )
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=[structlog.stdlib.ExtraAdder(), *shared_processors],
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    root = logging.getLogger()
    for existing in list(root.handlers):
        if existing.get_name() == HANDLER_NAME:
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(settings.log_level_number)
