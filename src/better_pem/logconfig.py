"""
Logging setup — print better_pem's structlog events for scripts and tools.

better_pem only emits events (structlog.get_logger() per module, dotted
event names such as "demux.block_skipped"); it never configures logging on
import. Every parse_pems call binds `input_type` into structlog's
contextvars, so the events of one call can be told apart.

Applications with their own structlog setup keep it (and should include
structlog.contextvars.merge_contextvars to see `input_type`). Others call
configure_structlog(), which takes its level from ParserSettings.log_level
(BETTER_PEM_LOG_LEVEL).
"""

from __future__ import annotations

import logging

import structlog

from better_pem.config import ParserSettings


def configure_structlog(settings: ParserSettings | None = None) -> None:
    """Configure structlog console output at `settings.log_level` (default: from the environment)."""
    log_level = (settings or ParserSettings()).log_level
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping()[log_level]
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
