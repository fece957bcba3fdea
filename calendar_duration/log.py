"""structlog setup for the calendar-duration demo.

Two output modes:
- Human (default): console lines on stderr
- JSON (--log-json): one JSON object per record on stderr

Library modules never configure logging; they log via
``logging.getLogger(__name__)`` and this module only routes those records.
"""

import logging
import sys

import structlog

LOGGER_NAME = "calendar_duration"


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route package log records to stderr.

    Args:
        verbose: Show DEBUG records (ignored tokens, clamped days).
        log_json: Render JSON lines instead of console text.
    """
    package_level = logging.DEBUG if verbose else logging.WARNING

    # stdlib records pick up level, logger name and timestamp before rendering
    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=pre_chain,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(log_json),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(logging.WARNING)

    logging.getLogger(LOGGER_NAME).setLevel(package_level)
