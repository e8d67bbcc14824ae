"""Structured logging helper shared by the arXiv client modules."""

from __future__ import annotations

import logging
from typing import Any


def structured_log(
    logger: logging.Logger,
    level: str,
    event: str,
    /,
    **fields: Any,
) -> None:
    """Emit a structured log entry.

    The event name is passed as the log message and the keyword fields travel
    in ``extra``. ``JsonLogFormatter`` reads the event back from
    ``record.getMessage()``, so it is not duplicated as a field.

    Usage:
        structured_log(logger, "debug", "arxiv.request_sent", method="GET", uri="/api/query")
    """
    log_method = getattr(logger, level.lower())
    log_method(event, extra=fields)
