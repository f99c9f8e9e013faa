"""Structured logging setup for the utf8text command line."""
from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Emit JSON lines with ``level``, ``ts``, ``msg`` and ``component`` keys.

    ``level`` is a standard level name, already checked by
    :class:`~utf8text.config.LoggingConfig`. Records go to stderr because some
    commands write raw bytes to stdout.
    """

    numeric_level = logging.getLevelName(level.upper())
    logging.basicConfig(level=numeric_level, stream=sys.stderr, format="%(message)s", force=True)

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso", key="ts"),
            structlog.stdlib.add_log_level,
            _add_component,
            structlog.processors.EventRenamer("msg"),
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def _add_component(logger: logging.Logger, _name: str, event_dict: dict[str, object]) -> dict[str, object]:
    event_dict.setdefault("component", getattr(logger, "name", None) or "utf8text")
    return event_dict


__all__ = ["configure_logging"]
