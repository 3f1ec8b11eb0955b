from __future__ import annotations

import logging
import sys
from typing import Any, Dict

import structlog


def configure_logging(level: str = "WARNING", json: bool = False) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), stream=sys.stderr)
    renderer = structlog.processors.JSONRenderer() if json else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def log_event(logger: structlog.stdlib.BoundLogger, event_type: str, payload: Dict[str, Any]) -> None:
    logger.debug(event_type, **payload)


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    # Backed by a stdlib logger, so nothing below WARNING is emitted until
    # the host calls configure_logging.
    return structlog.wrap_logger(
        logging.getLogger(component),
        wrapper_class=structlog.stdlib.BoundLogger,
        component=component,
    )
