import logging
from typing import Any

import structlog

from app.config import settings


def configure_logging(log_level: str | None = None, log_json: bool | None = None) -> None:
    log_level_name = (log_level or settings.log_level).upper()
    level = getattr(logging, log_level_name, logging.INFO)
    render_json = settings.log_json if log_json is None else log_json
    logging.basicConfig(format="%(message)s", level=level)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    renderer = structlog.processors.JSONRenderer() if render_json else structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[structlog.stdlib.filter_by_level, *shared_processors, renderer],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    return structlog.get_logger(name)
