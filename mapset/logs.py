"""
structlog setup for applications embedding mapset.

The package never configures logging on import. Modules only call
structlog.get_logger(); call configure_logging() once from your entry point
to get level filtering and rendering.
"""
import logging

import structlog

from .config import config as default_config


def configure_logging(config=None):
    config = config or default_config
    level = getattr(logging, config.log_level, logging.WARNING)

    logging.basicConfig(format="%(message)s", level=level)

    if config.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )
    return level
