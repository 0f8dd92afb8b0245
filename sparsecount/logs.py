"""
Logging setup. The library only emits events through structlog; the
embedding application decides where they go by calling configure_logging().
"""
import logging
from typing import Optional

import structlog

from .config import Config, config

# library loggers stay silent until configure_logging() or the host app adds handlers
logging.getLogger("sparsecount").addHandler(logging.NullHandler())


def configure_logging(cfg: Optional[Config] = None):
    cfg = cfg or config
    level = getattr(logging, cfg.log_level, logging.INFO)

    logging.basicConfig(format="%(message)s", level=level)

    if cfg.log_format == "json":
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
