# /sanctuary/utils/logging.py

import logging
import sys
from typing import Optional

import structlog
from sanctuary.config.settings import settings

# Structured logging shared by the scripts and by any host application that
# embeds the guidance and grouping engines. Modules keep using
# logging.getLogger(__name__); records are rendered by structlog.

def setup_logging(level: Optional[str] = None, json_logs: Optional[bool] = None):
    """
    Configures structlog on top of the standard logging module.

    Args:
        level: Root log level; defaults to settings.log_level
        json_logs: Force JSON (True) or console (False) rendering; by default
            console rendering is used only in the development environment
    """
    shared_processors = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if json_logs is None:
        json_logs = settings.environment != "development"

    if json_logs:
        final_processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=final_processor,
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel((level or settings.log_level).upper())
