# lexilabel\shared\logging_config.py
import sys
import logging
import structlog
from lexilabel.shared.config import settings

def configure_logging():
    """
    Configures structlog and the standard logging library to emit
    structured JSON logs (Production) or colored text logs (Development).

    The library itself only calls `structlog.get_logger()`; applications call
    this once at startup to choose the output.
    """

    # 1. Define the chain of processors (Middleware for logs)
    processors = [
        structlog.contextvars.merge_contextvars, # Merge per-request context (locale, tenant)
        structlog.processors.add_log_level,      # Add "level": "info"
        structlog.processors.TimeStamper(fmt="iso"), # Add "timestamp": "2023-..."
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    # 2. Determine the Output Format
    if settings.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    # 3. Configure Structlog
    level = logging.getLevelName(settings.LOG_LEVEL.upper())
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level if isinstance(level, int) else logging.INFO),
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # 4. Standard library logging shares the same level and stream
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=settings.LOG_LEVEL.upper(),
    )
