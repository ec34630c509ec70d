"""structlog setup shared by the API process and its stdlib loggers.

Production emits one JSON object per line; debug mode uses the colored
console renderer. Records from uvicorn, SQLAlchemy and httpx go through the
same ProcessorFormatter, so every line carries the level, logger name,
timestamp and request correlation id.
"""

import logging
import logging.config

import structlog
from asgi_correlation_id.context import correlation_id

# Third-party loggers that are too chatty at INFO
QUIET_LOGGERS = {
    "uvicorn.access": "WARNING",
    "httpx": "WARNING",
    "sqlalchemy.engine": "WARNING",
    "asyncpg": "WARNING",
}


def add_correlation_id(logger, method, event_dict):
    """Copy the X-Request-ID of the current request onto the event."""
    cid = correlation_id.get(None)
    if cid:
        event_dict["correlation_id"] = cid
    return event_dict


def shared_processors() -> list:
    """Processors applied to structlog and stdlib records alike."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        add_correlation_id,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
    ]


def formatter_processors(json_logs: bool) -> list:
    """Final rendering chain for the stdlib ProcessorFormatter.

    JSON output turns ``exc_info`` into a structured ``exception`` field;
    the console renderer prints tracebacks itself.
    """
    if json_logs:
        return [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    return [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
        structlog.dev.ConsoleRenderer(),
    ]


def configure_structlog(log_level: str = "INFO", json_logs: bool = True) -> None:
    """Route structlog and stdlib logging through one formatter.

    Call before importing the rest of the app; loggers cache their
    processor chain on first use.

    Args:
        log_level: Root log level ("DEBUG", "INFO", "WARNING", "ERROR")
        json_logs: JSON lines when True, console output when False
    """
    pre_chain = shared_processors()

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "structured": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processors": formatter_processors(json_logs),
                "foreign_pre_chain": pre_chain,
            },
        },
        "handlers": {
            "stdout": {
                "class": "logging.StreamHandler",
                "formatter": "structured",
                "stream": "ext://sys.stdout",
            },
        },
        "root": {"handlers": ["stdout"], "level": log_level},
        "loggers": {name: {"level": level} for name, level in QUIET_LOGGERS.items()},
    })

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
