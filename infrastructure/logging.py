import logging
import logging.handlers
import sys

import structlog

from infrastructure.config import settings

SHARED_PROCESSORS = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def _handlers(formatter: logging.Formatter) -> list[logging.Handler]:
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)
    if not settings.log_to_file:
        return [stream_handler]

    settings.log_dir.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.TimedRotatingFileHandler(
        settings.log_dir / f"{settings.app_env}.log",
        when="midnight",
        interval=1,
        backupCount=7,
    )
    file_handler.setFormatter(formatter)
    return [stream_handler, file_handler]


def setup_logging() -> None:
    """Route structlog, uvicorn and standard library logging through one set of handlers.

    Development gets the coloured console renderer, every other environment
    gets one JSON object per line.
    """
    if settings.app_env == "development":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            *SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=SHARED_PROCESSORS,
        processor=renderer,
    )
    handlers = _handlers(formatter)

    root_logger = logging.getLogger()
    # replace rather than append, uvicorn --reload imports the app again
    root_logger.handlers = list(handlers)
    root_logger.setLevel(settings.log_level.upper())

    for logger_name in ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi"):
        logging_logger = logging.getLogger(logger_name)
        logging_logger.handlers = list(handlers)
        logging_logger.propagate = False

    # fsspec backends log every request at DEBUG
    logging.getLogger("fsspec").setLevel(max(root_logger.level, logging.INFO))
