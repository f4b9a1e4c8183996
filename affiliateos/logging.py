from logging import INFO, DEBUG, StreamHandler, getLogger

from structlog import configure
from structlog.contextvars import merge_contextvars
from structlog.dev import ConsoleRenderer
from structlog.processors import (
    JSONRenderer,
    StackInfoRenderer,
    TimeStamper,
    add_log_level,
    format_exc_info,
)
from structlog.stdlib import LoggerFactory, ProcessorFormatter, add_logger_name

from affiliateos.settings import Settings

__all__ = ["setup_logging"]


def setup_logging(config: Settings, *args, **kwargs):
    development = config.ENVIRONMENT == "DEV"

    configure(
        processors=[
            merge_contextvars,
            add_log_level,
            add_logger_name,
            StackInfoRenderer(),
            TimeStamper(fmt="iso"),
            ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    if development:
        renderers = [ConsoleRenderer()]
    else:
        renderers = [format_exc_info, JSONRenderer()]
    formatter = ProcessorFormatter(
        processors=[ProcessorFormatter.remove_processors_meta, *renderers],
    )

    handler = StreamHandler()
    handler.setFormatter(formatter)

    root = getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(DEBUG if config.DEBUG else INFO)

    # uvicorn installs its own handlers; route its records through ours.
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        uvicorn_logger = getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
