import logging
import structlog
from .config import settings


def configure_logging(level: str | None = None) -> None:
    level = (level or settings.log_level).upper()
    logging.basicConfig(level=level, format="%(message)s")
    renderer = (
        structlog.dev.ConsoleRenderer()
        if settings.log_format == "console"
        else structlog.processors.JSONRenderer()
    )
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
    )


logger = structlog.get_logger()
