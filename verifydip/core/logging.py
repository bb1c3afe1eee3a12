import logging
import sys

from pythonjsonlogger import jsonlogger

from verifydip.core.config import Settings

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def _level(name: str) -> int:
    return getattr(logging, name.upper(), logging.INFO)


def configure_logging(settings: Settings) -> None:
    """
    JSON lines on stdout, stamped with service name and environment.

    verifydip loggers follow LOG_LEVEL. SQLAlchemy echoes statements only when
    LOG_SQL is on; the multipart parser is held at WARNING.
    """
    level = _level(settings.log_level)

    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    root.handlers = []

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        jsonlogger.JsonFormatter(
            _LOG_FORMAT,
            rename_fields={"levelname": "level", "name": "logger"},
            static_fields={"service": settings.app_name, "environment": settings.environment},
        )
    )
    root.addHandler(handler)

    logging.getLogger("verifydip").setLevel(level)
    for name in ("uvicorn.access", "uvicorn.error"):
        logging.getLogger(name).setLevel(level)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO if settings.log_sql else logging.WARNING)
    logging.getLogger("multipart").setLevel(logging.WARNING)
    logging.getLogger("python_multipart").setLevel(logging.WARNING)
