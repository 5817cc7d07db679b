import json
import logging
import logging.config
from logging import LogRecord
from typing import Any

from app.core.config import Settings

NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "httpx", "asyncio")

# Atributos padrão do LogRecord; o resto veio de extra={...}
_RESERVED_ATTRS = set(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime", "taskName"}


def record_extras(record: LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS and not k.startswith("_")}


class TextFormatter(logging.Formatter):
    """Plain line followed by the `extra` context as key=value pairs."""

    def format(self, record: LogRecord) -> str:
        line = super().format(record)
        extras = record_extras(record)
        if not extras:
            return line
        context = " ".join(f"{k}={v!r}" for k, v in sorted(extras.items()))
        head, sep, tail = line.partition("\n")
        return f"{head} | {context}{sep}{tail}"


class JsonFormatter(logging.Formatter):
    """One JSON object per line; extras become top-level keys."""

    def __init__(self, *, env: str | None = None, datefmt: str | None = None):
        super().__init__(datefmt=datefmt)
        self.env = env

    def format(self, record: LogRecord) -> str:
        log_record: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "env": self.env,
        }
        if record.exc_info:
            log_record["exc_info"] = self.formatException(record.exc_info)
        for k, v in record_extras(record).items():
            log_record.setdefault(k, v)
        return json.dumps(log_record, ensure_ascii=False, default=str)


def build_logging_config(settings: Settings) -> dict:
    level = settings.log_level.upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "text": {
                "()": TextFormatter,
                "format": "%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            },
            "json": {
                "()": JsonFormatter,
                "env": settings.environment,
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": settings.log_format,
                "level": level,
            },
        },
        "loggers": {
            "app": {"handlers": ["console"], "level": level, "propagate": False},
            **{name: {"level": "WARNING"} for name in NOISY_LOGGERS},
        },
        "root": {"handlers": ["console"], "level": "WARNING"},
    }


def setup_logging(settings: Settings) -> None:
    logging.config.dictConfig(build_logging_config(settings))
    logging.getLogger(__name__).debug(
        "logging.configured",
        extra={"environment": settings.environment, "level": settings.log_level},
    )
