import logging
from logging.config import dictConfig
from os import getenv
from typing import Optional

from pydantic import BaseModel, model_validator

LOGGER_NAME = getenv("LOG_NAME", "dhl-tracking")


class LogConfig(BaseModel):

    LOGGER_NAME: str = LOGGER_NAME
    LOG_FORMAT: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    LOG_LEVEL: str = getenv("LOG_LEVEL", "INFO").upper()
    LOG_PATH: Optional[str] = getenv("LOG_PATH")

    version: int = 1
    disable_existing_loggers: bool = False
    formatters: dict = {
        "default": {
            "()": "logging.Formatter",
            "fmt": LOG_FORMAT,
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    }
    handlers: dict = {
        "default": {
            "formatter": "default",
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stderr",
        },
    }
    loggers: dict = {}

    @model_validator(mode="after")
    def wire_handlers(self):
        names = ["default"]
        # Only log to a file when a directory was asked for
        if self.LOG_PATH:
            self.handlers["file"] = {
                "formatter": "default",
                "class": "logging.handlers.TimedRotatingFileHandler",
                "filename": f"{self.LOG_PATH}/{self.LOGGER_NAME}.log",
                "when": "midnight",
                "interval": 1,
                "backupCount": 14,
            }
            names.append("file")

        self.loggers = {
            self.LOGGER_NAME: {"handlers": names, "level": self.LOG_LEVEL},
        }
        return self


def get_logger(name: str = None) -> logging.Logger:
    """Logger under the package namespace, e.g. ``dhl-tracking.extractor``."""
    if name is None:
        return logging.getLogger(LOGGER_NAME)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(config: LogConfig = None) -> logging.Logger:
    if config is None:
        config = LogConfig()
    dictConfig(config.model_dump())
    return logging.getLogger(config.LOGGER_NAME)
