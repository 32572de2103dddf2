# src/scor/logger.py
import json
import logging
import sys
from typing import IO, Optional, Union

from .config_loader import Config

# Attributes every LogRecord carries; anything else came in via `extra=`.
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}

LOGGER_NAME = "scor"


class JsonFormatter(logging.Formatter):
    def format(self, record):
        payload = {
            "timestamp": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "message": record.getMessage(),
            "module": record.module,
            "funcName": record.funcName,
            "lineno": record.lineno,
        }
        # Fields passed via logger.debug(..., extra={"score": "stars"})
        for key, value in vars(record).items():
            if key not in _RESERVED and key not in payload:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    level: Optional[Union[int, str]] = None,
    json_output: Optional[bool] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Attach a single stream handler to the ``scor`` logger.

    ``level`` and ``json_output`` default to the values of the active
    configuration (``log_level`` / ``json_logs``).  Calling this again
    replaces the handler instead of adding a second one.
    """
    if level is None or json_output is None:
        cfg = Config.instance()
        level = cfg.log_level if level is None else level
        json_output = cfg.json_logs if json_output is None else json_output

    handler = logging.StreamHandler(stream or sys.stdout)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(handler)
    logger.propagate = False
    return logger
