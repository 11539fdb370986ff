from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from github_content.errors import ConfigError

LOGGER_NAME = "github-content"

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def _build_formatter(fmt: str) -> logging.Formatter:
    if fmt == "json":
        return JsonFormatter()
    if fmt == "text":
        return logging.Formatter(TEXT_FORMAT)
    raise ConfigError(f"unsupported log format {fmt!r}, use json or text")


def configure_logging(
    level: str = "error",
    fmt: str = "json",
    log_file: Optional[Union[str, Path]] = None,
    name: str = LOGGER_NAME,
) -> logging.Logger:
    """
    Return the application logger that:
      - filters at `level` (debug, info, warning, error, critical)
      - renders records as json or text
      - writes to `log_file` with rotation, or to stdout when no file is given

    Calling it again replaces the handlers set up by a previous call.
    """
    numeric = LEVELS.get(level.strip().lower())
    if numeric is None:
        raise ConfigError(f"unsupported log level {level!r}")
    formatter = _build_formatter(fmt.strip().lower())

    if log_file:
        log_path = Path(log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handler: logging.Handler = RotatingFileHandler(
                log_path,
                maxBytes=5 * 1024 * 1024,  # 5 MB per file
                backupCount=3,
                encoding="utf-8",
            )
        except OSError as e:
            raise ConfigError(f"cannot open log file {log_path}: {e}") from e
    else:
        handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    logger = logging.getLogger(name)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    logger.setLevel(numeric)
    logger.addHandler(handler)
    logger.propagate = False
    return logger


__all__ = ["configure_logging", "JsonFormatter", "LEVELS"]
