"""Opt-in structured logging for applications embedding tinydraw."""

from __future__ import annotations

import json
import logging
import logging.handlers
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from .config import LoggingConfig, config_root


_LOGGER_NAME = "tinydraw"


def log_dir(base: Path | None = None) -> Path:
    path = (base or config_root()) / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        if hasattr(record, "event"):
            payload["event"] = getattr(record, "event")
        return json.dumps(payload, ensure_ascii=True)


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it when ``name`` is given."""
    if name:
        return logging.getLogger(f"{_LOGGER_NAME}.{name}")
    return logging.getLogger(_LOGGER_NAME)


def configure_logging(cfg: LoggingConfig | None = None, base_dir: Path | None = None) -> logging.Logger:
    """Attach a rotating JSON-lines file handler (and optionally a console one).

    The library itself never calls this; it is meant for the embedding
    application. Calling it again on an already configured logger is a no-op.
    """
    cfg = cfg or LoggingConfig()
    logger = get_logger()
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, cfg.level, logging.WARNING))
    path = log_dir(base_dir) / "tinydraw.log"
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(path),
        when="midnight",
        backupCount=max(2, cfg.keep_files),
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    if cfg.console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
        logger.addHandler(stream_handler)

    logger.info("logging configured", extra={"event": "logging_configured"})
    return logger
