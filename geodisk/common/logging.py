"""JSON logging with stable schema."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from geodisk.common.constants import JSON_LOG_FIELDS
from geodisk.common.fs import ensure_dir
from geodisk.common.time_utils import utc_timestamp_iso


class JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {"timestamp": utc_timestamp_iso(), "level": record.levelname}
        for field in JSON_LOG_FIELDS:
            if field in ("timestamp", "message"):
                continue
            payload[field] = getattr(record, field, None)
        payload["message"] = record.getMessage()
        return json.dumps(payload, ensure_ascii=False)


def build_logger(run_id: str, level: str = "WARNING", log_path: Path | None = None) -> logging.Logger:
    logger = logging.getLogger(f"geodisk.{run_id}")
    level = level.upper()
    logger.setLevel("WARNING" if level == "WARN" else level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.propagate = False

    stream = logging.StreamHandler()
    stream.setFormatter(JsonLineFormatter())
    logger.addHandler(stream)

    if log_path is not None:
        ensure_dir(log_path.parent)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(JsonLineFormatter())
        logger.addHandler(file_handler)

    return logger


def log_event(logger: logging.Logger, message: str, level: int = logging.INFO, **event_fields: Any) -> None:
    logger.log(level, message, extra=event_fields)
