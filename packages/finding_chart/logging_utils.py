from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from datetime import UTC, datetime

# Request-scoped fields passed through `extra=` by the pipeline.
CONTEXT_KEYS = ("request_id", "event", "target", "command")

# Chatty at INFO/DEBUG; one line per outbound request is not useful here.
_QUIET_LOGGERS = ("urllib3", "astropy")


class JsonFormatter(logging.Formatter):
    def __init__(self, context_keys: Iterable[str] = CONTEXT_KEYS) -> None:
        super().__init__()
        self.context_keys = tuple(context_keys)

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(timespec="seconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in self.context_keys:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.handlers.clear()
    root.addHandler(handler)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
