import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from chatbot.settings import settings

HANDLER_NAME = "chatbot-json"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger("chatbot")
    logger.setLevel((level or settings.LOG_LEVEL).upper())
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonFormatter())
        handler.set_name(HANDLER_NAME)
        logger.addHandler(handler)
    return logger
