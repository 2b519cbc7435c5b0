# autoscaler/config/logging.py

import json
import logging
from datetime import datetime, timezone

from autoscaler.config.settings import get_settings
from autoscaler.core.context import reconcile_key_ctx


class JsonFormatter(logging.Formatter):
    def format(self, record):
        log_record = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "reconcile_key": getattr(record, "reconcile_key", None) or reconcile_key_ctx.get(),
        }
        return json.dumps(log_record)


def configure_logging(log_level: str | None = None):
    """Install the JSON handler on the root logger. Level defaults to LOG_LEVEL from settings."""
    if log_level is None:
        log_level = get_settings().log_level
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(handler)
