# autoscaler/core/context.py

import contextvars
import logging
from contextlib import contextmanager
from typing import Iterator

reconcile_key_ctx = contextvars.ContextVar("reconcile_key", default=None)
logger_ctx: contextvars.ContextVar[logging.Logger | logging.LoggerAdapter | None] = contextvars.ContextVar(
    "logger", default=None
)

_fallback_logger = logging.getLogger("autoscaler")


def logger_from_context() -> logging.Logger | logging.LoggerAdapter:
    """Logger scoped to the current reconciliation, or the package logger outside one."""
    logger = logger_ctx.get()
    if logger is None:
        return _fallback_logger
    return logger


@contextmanager
def reconcile_scope(key: str, logger: logging.Logger | None = None) -> Iterator[logging.LoggerAdapter]:
    """Bind the reconcile key and a key-scoped logger for the duration of the block."""
    base = logger or _fallback_logger
    adapter = logging.LoggerAdapter(base, {"reconcile_key": key})
    key_token = reconcile_key_ctx.set(key)
    logger_token = logger_ctx.set(adapter)
    try:
        yield adapter
    finally:
        logger_ctx.reset(logger_token)
        reconcile_key_ctx.reset(key_token)
