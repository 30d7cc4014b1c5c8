"""Structured logging utilities."""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_CORRELATION_ID: ContextVar[str] = ContextVar("correlation_id", default="-")

_logger.configure(extra={"correlation_id": "-"})


class _InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)
        _logger.opt(depth=6, exception=record.exc_info).bind(
            correlation_id=_CORRELATION_ID.get()
        ).log(level, record.getMessage())


class ContextualLogger:
    """Proxy for loguru that injects correlation ids via ContextVar."""

    def __getattr__(self, name):  # pragma: no cover
        bound = _logger.bind(correlation_id=_CORRELATION_ID.get())
        return getattr(bound, name)


def set_correlation_id(value: str | None) -> None:
    _CORRELATION_ID.set(value or "-")


def get_correlation_id() -> str:
    return _CORRELATION_ID.get()


def clear_correlation_id() -> None:
    _CORRELATION_ID.set("-")


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()

    _logger.remove()
    _logger.add(
        sys.stderr,
        level=level,
        format=_FMT,
        colorize=True,
        backtrace=False,
        diagnose=False,
        filter=sanitize_record,
    )
    if log_file:
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        _logger.add(
            log_file,
            level=level,
            format=_FMT,
            colorize=False,
            backtrace=False,
            diagnose=False,
            enqueue=True,
            encoding="utf-8",
            filter=sanitize_record,
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    logging.getLogger("werkzeug").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


logger = ContextualLogger()

__all__ = [
    "logger",
    "setup_logging",
    "set_correlation_id",
    "clear_correlation_id",
    "get_correlation_id",
]
