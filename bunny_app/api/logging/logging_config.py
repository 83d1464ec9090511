"""
bunny_app.api.logging.logging_config

Purpose:
    Central logging configuration for the web service.
    Ensures request_id is present in logs (including uvicorn.access and uvicorn.error).

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from bunny_app.api.logging.request_id_filter import RequestIdFilter

LOG_FORMAT = "%(asctime)s | %(levelname)s | request_id=%(request_id)s | %(name)s | %(message)s"

_UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    handler.addFilter(RequestIdFilter())
    return handler


def _configure_logger(logger_name: str, handler: logging.Handler, level: int) -> None:
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False


def _has_request_id_handler(logger: logging.Logger) -> bool:
    return any(
        any(isinstance(f, RequestIdFilter) for f in h.filters) for h in logger.handlers
    )


def configure_logging(level: str | int = "INFO") -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = _make_handler(level)

    # Root/app logs (don't clear root handlers to avoid surprising other libs)
    root = logging.getLogger()
    root.setLevel(level)
    if not _has_request_id_handler(root):
        root.addHandler(handler)

    # Uvicorn installs its own handlers; replace them so our formatter/filter wins.
    for name in _UVICORN_LOGGERS:
        _configure_logger(name, handler, level)
