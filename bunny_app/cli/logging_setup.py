"""
bunny_app.cli.logging_setup

Configures CLI logging so:
- breed/greet/headers output stays on stdout and can be piped (oprint in main).
- Diagnostics go to stderr via logging.
- quiet suppresses stderr chatter (ERROR only).
- trace enables DEBUG, including the breed picked by each call.

`serve` hands logging over to the app: create_app() reconfigures the root and
uvicorn loggers with the request-id format once uvicorn imports it.
"""

from __future__ import annotations

import logging
import sys

CLI_LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# The client call-site fetches /api/rabbit through httpx; its per-request
# INFO lines would drown the CLI's own output.
_CHATTY_LOGGERS = ("httpx", "httpcore")


def _level_for(*, trace: bool, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if trace:
        return logging.DEBUG
    return logging.INFO


def setup_cli_logging(*, trace: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for CLI runs. quiet wins over trace.
    """
    level = _level_for(trace=trace, quiet=quiet)

    root = logging.getLogger()

    # Remove existing handlers to avoid duplicate logs in pytest runs
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CLI_LOG_FORMAT))

    root.addHandler(handler)
    root.setLevel(level)

    if not trace:
        for name in _CHATTY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
