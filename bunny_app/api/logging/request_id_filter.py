"""
bunny_app.api.logging.request_id_filter

Purpose:
    Logging filter that stamps every record with the current request id, so
    app, uvicorn.error and uvicorn.access lines for one request (including
    the breed it picked) can be grepped together.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from bunny_app.api.logging.request_context import current_request_id


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        # An id passed via extra= wins; outside a request the context gives "-".
        if not getattr(record, "request_id", None):
            record.request_id = current_request_id()
        return True
