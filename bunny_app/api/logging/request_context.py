"""
bunny_app.api.logging.request_context

Purpose:
    Request-scoped context storage using contextvars.
    RequestIdMiddleware sets the id (client header, CDN cdn-requestid or a
    generated uuid); the log filter and error handlers read it back.

Created:
    2026-10-19
"""

from __future__ import annotations

import contextvars

NO_REQUEST_ID = "-"

request_id_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id",
    default=None,
)


def current_request_id() -> str:
    """Request id of the request being handled, or "-" outside a request."""
    return request_id_ctx_var.get() or NO_REQUEST_ID
