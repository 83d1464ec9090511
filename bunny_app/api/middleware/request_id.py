"""
bunny_app.api.middleware.request_id

Purpose:
    Middleware that ensures each request has a request-id and propagates it to responses.

Created:
    2026-10-19
"""

from __future__ import annotations

import uuid
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from bunny_app.api.contracts.request_id_policy import RequestIdPolicy
from bunny_app.api.logging.request_context import request_id_ctx_var


class RequestIdMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, policy: RequestIdPolicy | None = None) -> None:
        super().__init__(app)
        self._policy = policy or RequestIdPolicy()

    def _incoming_request_id(self, request: Request) -> str | None:
        for header in self._policy.incoming_headers():
            value = request.headers.get(header)
            if value:
                return value
        return None

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = self._incoming_request_id(request) or str(uuid.uuid4())

        # Attach for handlers/logging
        request.state.request_id = request_id
        token = request_id_ctx_var.set(request_id)

        try:
            response: Response = await call_next(request)
        finally:
            request_id_ctx_var.reset(token)

        # Echo back for client correlation
        response.headers[self._policy.response_header] = request_id
        return response
