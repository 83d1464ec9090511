"""
bunny_app.api.contracts.request_id_policy

Purpose:
    Central policy for request/correlation IDs (header names + response behavior).
    Behind Bunny CDN the edge already assigns an id (cdn-requestid); it is used
    when the client did not send one of its own.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestIdPolicy:
    request_id_header: str = "X-Request-Id"
    correlation_id_header: str = "X-Correlation-Id"
    cdn_request_id_header: str = "cdn-requestid"
    response_header: str = "X-Request-Id"

    def incoming_headers(self) -> tuple[str, ...]:
        return (self.request_id_header, self.correlation_id_header, self.cdn_request_id_header)
