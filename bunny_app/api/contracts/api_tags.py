"""
bunny_app.api.contracts.api_tags

Purpose:
    Central definition of FastAPI tags to avoid scattered string literals.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiTags:
    health: str = "health"
    page: str = "page"
    rabbit: str = "rabbit"
    actions: str = "actions"
    bunny_headers: str = "bunny-headers"
