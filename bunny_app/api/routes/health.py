"""
bunny_app.api.routes.health

Purpose:
    Health endpoint for container/orchestrator checks.

Created:
    2026-10-19
"""

from __future__ import annotations

from fastapi import APIRouter

from bunny_app.api.contracts.api_paths import ApiPaths
from bunny_app.api.contracts.api_tags import ApiTags

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.health])


@router.get(_paths.health)
def health() -> dict:
    return {"ok": True}
