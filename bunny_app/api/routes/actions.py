"""
bunny_app.api.routes.actions

Purpose:
    Transport for server actions invoked from the page.
    The response body is the action's plain return value encoded as JSON.

Created:
    2026-10-19
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from bunny_app.api.actions import get_random_rabbit_breed
from bunny_app.api.contracts.api_paths import ApiPaths
from bunny_app.api.contracts.api_tags import ApiTags
from bunny_app.api.dependencies import get_random_source
from bunny_app.shared.rabbit_breeds import RandomSource

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.actions])


@router.post(_paths.random_breed_action, response_model=str)
async def random_breed_action(rng: RandomSource = Depends(get_random_source)) -> str:
    return await get_random_rabbit_breed(rng)
