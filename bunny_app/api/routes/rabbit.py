"""
bunny_app.api.routes.rabbit

Purpose:
    GET /api/rabbit: the HTTP endpoint form of the random breed picker.
    Always 200 with {"breed": "<name>"}.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from bunny_app.api.contracts.api_paths import ApiPaths
from bunny_app.api.contracts.api_tags import ApiTags
from bunny_app.api.dependencies import get_random_source
from bunny_app.api.schemas.rabbit import BreedResponse
from bunny_app.shared.rabbit_breeds import RandomSource, pick_random_breed

logger = logging.getLogger(__name__)

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.rabbit])


@router.get(_paths.rabbit, response_model=BreedResponse)
def get_rabbit(rng: RandomSource = Depends(get_random_source)) -> BreedResponse:
    breed = pick_random_breed(rng)
    logger.info("rabbit endpoint picked breed=%s", breed)
    return BreedResponse(breed=breed)
