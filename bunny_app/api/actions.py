"""
bunny_app.api.actions

Purpose:
    Server-side functions callable directly by the page (the "server action"
    form). Trusted, in-process; they return plain values, not responses.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from bunny_app.shared.rabbit_breeds import RandomSource, pick_random_breed

logger = logging.getLogger(__name__)


async def get_random_rabbit_breed(rng: RandomSource | None = None) -> str:
    breed = pick_random_breed(rng)
    logger.debug("server action picked breed=%s", breed)
    return breed
