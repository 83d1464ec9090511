"""
bunny_app.api.dependencies

Purpose:
    FastAPI dependencies shared by routes.
    Tests override get_random_source via app.dependency_overrides.

Created:
    2026-10-19
"""

from __future__ import annotations

import random

from bunny_app.shared.rabbit_breeds import RandomSource


def get_random_source() -> RandomSource:
    return random
