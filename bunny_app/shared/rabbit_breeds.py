"""
bunny_app.shared.rabbit_breeds

Purpose:
    Fixed rabbit breed catalog and the random selection shared by every
    exposure form (server action, /api/rabbit endpoint, CLI).

Notes:
    - RABBIT_BREEDS is read-only and shared by all callers.
    - The random source can be injected (anything with randrange) so tests
      can be deterministic; the default is the module-level generator.

Created:
    2026-10-19
"""

from __future__ import annotations

import random
from typing import Protocol


RABBIT_BREEDS: tuple[str, ...] = (
    "Holland Lop",
    "Mini Rex",
    "Netherland Dwarf",
    "Lionhead",
    "Flemish Giant",
    "English Angora",
    "Dutch Rabbit",
    "Mini Lop",
    "Rex",
    "French Lop",
)


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


def pick_random_breed(rng: RandomSource | None = None) -> str:
    """
    Return one breed from RABBIT_BREEDS, chosen uniformly at random.
    """
    source = rng if rng is not None else random
    index = source.randrange(len(RABBIT_BREEDS))
    return RABBIT_BREEDS[index]
