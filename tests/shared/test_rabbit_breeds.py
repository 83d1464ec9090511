"""
tests.shared.test_rabbit_breeds

Purpose:
    Catalog invariants and selection behavior of pick_random_breed().
"""

from __future__ import annotations

import random

import pytest

from bunny_app.shared.rabbit_breeds import RABBIT_BREEDS, pick_random_breed


def test_catalog_is_fixed_ten_entries_in_order() -> None:
    assert RABBIT_BREEDS == (
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
    assert isinstance(RABBIT_BREEDS, tuple)


def test_every_pick_is_in_catalog() -> None:
    for _ in range(1000):
        breed = pick_random_breed()
        assert breed
        assert breed in RABBIT_BREEDS


def test_every_breed_appears_over_many_picks() -> None:
    seen = {pick_random_breed() for _ in range(10_000)}
    assert seen == set(RABBIT_BREEDS)


def test_seeded_source_is_reproducible() -> None:
    a = [pick_random_breed(random.Random(7)) for _ in range(5)]
    b = [pick_random_breed(random.Random(7)) for _ in range(5)]
    assert a == b


@pytest.mark.parametrize("index", [0, 5, 9])
def test_index_maps_to_catalog_entry(index: int) -> None:
    class _Pinned:
        def randrange(self, stop: int) -> int:
            assert stop == len(RABBIT_BREEDS)
            return index

    assert pick_random_breed(_Pinned()) == RABBIT_BREEDS[index]
