"""
tests.api.test_rabbit

Purpose:
    Contract tests for the two exposure forms of the random breed picker:
    GET /api/rabbit and the server-action transport.
"""

from __future__ import annotations

import asyncio

from bunny_app.api.actions import get_random_rabbit_breed
from bunny_app.shared.rabbit_breeds import RABBIT_BREEDS


def test_rabbit_endpoint_returns_single_breed_key(client) -> None:
    for _ in range(50):
        r = client.get("/api/rabbit")
        assert r.status_code == 200, r.text

        data = r.json()
        assert list(data.keys()) == ["breed"]
        assert data["breed"] in RABBIT_BREEDS


def test_rabbit_endpoint_uses_injected_random_source(client_factory, fixed_random) -> None:
    rng = fixed_random(4)
    client = client_factory(rng)

    r = client.get("/api/rabbit")
    assert r.status_code == 200
    assert r.json() == {"breed": "Flemish Giant"}
    assert rng.calls == 1


def test_rabbit_endpoint_ignores_query_params(client_factory, fixed_random) -> None:
    client = client_factory(fixed_random(0))
    r = client.get("/api/rabbit", params={"breed": "Not A Rabbit"})
    assert r.status_code == 200
    assert r.json() == {"breed": "Holland Lop"}


def test_action_returns_plain_breed_string(client) -> None:
    r = client.post("/_actions/get-random-rabbit-breed")
    assert r.status_code == 200, r.text
    assert r.json() in RABBIT_BREEDS


def test_action_and_endpoint_share_selection(client_factory, fixed_random) -> None:
    client = client_factory(fixed_random(9))

    assert client.post("/_actions/get-random-rabbit-breed").json() == "French Lop"
    assert client.get("/api/rabbit").json() == {"breed": "French Lop"}


def test_action_direct_call_returns_plain_string(fixed_random) -> None:
    assert asyncio.run(get_random_rabbit_breed(fixed_random(2))) == "Netherland Dwarf"
    assert asyncio.run(get_random_rabbit_breed()) in RABBIT_BREEDS
