"""
tests.api.test_bunny_headers_api

Purpose:
    JSON views of the Bunny CDN headers and the greeting.
"""

from __future__ import annotations


def test_bunny_headers_empty_when_not_behind_cdn(client) -> None:
    r = client.get("/api/bunny-headers")
    assert r.status_code == 200
    assert r.json() == {"headers": []}


def test_bunny_headers_keeps_allow_list_order(client) -> None:
    r = client.get(
        "/api/bunny-headers",
        headers={
            "CDN-PullZone": "my-zone",
            "cdn-requestcountrycode": "DE",
            "x-unrelated": "ignored",
        },
    )
    assert r.status_code == 200
    assert r.json() == {
        "headers": [
            {"name": "cdn-requestcountrycode", "value": "DE"},
            {"name": "cdn-pullzone", "value": "my-zone"},
        ]
    }


def test_greeting_fallback(client) -> None:
    r = client.get("/api/greeting")
    assert r.status_code == 200
    assert r.json() == {"greeting": "Hello from somewhere in the world!"}


def test_greeting_from_country_code(client) -> None:
    r = client.get("/api/greeting", headers={"cdn-requestcountrycode": "US"})
    assert r.json() == {"greeting": "Hello from US!"}
