"""
bunny_app.api.contracts.api_paths

Purpose:
    Central definition of route paths.
    Keeps routing stable and prevents string duplication between routes,
    the rendered page script and the client.

Created:
    2026-10-19
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiPaths:
    home: str = "/"
    health: str = "/health"
    rabbit: str = "/api/rabbit"
    bunny_headers: str = "/api/bunny-headers"
    greeting: str = "/api/greeting"
    random_breed_action: str = "/_actions/get-random-rabbit-breed"
