"""
bunny_app.api.routes.bunny_headers

Purpose:
    JSON views of the Bunny CDN request headers and the location greeting.
    Headers are read from the incoming request and passed explicitly to the
    inspector functions.

Created:
    2026-10-19
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from bunny_app.api.contracts.api_paths import ApiPaths
from bunny_app.api.contracts.api_tags import ApiTags
from bunny_app.api.schemas.rabbit import GreetingResponse, HeaderEntryOut, HeadersResponse
from bunny_app.shared.cdn_headers import collect_known_headers, greeting_from_location

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.bunny_headers])


@router.get(_paths.bunny_headers, response_model=HeadersResponse)
def bunny_headers(request: Request) -> HeadersResponse:
    entries = collect_known_headers(request.headers)
    return HeadersResponse(headers=[HeaderEntryOut.from_entry(e) for e in entries])


@router.get(_paths.greeting, response_model=GreetingResponse)
def greeting(request: Request) -> GreetingResponse:
    return GreetingResponse(greeting=greeting_from_location(request.headers))
