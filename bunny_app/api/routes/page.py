"""
bunny_app.api.routes.page

Purpose:
    Server-rendered home page.

Created:
    2026-10-19
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from bunny_app.api.contracts.api_paths import ApiPaths
from bunny_app.api.contracts.api_tags import ApiTags
from bunny_app.api.rendering import render_home_page
from bunny_app.api.settings import get_settings
from bunny_app.shared.cdn_headers import collect_known_headers, greeting_from_location

logger = logging.getLogger(__name__)

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.page])


@router.get(_paths.home, response_class=HTMLResponse)
def home(request: Request) -> HTMLResponse:
    entries = collect_known_headers(request.headers)
    if not entries:
        logger.debug("no Bunny headers on request; rendering fallback panel")

    html = render_home_page(
        title=get_settings().page_title,
        greeting=greeting_from_location(request.headers),
        entries=entries,
    )
    return HTMLResponse(content=html)
