"""
bunny_app.api.main

Purpose:
    FastAPI application entrypoint for the Bunny Magic Containers demo.

Created:
    2026-10-19
"""

from __future__ import annotations

from fastapi import FastAPI

from bunny_app.api.contracts.request_id_policy import RequestIdPolicy
from bunny_app.api.error_handlers import register_error_handlers
from bunny_app.api.logging.logging_config import configure_logging
from bunny_app.api.middleware.request_id import RequestIdMiddleware
from bunny_app.api.routes import app_router
from bunny_app.api.settings import get_settings


def create_app() -> FastAPI:
    settings = get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=settings.service_version)

    app.add_middleware(RequestIdMiddleware, policy=RequestIdPolicy())

    register_error_handlers(app)

    app.include_router(app_router)

    return app

app = create_app()
