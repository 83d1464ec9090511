from fastapi import APIRouter

from bunny_app.api.routes.actions import router as actions_router
from bunny_app.api.routes.bunny_headers import router as bunny_headers_router
from bunny_app.api.routes.health import router as health_router
from bunny_app.api.routes.page import router as page_router
from bunny_app.api.routes.rabbit import router as rabbit_router

app_router = APIRouter()

app_router.include_router(health_router)
app_router.include_router(page_router)
app_router.include_router(rabbit_router)
app_router.include_router(actions_router)
app_router.include_router(bunny_headers_router)
