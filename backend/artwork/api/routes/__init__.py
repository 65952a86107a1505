"""API route registration."""

from fastapi import APIRouter

from artwork.api.routes import health, hooks, settings, tokens

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(settings.router, prefix="/settings", tags=["settings"])
api_router.include_router(hooks.router, prefix="/hooks", tags=["hooks"])
api_router.include_router(tokens.router, prefix="/tokens", tags=["tokens"])
