"""Health check."""

from fastapi import APIRouter, Depends

from artwork import __version__
from artwork.api.deps import get_context
from artwork.schemas.system import HealthResponse
from artwork.services import ArtworkContext

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(ctx: ArtworkContext = Depends(get_context)):
    """Lightweight connectivity check for the host module."""
    return HealthResponse(
        version=__version__,
        mode=ctx.mode.value,
        replace_artwork=ctx.replace_artwork,
    )


@router.get("/ping")
async def ping():
    """Ultra-lightweight ping."""
    return {"status": "ok"}
