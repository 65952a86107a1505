"""FastAPI dependency injection — runtime context."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from artwork.services import ArtworkContext


def get_context(request: Request) -> ArtworkContext:
    """Return the context built during app startup."""
    context = getattr(request.app.state, "context", None)
    if context is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not initialized",
        )
    return context
