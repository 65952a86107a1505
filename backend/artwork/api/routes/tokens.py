"""Token cache status, manual refresh and diagnostics lookup."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from artwork.api.deps import get_context
from artwork.schemas.tokens import RepopulateSummary, TokenCacheStatus, TokenLookup
from artwork.services import ArtworkContext
from artwork.services.resolver import AssetMode
from artwork.services.token_paths import derive_token_paths

router = APIRouter()


@router.get("/status", response_model=TokenCacheStatus)
async def token_status(ctx: ArtworkContext = Depends(get_context)):
    last = ctx.local_cache.last_result
    return TokenCacheStatus(
        mode=ctx.mode.value,
        local_asset_count=len(ctx.local_cache.assets),
        last_repopulate=RepopulateSummary.model_validate(last) if last else None,
        remote_cached_count=len(ctx.remote_cache),
    )


@router.post("/refresh", response_model=RepopulateSummary)
async def refresh_tokens(ctx: ArtworkContext = Depends(get_context)):
    """Re-list local tokens now."""
    if ctx.mode != AssetMode.LOCAL:
        raise HTTPException(409, "Tokens are served remotely — nothing to re-list")
    result = await ctx.local_cache.repopulate()
    return RepopulateSummary.model_validate(result)


@router.get("/lookup", response_model=TokenLookup)
async def lookup_token(
    name: str = Query(..., min_length=1),
    cr: str = Query(..., min_length=1),
    ctx: ArtworkContext = Depends(get_context),
):
    """Show which path an actor would resolve to, and whether it exists."""
    paths = derive_token_paths(name, cr, ctx.token_path_location)
    exists = await ctx.resolver.exists(paths.local, paths.remote)
    return TokenLookup(
        name=name,
        cr=cr,
        relative_path=paths.relative,
        token_src=paths.source,
        mode=ctx.mode.value,
        exists=exists,
    )
