"""Host lifecycle hooks — actor artwork substitution."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, Depends, Request

from artwork.api.deps import get_context
from artwork.schemas.hooks import (
    PreCreateActorRequest,
    PreCreateActorResponse,
    PreCreateActorsRequest,
    PreCreateActorsResponse,
)
from artwork.services import ArtworkContext

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/pre-create-actor", response_model=PreCreateActorResponse)
async def pre_create_actor(
    body: PreCreateActorRequest,
    request: Request,
    ctx: ArtworkContext = Depends(get_context),
):
    """Called by the host before an actor is created in the world."""
    result = await ctx.substitution.apply(body.actor, body.system_id)

    # Host gave up on the creation while we were resolving — no write.
    if result.replaced and await request.is_disconnected():
        logger.info("Creation of %s aborted by host, skipping artwork", body.actor.get("name"))
        return PreCreateActorResponse(actor=body.actor)

    return PreCreateActorResponse(
        actor=result.actor,
        replaced=result.replaced,
        token_src=result.token_src,
    )


@router.post("/pre-create-actors", response_model=PreCreateActorsResponse)
async def pre_create_actors(
    body: PreCreateActorsRequest,
    request: Request,
    ctx: ArtworkContext = Depends(get_context),
):
    """Batch import — each actor is resolved independently and concurrently."""
    results = await asyncio.gather(
        *(ctx.substitution.apply(actor, body.system_id) for actor in body.actors)
    )

    if any(r.replaced for r in results) and await request.is_disconnected():
        logger.info("Batch of %d actors aborted by host, skipping artwork", len(body.actors))
        return PreCreateActorsResponse(
            results=[PreCreateActorResponse(actor=actor) for actor in body.actors],
            replaced_count=0,
        )

    return PreCreateActorsResponse(
        results=[
            PreCreateActorResponse(actor=r.actor, replaced=r.replaced, token_src=r.token_src)
            for r in results
        ],
        replaced_count=sum(1 for r in results if r.replaced),
    )
