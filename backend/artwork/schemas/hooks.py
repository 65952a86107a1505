"""Actor hook schemas."""

from typing import Any

from pydantic import BaseModel, Field


class PreCreateActorRequest(BaseModel):
    """Actor source data as the host is about to create it."""
    actor: dict[str, Any]
    system_id: str | None = None  # Falls back to the configured system


class PreCreateActorResponse(BaseModel):
    actor: dict[str, Any]
    replaced: bool = False
    token_src: str | None = None


class PreCreateActorsRequest(BaseModel):
    """Batch import — actors are resolved concurrently."""
    actors: list[dict[str, Any]] = Field(default_factory=list)
    system_id: str | None = None


class PreCreateActorsResponse(BaseModel):
    results: list[PreCreateActorResponse]
    replaced_count: int
