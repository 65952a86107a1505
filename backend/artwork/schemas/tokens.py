"""Token cache schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class BranchFailureInfo(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    directory: str
    reason: str


class RepopulateSummary(BaseModel):
    """Outcome of one local re-listing."""
    model_config = ConfigDict(from_attributes=True)

    asset_count: int
    directories_scanned: int
    failures: list[BranchFailureInfo] = []
    completed_at: datetime


class TokenCacheStatus(BaseModel):
    mode: str
    local_asset_count: int
    last_repopulate: RepopulateSummary | None = None
    remote_cached_count: int


class TokenLookup(BaseModel):
    name: str
    cr: str
    relative_path: str
    token_src: str
    mode: str
    exists: bool
