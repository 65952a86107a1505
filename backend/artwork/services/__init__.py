"""Business logic services — the explicit runtime context."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from artwork.services.asset_store import FilesystemAssetStore
from artwork.services.local_listing import AssetStore, LocalListingCache, RepopulateResult
from artwork.services.remote_cache import HttpProber, Prober, RemoteExistenceCache
from artwork.services.resolver import AssetMode, AssetResolver, mode_for_location
from artwork.services.substitution import ArtworkSubstitution

if TYPE_CHECKING:
    from artwork.config import Settings
    from artwork.services.scheduler import RefreshScheduler

logger = logging.getLogger(__name__)


class ArtworkContext:
    """Runtime configuration plus the caches it selects between.

    One instance is built at startup and handed to every route through
    a dependency; tests build their own.
    """

    def __init__(
        self,
        store: AssetStore,
        prober: Prober,
        replace_artwork: bool = False,
        token_path_location: str = "",
        system_id: str = "dnd5e",
    ):
        self.replace_artwork = replace_artwork
        self.token_path_location = token_path_location or ""
        self.system_id = system_id
        self.local_cache = LocalListingCache(store)
        self.remote_cache = RemoteExistenceCache(prober)
        self.resolver = AssetResolver(
            self.local_cache,
            self.remote_cache,
            mode=mode_for_location(self.token_path_location),
        )
        self.substitution = ArtworkSubstitution(self)
        self.scheduler: RefreshScheduler | None = None

    @property
    def mode(self) -> AssetMode:
        return self.resolver.mode

    async def initialize(self) -> None:
        """Prime the local listing when starting in local mode."""
        logger.info("Token mode: %s", self.mode.value)
        if self.mode == AssetMode.LOCAL:
            await self.local_cache.repopulate()

    def set_replace_artwork(self, enabled: bool) -> None:
        self.replace_artwork = bool(enabled)
        logger.info("Artwork replacement %s", "enabled" if enabled else "disabled")

    async def set_token_path_location(self, location: str | None) -> RepopulateResult | None:
        """Apply a new token location; an empty one re-lists local tokens."""
        self.token_path_location = location or ""
        mode = mode_for_location(self.token_path_location)
        if mode != self.resolver.mode:
            logger.info("Token mode: %s -> %s", self.resolver.mode.value, mode.value)
        self.resolver.mode = mode

        if mode == AssetMode.LOCAL:
            return await self.local_cache.repopulate()
        return None

    async def start_scheduler(self, interval_seconds: int) -> None:
        if interval_seconds <= 0:
            return
        from artwork.services.scheduler import RefreshScheduler

        self.scheduler = RefreshScheduler(self, interval_seconds)
        self.scheduler.start()

    async def shutdown(self) -> None:
        if self.scheduler:
            await self.scheduler.stop()
            self.scheduler = None


def build_context(settings: Settings) -> ArtworkContext:
    """Create the context from startup settings."""
    return ArtworkContext(
        store=FilesystemAssetStore(settings.data_dir),
        prober=HttpProber(timeout=settings.probe_timeout_seconds),
        replace_artwork=settings.replace_artwork,
        token_path_location=settings.token_path_location,
        system_id=settings.system_id,
    )
