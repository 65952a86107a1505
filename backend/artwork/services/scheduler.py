"""APScheduler-based periodic re-listing of local tokens."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from artwork.services.resolver import AssetMode

if TYPE_CHECKING:
    from artwork.services import ArtworkContext

logger = logging.getLogger(__name__)


class RefreshScheduler:
    """Re-runs the local listing on an interval while in local mode."""

    def __init__(self, context: ArtworkContext, interval_seconds: int):
        self._ctx = context
        self._interval = interval_seconds
        self._scheduler = AsyncIOScheduler(
            job_defaults={"coalesce": True, "max_instances": 1}
        )

    @property
    def running(self) -> bool:
        return self._scheduler.running

    def start(self) -> None:
        self._scheduler.add_job(
            self._refresh_local,
            "interval",
            seconds=self._interval,
            id="refresh_local_tokens",
            name="Re-list local tokens",
        )
        self._scheduler.start()
        logger.info("Local token refresh scheduled every %ds", self._interval)

    async def stop(self) -> None:
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        logger.info("Local token refresh stopped")

    async def _refresh_local(self) -> None:
        if self._ctx.mode != AssetMode.LOCAL:
            return
        try:
            await self._ctx.local_cache.repopulate()
        except Exception as e:
            logger.error("Scheduled token refresh failed: %s", e)
