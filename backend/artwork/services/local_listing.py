"""Local token listing cache — two-level enumeration with atomic swap."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Protocol

from artwork.services.asset_store import AssetStoreError
from artwork.services.token_paths import SHADOW_DIR, TOKEN_PATH

logger = logging.getLogger(__name__)


class AssetStore(Protocol):
    async def list_directories(self, path: str) -> list[str]: ...

    async def list_files(self, path: str) -> list[str]: ...


@dataclass(frozen=True)
class BranchFailure:
    directory: str
    reason: str


@dataclass
class RepopulateResult:
    asset_count: int
    directories_scanned: int
    failures: list[BranchFailure] = field(default_factory=list)
    completed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def ok(self) -> bool:
        return not self.failures


class LocalListingCache:
    """Caches every token under TOKEN_PATH/<cr>/with-shadows/.

    The set is rebuilt off to the side and swapped in as a whole, so
    lookups running during a repopulation see either the old or the new
    listing, never a half-built one.
    """

    def __init__(self, store: AssetStore, root: str = TOKEN_PATH):
        self._store = store
        self._root = root
        self._assets: frozenset[str] = frozenset()
        self._last_result: RepopulateResult | None = None
        self._lock = asyncio.Lock()

    @property
    def assets(self) -> frozenset[str]:
        return self._assets

    @property
    def last_result(self) -> RepopulateResult | None:
        return self._last_result

    def contains(self, key: str) -> bool:
        return key in self._assets

    async def repopulate(self) -> RepopulateResult:
        """Re-list the store and replace the cached set."""
        async with self._lock:
            assets: set[str] = set()
            failures: list[BranchFailure] = []

            try:
                directories = await self._store.list_directories(self._root)
            except AssetStoreError as e:
                logger.warning("Token root %s not listable: %s", self._root, e.reason)
                directories = []
                failures.append(BranchFailure(directory=self._root, reason=e.reason))

            for directory in directories:
                try:
                    files = await self._store.list_files(f"{directory}/{SHADOW_DIR}/")
                except AssetStoreError as e:
                    logger.debug("Skipping %s: %s", directory, e.reason)
                    failures.append(BranchFailure(directory=directory, reason=e.reason))
                    continue
                assets.update(files)

            self._assets = frozenset(assets)
            self._last_result = RepopulateResult(
                asset_count=len(assets),
                directories_scanned=len(directories),
                failures=failures,
            )

        logger.info(
            "Local token cache: %d tokens in %d directories (%d skipped)",
            len(assets), len(directories), len(failures),
        )
        return self._last_result
