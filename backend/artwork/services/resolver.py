"""Asset existence resolver — dispatches on local/remote mode."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from artwork.services.local_listing import LocalListingCache
    from artwork.services.remote_cache import RemoteExistenceCache


class AssetMode(str, Enum):
    LOCAL = "local"
    REMOTE = "remote"


def mode_for_location(location: str) -> AssetMode:
    return AssetMode.REMOTE if location else AssetMode.LOCAL


class AssetResolver:
    """Answers whether a token exists, using whichever cache the mode selects."""

    def __init__(
        self,
        local_cache: LocalListingCache,
        remote_cache: RemoteExistenceCache,
        mode: AssetMode = AssetMode.LOCAL,
    ):
        self._local = local_cache
        self._remote = remote_cache
        self.mode = mode

    async def exists(self, local_key: str, remote_address: str | None) -> bool:
        if self.mode == AssetMode.LOCAL:
            return self._local.contains(local_key)
        if not remote_address:
            return False
        return await self._remote.check_exists(remote_address)
