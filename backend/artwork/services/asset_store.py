"""Local asset store — directory listing below the host data root."""

from __future__ import annotations

import asyncio
from pathlib import Path


class AssetStoreError(Exception):
    """A single listing call failed (missing path, permissions, ...)."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class FilesystemAssetStore:
    """Lists directories and files on disk, returning data-root relative paths.

    Identifiers use forward slashes regardless of platform so they line up
    with the paths derived for actors.
    """

    def __init__(self, data_dir: str | Path):
        self._root = Path(data_dir)

    @property
    def root(self) -> Path:
        return self._root

    async def list_directories(self, path: str) -> list[str]:
        return await asyncio.to_thread(self._list, path, True)

    async def list_files(self, path: str) -> list[str]:
        return await asyncio.to_thread(self._list, path, False)

    def _list(self, path: str, directories: bool) -> list[str]:
        target = self._root / path
        prefix = path.rstrip("/")
        try:
            entries = sorted(target.iterdir())
        except OSError as e:
            raise AssetStoreError(path, e.strerror or type(e).__name__) from e

        result: list[str] = []
        for entry in entries:
            if entry.is_dir() if directories else entry.is_file():
                result.append(f"{prefix}/{entry.name}" if prefix else entry.name)
        return result
