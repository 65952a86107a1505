"""Remote token existence — HEAD probes memoized per address."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

logger = logging.getLogger(__name__)

# ValueError covers UnicodeError from IDNA host encoding
PROBE_ERRORS = (httpx.HTTPError, httpx.InvalidURL, OSError, ValueError)


class Prober(Protocol):
    async def head(self, address: str) -> int: ...


class HttpProber:
    """Issues a HEAD request and reports the status code.

    Transport failures propagate as httpx/OS errors.
    """

    def __init__(self, timeout: float = 5.0):
        self._timeout = timeout

    async def head(self, address: str) -> int:
        async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
            resp = await client.head(address)
            return resp.status_code


class RemoteExistenceCache:
    """Caches HEAD results by full address for the lifetime of the process.

    Only definite answers are cached. A transport failure returns False
    and leaves the address uncached so a later call probes again.
    """

    def __init__(self, prober: Prober):
        self._prober = prober
        self._known: dict[str, bool] = {}

    def __len__(self) -> int:
        return len(self._known)

    def cached(self, address: str) -> bool | None:
        return self._known.get(address)

    async def check_exists(self, address: str) -> bool:
        if address in self._known:
            return self._known[address]

        try:
            status = await self._prober.head(address)
        except PROBE_ERRORS as e:
            logger.debug("Probe failed for %s: %s", address, e)
            return False

        exists = status == 200
        self._known[address] = exists
        return exists
