"""Tests for the periodic local refresh scheduler."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from artwork.services.resolver import AssetMode
from artwork.services.scheduler import RefreshScheduler


@pytest.fixture
def ctx():
    context = MagicMock()
    context.mode = AssetMode.LOCAL
    context.local_cache.repopulate = AsyncMock()
    return context


@pytest.mark.asyncio
async def test_refresh_runs_in_local_mode(ctx):
    await RefreshScheduler(ctx, 60)._refresh_local()
    ctx.local_cache.repopulate.assert_awaited_once()


@pytest.mark.asyncio
async def test_refresh_skipped_in_remote_mode(ctx):
    ctx.mode = AssetMode.REMOTE
    await RefreshScheduler(ctx, 60)._refresh_local()
    ctx.local_cache.repopulate.assert_not_awaited()


@pytest.mark.asyncio
async def test_refresh_error_is_logged_not_raised(ctx):
    ctx.local_cache.repopulate = AsyncMock(side_effect=RuntimeError("boom"))
    await RefreshScheduler(ctx, 60)._refresh_local()


@pytest.mark.asyncio
async def test_start_and_stop(ctx):
    scheduler = RefreshScheduler(ctx, 60)
    scheduler.start()
    assert scheduler.running is True

    await scheduler.stop()
    assert scheduler.running is False
