"""Tests for the actor hook routes."""

from unittest.mock import patch

import pytest
import pytest_asyncio
from httpx import AsyncClient

from artwork.services.token_paths import TOKEN_PATH

ORC_LOCAL = f"{TOKEN_PATH}cr2/with-shadows/OrcWarchief.png"


def _actor(name="Orc Warchief", cr=2, actor_type="npc"):
    return {
        "name": name,
        "type": actor_type,
        "img": "icons/svg/mystery-man.svg",
        "system": {"details": {"cr": cr}},
    }


@pytest_asyncio.fixture
async def orc_listed(context, add_token):
    token = add_token("cr2", "OrcWarchief.png")
    await context.local_cache.repopulate()
    return token


@pytest.mark.asyncio
async def test_pre_create_replaces_local_token(client: AsyncClient, orc_listed):
    resp = await client.post("/api/hooks/pre-create-actor", json={"actor": _actor()})

    assert resp.status_code == 200
    data = resp.json()
    assert data["replaced"] is True
    assert data["token_src"] == ORC_LOCAL
    assert data["actor"]["img"] == ORC_LOCAL
    assert data["actor"]["prototypeToken"]["texture"]["src"] == ORC_LOCAL


@pytest.mark.asyncio
async def test_pre_create_absent_token_returns_actor(client: AsyncClient):
    actor = _actor()

    resp = await client.post("/api/hooks/pre-create-actor", json={"actor": actor})

    assert resp.status_code == 200
    data = resp.json()
    assert data["replaced"] is False
    assert data["token_src"] is None
    assert data["actor"] == actor


@pytest.mark.asyncio
async def test_pre_create_other_system_untouched(client: AsyncClient, orc_listed):
    resp = await client.post(
        "/api/hooks/pre-create-actor",
        json={"actor": _actor(), "system_id": "pf2e"},
    )

    assert resp.json()["replaced"] is False


@pytest.mark.asyncio
async def test_pre_create_skips_write_when_host_disconnected(client: AsyncClient, orc_listed):
    with patch("starlette.requests.Request.is_disconnected", return_value=True):
        resp = await client.post("/api/hooks/pre-create-actor", json={"actor": _actor()})

    data = resp.json()
    assert data["replaced"] is False
    assert data["actor"]["img"] == "icons/svg/mystery-man.svg"


@pytest.mark.asyncio
async def test_pre_create_rejects_missing_actor(client: AsyncClient):
    resp = await client.post("/api/hooks/pre-create-actor", json={})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_batch_pre_create(client: AsyncClient, orc_listed):
    resp = await client.post(
        "/api/hooks/pre-create-actors",
        json={"actors": [_actor(), _actor(name="Goblin", cr="1/4"), _actor(actor_type="character")]},
    )

    assert resp.status_code == 200
    data = resp.json()
    assert data["replaced_count"] == 1
    assert [r["replaced"] for r in data["results"]] == [True, False, False]


@pytest.mark.asyncio
async def test_batch_skips_writes_when_host_disconnected(client: AsyncClient, orc_listed):
    actors = [_actor(), _actor(actor_type="character")]

    with patch("starlette.requests.Request.is_disconnected", return_value=True):
        resp = await client.post("/api/hooks/pre-create-actors", json={"actors": actors})

    data = resp.json()
    assert data["replaced_count"] == 0
    assert [r["actor"] for r in data["results"]] == actors
    assert all(r["replaced"] is False for r in data["results"])


@pytest.mark.asyncio
async def test_batch_survives_unencodable_remote_host(client: AsyncClient, context, prober):
    prober.head.side_effect = UnicodeError("A-label must not end with a hyphen")
    await context.set_token_path_location("https://xn--zz--.bad/")
    actors = [_actor(), _actor(actor_type="character")]

    resp = await client.post("/api/hooks/pre-create-actors", json={"actors": actors})

    assert resp.status_code == 200
    data = resp.json()
    assert data["replaced_count"] == 0
    assert [r["actor"] for r in data["results"]] == actors
