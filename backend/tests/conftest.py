"""Test fixtures — token store on tmp_path, mocked prober, FastAPI test client."""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from artwork.api.deps import get_context
from artwork.main import create_app
from artwork.services import ArtworkContext
from artwork.services.asset_store import FilesystemAssetStore
from artwork.services.token_paths import TOKEN_PATH


@pytest.fixture
def data_dir(tmp_path):
    """Host data root with an empty token directory."""
    (tmp_path / TOKEN_PATH).mkdir(parents=True)
    return tmp_path


@pytest.fixture
def add_token(data_dir):
    """Create a token file on disk; returns its local identifier."""
    def _add(cr_dir: str, filename: str) -> str:
        folder = data_dir / TOKEN_PATH / cr_dir / "with-shadows"
        folder.mkdir(parents=True, exist_ok=True)
        (folder / filename).write_bytes(b"\x89PNG")
        return f"{TOKEN_PATH}{cr_dir}/with-shadows/{filename}"
    return _add


@pytest.fixture
def prober():
    """HEAD prober answering 404 unless a test says otherwise."""
    mock = AsyncMock()
    mock.head = AsyncMock(return_value=404)
    return mock


@pytest.fixture
def context(data_dir, prober):
    return ArtworkContext(
        store=FilesystemAssetStore(data_dir),
        prober=prober,
        replace_artwork=True,
    )


@pytest_asyncio.fixture
async def client(context: ArtworkContext):
    """Provide an async test client bound to the test context."""
    app = create_app()
    app.dependency_overrides[get_context] = lambda: context

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
