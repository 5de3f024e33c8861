import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy import select

from notes_api.config import Settings
from notes_api.main import create_app, MULTIPART_OVERHEAD_BYTES
from notes_api.models import FileRecord


def test_default_ceiling_is_100_mib():
    assert Settings().MAX_UPLOAD_BYTES == 100 * 1024 * 1024


@pytest.fixture
def small_limit_app(tmp_path):
    return create_app(Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}",
        FILE_STORAGE_PATH=str(tmp_path / "uploads"),
        MAX_UPLOAD_BYTES=16,
    ))


async def _post_file(app, data: bytes):
    async with app.router.lifespan_context(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
            response = await c.post(
                "/upload",
                files={"file": ("big.bin", data, "application/octet-stream")},
                data={"noteName": "abc"},
            )
            async with app.state.session_factory() as db:
                records = (await db.execute(select(FileRecord))).scalars().all()
            blobs = list(app.state.file_storage.base_path.iterdir())
    return response, records, blobs


@pytest.mark.asyncio
async def test_oversized_file_part_is_rejected(small_limit_app):
    response, records, blobs = await _post_file(small_limit_app, b"x" * 32)
    assert response.status_code == 413
    assert response.json() == {"error": "File too large"}
    assert records == []
    assert blobs == []


@pytest.mark.asyncio
async def test_oversized_request_body_is_rejected_early(small_limit_app):
    response, records, blobs = await _post_file(small_limit_app, b"x" * (MULTIPART_OVERHEAD_BYTES + 1024))
    assert response.status_code == 413
    assert response.json() == {"error": "File too large"}
    assert records == []
    assert blobs == []


@pytest.mark.asyncio
async def test_file_at_limit_is_accepted(small_limit_app):
    response, records, blobs = await _post_file(small_limit_app, b"x" * 16)
    assert response.status_code == 200
    assert response.json()["size"] == 16
    assert len(records) == 1
    assert len(blobs) == 1
