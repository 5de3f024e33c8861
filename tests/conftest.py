from pathlib import Path

import pytest
from httpx import AsyncClient, ASGITransport

from notes_api.config import Settings
from notes_api.main import create_app


@pytest.fixture(scope="function")
def settings(tmp_path):
    # Each test gets its own SQLite file and uploads directory
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}",
        FILE_STORAGE_PATH=str(tmp_path / "uploads"),
    )


@pytest.fixture(scope="function")
def app(settings):
    return create_app(settings)


@pytest.fixture(scope="function")
async def client(app):
    # ASGITransport does not run the lifespan, so enter it here
    async with app.router.lifespan_context(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
            yield c


@pytest.fixture
def uploads_dir(settings):
    return Path(settings.FILE_STORAGE_PATH)


@pytest.fixture
def upload(client):
    async def _upload(note_name, filename="report.pdf", data=b"0123456789", mime="application/pdf"):
        return await client.post(
            "/upload",
            files={"file": (filename, data, mime)},
            data={"noteName": note_name},
        )
    return _upload
