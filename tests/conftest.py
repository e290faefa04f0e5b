from datetime import date
from typing import AsyncIterator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from asgi_lifespan import LifespanManager

from edunotes.core.config import Settings
from edunotes.db.store import MemoryStore
from edunotes.schemas.note_schema import Note, NoteType
from edunotes.schemas.types import new_id
from edunotes.services.portal import Portal

ADMIN_CODE = "letmein"


@pytest.fixture
def test_settings() -> Settings:
    return Settings(STORAGE_BACKEND="memory", ADMIN_CODE=ADMIN_CODE, ENVIRONMENT="test")


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def portal(store, test_settings) -> Portal:
    return Portal(store, test_settings)


@pytest.fixture
def make_note():
    def _make(**overrides) -> Note:
        fields = dict(
            id=new_id(),
            title="Operating Systems Overview",
            subject="Operating Systems",
            semester=3,
            upload_date=date(2024, 2, 1),
            file_size="1.2 MB",
            type=NoteType.PDF,
            file_url="data:application/pdf;base64,JVBERi0xLjQ=",
            file_name="os-overview.pdf",
        )
        fields.update(overrides)
        return Note(**fields)

    return _make


@pytest_asyncio.fixture()
async def client(test_settings) -> AsyncIterator[AsyncClient]:
    from edunotes.main import create_app

    app = create_app(test_settings)
    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
            yield ac
