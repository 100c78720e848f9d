# tests/conftest.py
import pytest
import pytest_asyncio
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient

from config import Settings
from containers import Container
from main import create_app


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at a throwaway SQLite file, with a cheap bcrypt cost."""
    return Settings(
        _env_file=None,
        database_path=str(tmp_path / "test.db"),
        bcrypt_rounds=4,
    )


@pytest_asyncio.fixture
async def container(settings):
    """Container with an initialised, isolated database."""
    container = Container()
    container.settings.override(providers.Object(settings))

    database = container.database()
    await database.init_db()
    try:
        yield container
    finally:
        await database.dispose()
        container.unwire()


@pytest.fixture
def database(container):
    return container.database()


@pytest.fixture
def user_repo(container):
    return container.user_repo()


@pytest.fixture
def conversation_repo(container):
    return container.conversation_repo()


@pytest.fixture
def message_repo(container):
    return container.message_repo()


@pytest.fixture
def settings_repo(container):
    return container.settings_repo()


@pytest.fixture
def auth_service(container):
    return container.auth_service()


@pytest_asyncio.fixture
async def client(container):
    """HTTP client bound to the app; the schema is created by the container fixture."""
    app = create_app(container)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def registered_user(client):
    """Register bob/pw1 and return the new user id."""
    response = await client.post("/api/register", json={"username": "bob", "password": "pw1"})
    assert response.status_code == 200
    return response.json()["userId"]
