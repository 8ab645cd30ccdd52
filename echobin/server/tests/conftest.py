import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from echobin.server.config import ServerConfig
from echobin.server.main import create_app


@pytest.fixture
def server_config():
    """Settings isolated from any .env file in the working directory."""
    return ServerConfig(_env_file=None)


@pytest.fixture
def main_app(server_config):
    app = create_app(server_config)
    yield app
    app.dependency_overrides = {}


@pytest.fixture
def client(main_app):
    with TestClient(main_app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client(main_app):
    transport = httpx.ASGITransport(app=main_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
