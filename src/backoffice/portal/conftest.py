"""
Conftest for the portal test suite.

Each test runs against a fresh in-memory SQLite database initialised by the
autouse `initialize_test_db` fixture. The application is driven through
httpx's ASGI transport, which does not run the lifespan, so the production
database is never touched.

Key Fixtures:
- `test_settings`: Settings with test-friendly values.
- `test_app`: A portal app built from `test_settings`.
- `client`: A non-authenticated client.
- `user_client` / `other_client` / `admin_client`: Clients logged in as the
  fixture accounts (two regular users and one admin).
"""
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from tortoise import Tortoise

from backoffice.core.access import Role
from backoffice.core.config import Settings
from backoffice.core.database import PORTAL_MODELS, build_tortoise_config
from backoffice.core.security import get_password_hash
from backoffice.portal.features.auth.models import User
from backoffice.portal.main import create_app

FIXTURE_PASSWORD = "password123"


async def add_user(username: str, role: Role = Role.USER) -> User:
    return await User.create(
        username=username,
        hashed_password=get_password_hash(FIXTURE_PASSWORD),
        role=role,
    )


async def login(client: httpx.AsyncClient, username: str, password: str = FIXTURE_PASSWORD) -> httpx.Response:
    response = await client.post("/login", json={"username": username, "password": password})
    if response.status_code != 200:
        raise Exception(f"Portal login failed for {username}: {response.text}")
    return response


@pytest_asyncio.fixture(scope="function", autouse=True)
async def initialize_test_db() -> AsyncGenerator[None, None]:
    """Creates a fresh schema with the fixture accounts for each test."""
    await Tortoise.init(config=build_tortoise_config("sqlite://:memory:", PORTAL_MODELS))
    await Tortoise.generate_schemas()
    await add_user("warga1")
    await add_user("warga2")
    await add_user("adminportal", role=Role.ADMIN)

    yield

    await Tortoise.close_connections()


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    return Settings(
        portal_database_url="sqlite://:memory:",
        secret_key="portal-test-secret",
        session_max_age_seconds=3600,
        log_level="WARNING",
    )


@pytest.fixture(scope="function")
def test_app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


def _client(app: FastAPI) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver")


@pytest_asyncio.fixture(scope="function")
async def client(test_app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with _client(test_app) as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def user_client(test_app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with _client(test_app) as ac:
        await login(ac, "warga1")
        yield ac


@pytest_asyncio.fixture(scope="function")
async def other_client(test_app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with _client(test_app) as ac:
        await login(ac, "warga2")
        yield ac


@pytest_asyncio.fixture(scope="function")
async def admin_client(test_app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with _client(test_app) as ac:
        await login(ac, "adminportal")
        yield ac
