"""
Conftest for the sales test suite.

Each test runs against a fresh in-memory SQLite database initialised by the
autouse `initialize_test_db` fixture, with one seller account already in
place. Requests go through httpx's ASGI transport, which skips the
application lifespan (seeding and backfill are exercised directly in the
tests that need them).

Key Fixtures:
- `test_settings`: Settings with a test secret and the standard unit price.
- `test_app`: A sales app built from `test_settings`.
- `client`: A non-authenticated client.
- `seller_token`: A bearer token obtained through `/login`.
- `seller_client`: A client sending that token on every request.
"""
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI
from tortoise import Tortoise

from backoffice.core.config import Settings
from backoffice.core.database import SALES_MODELS, build_tortoise_config
from backoffice.core.security import get_password_hash
from backoffice.sales.features.auth.models import Seller
from backoffice.sales.main import create_app

SELLER_USERNAME = "penjual"
SELLER_PASSWORD = "rahasia123"


async def add_seller() -> Seller:
    return await Seller.create(
        username=SELLER_USERNAME,
        hashed_password=get_password_hash(SELLER_PASSWORD),
        nama_lengkap="Penjual Utama",
    )


@pytest_asyncio.fixture(scope="function", autouse=True)
async def initialize_test_db() -> AsyncGenerator[None, None]:
    """Creates a fresh schema with the fixture seller for each test."""
    await Tortoise.init(config=build_tortoise_config("sqlite://:memory:", SALES_MODELS))
    await Tortoise.generate_schemas()
    await add_seller()

    yield

    await Tortoise.close_connections()


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    return Settings(
        sales_database_url="sqlite://:memory:",
        secret_key="sales-test-secret",
        unit_price=13000,
        log_level="WARNING",
    )


@pytest.fixture(scope="function")
def test_app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


def _client(app: FastAPI, **kwargs) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver", **kwargs)


@pytest_asyncio.fixture(scope="function")
async def client(test_app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with _client(test_app) as ac:
        yield ac


@pytest_asyncio.fixture(scope="function")
async def seller_token(client: httpx.AsyncClient) -> str:
    response = await client.post("/login", json={"username": SELLER_USERNAME, "password": SELLER_PASSWORD})
    if response.status_code != 200:
        raise Exception(f"Seller authentication failed for {SELLER_USERNAME}: {response.text}")
    return response.json()["data"]["access_token"]


@pytest_asyncio.fixture(scope="function")
async def seller_client(test_app: FastAPI, seller_token: str) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with _client(test_app, headers={"Authorization": f"Bearer {seller_token}"}) as ac:
        yield ac
