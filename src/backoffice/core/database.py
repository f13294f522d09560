import logging
from collections.abc import AsyncGenerator, Awaitable, Callable, Sequence
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI
from tortoise import Tortoise

logger = logging.getLogger(__name__)

PORTAL_MODELS = [
    "backoffice.portal.features.auth.models",
    "backoffice.portal.features.reports.models",
    "aerich.models",  # For Aerich migrations
]

SALES_MODELS = [
    "backoffice.sales.features.auth.models",
    "backoffice.sales.features.buyers.models",
    "backoffice.sales.features.orders.models",
    "aerich.models",  # For Aerich migrations
]

StartupHook = Callable[[FastAPI], Awaitable[None]]


def build_tortoise_config(db_url: str, models: Sequence[str]) -> dict[str, Any]:
    return {
        "connections": {"default": db_url},
        "apps": {
            "models": {
                "models": list(models),
                "default_connection": "default",
            }
        },
        "use_tz": False,
        "timezone": "UTC",
    }


class DBConnection:
    """Scoped ORM connection for scripts and CLI commands."""

    def __init__(self, config: dict[str, Any]):
        self.config = config

    async def __aenter__(self):
        await Tortoise.init(config=self.config)
        await Tortoise.generate_schemas(safe=True)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await Tortoise.close_connections()


def make_lifespan(
    config: dict[str, Any],
    startup_hooks: Sequence[StartupHook] = (),
) -> Callable[[FastAPI], Any]:
    """Build a FastAPI lifespan that owns the ORM connection pool.

    Connections are opened before the first request, start-up hooks run once
    the schema exists, and the pool is drained when the server stops, even if
    a hook failed.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(f"Starting {app.title}...")
        await Tortoise.init(config=config)
        await Tortoise.generate_schemas(safe=True)
        logger.info("Tortoise-ORM has been initialized.")
        try:
            for hook in startup_hooks:
                await hook(app)
            yield
        finally:
            await Tortoise.close_connections()
            logger.info("Tortoise-ORM connections have been closed.")

    return lifespan
