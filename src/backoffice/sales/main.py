import logging
from typing import Optional

from fastapi import FastAPI, Request

from ..core.config import Settings
from ..core.database import SALES_MODELS, build_tortoise_config, make_lifespan
from ..core.exceptions import exception_handlers
from ..core.logging_config import configure_logging
from .features.auth.router import router as auth_router
from .features.auth.service import seed_default_seller
from .features.buyers.router import router as buyers_router
from .features.dashboard.router import router as dashboard_router
from .features.orders.pricing import backfill_units
from .features.orders.router import router as orders_router

logger = logging.getLogger(__name__)


async def seed_seller_on_startup(app: FastAPI) -> None:
    settings: Settings = app.state.settings
    await seed_default_seller(
        settings.seed_admin_username,
        settings.seed_admin_password,
        settings.seed_admin_name,
    )


async def backfill_units_on_startup(app: FastAPI) -> None:
    settings: Settings = app.state.settings
    updated = await backfill_units(settings.unit_price)
    if updated:
        logger.info(f"Backfilled product counts on {updated} legacy orders")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the seller order-management application."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Sales Backoffice",
        description="Token-authenticated API for buyers, orders and dashboard statistics.",
        version="0.1.0",
        exception_handlers=exception_handlers(),
        lifespan=make_lifespan(
            build_tortoise_config(settings.sales_database_url, SALES_MODELS),
            startup_hooks=(seed_seller_on_startup, backfill_units_on_startup),
        ),
    )
    app.state.settings = settings

    @app.get("/", tags=["Root"])
    async def read_root(request: Request):
        client_host = request.client.host if request.client else "unknown client"
        logger.info(f"Root endpoint accessed by {client_host}")
        return {"success": True, "message": "Welcome to the Sales Backoffice API!"}

    app.include_router(auth_router)
    app.include_router(buyers_router)
    app.include_router(orders_router)
    app.include_router(dashboard_router)
    return app


TORTOISE_ORM = build_tortoise_config(Settings.from_env().sales_database_url, SALES_MODELS)

app = create_app()
