import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from ..core.config import Settings
from ..core.database import PORTAL_MODELS, build_tortoise_config, make_lifespan
from ..core.exceptions import exception_handlers
from ..core.logging_config import configure_logging
from .features.auth.router import router as auth_router
from .features.reports.router import router as reports_router

logger = logging.getLogger(__name__)

LANDING_PAGE = """<!DOCTYPE html>
<html lang="id">
<head><meta charset="utf-8"><title>Portal Laporan Korupsi</title></head>
<body>
<h1>Portal Laporan Korupsi</h1>
<p>Daftar atau masuk untuk mengirim laporan.</p>
</body>
</html>
"""


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the citizen-report portal application."""
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Citizen Report Portal",
        description="Session-authenticated API for filing and reviewing citizen reports.",
        version="0.1.0",
        exception_handlers=exception_handlers(),
        lifespan=make_lifespan(build_tortoise_config(settings.portal_database_url, PORTAL_MODELS)),
    )
    app.state.settings = settings

    @app.get("/", response_class=HTMLResponse, include_in_schema=False)
    async def landing_page(request: Request):
        client_host = request.client.host if request.client else "unknown client"
        logger.info(f"Landing page accessed by {client_host}")
        return LANDING_PAGE

    app.include_router(auth_router)
    app.include_router(reports_router)
    return app


TORTOISE_ORM = build_tortoise_config(Settings.from_env().portal_database_url, PORTAL_MODELS)

app = create_app()
