import os
from typing import Optional

from fastapi import Request
from pydantic import BaseModel, Field


def _env_bool(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "t")


class Settings(BaseModel):
    """Runtime configuration shared by the portal and sales services.

    Built once at process start (see `Settings.from_env`) and handed to the
    application factories, which keep it on `app.state.settings`.
    """

    portal_database_url: str = "sqlite://./portal.sqlite3"
    sales_database_url: str = "sqlite://./sales.sqlite3"

    # JWT (sales)
    secret_key: str = "your-secret-key-for-jwt-!ChangeMe!"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = Field(24 * 60, gt=0)

    # Server-side sessions (portal)
    session_cookie_name: str = "portal_session"
    session_max_age_seconds: int = Field(24 * 60 * 60, gt=0)
    session_cookie_secure: bool = False

    unit_price: int = Field(13000, gt=0)

    seed_admin_username: Optional[str] = None
    seed_admin_password: Optional[str] = None
    seed_admin_name: str = "Administrator"

    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            portal_database_url=os.getenv("PORTAL_DATABASE_URL", "sqlite://./portal.sqlite3"),
            sales_database_url=os.getenv("SALES_DATABASE_URL", "sqlite://./sales.sqlite3"),
            secret_key=os.getenv(
                "SECRET_KEY", "your-secret-key-for-jwt-!ChangeMe!"
            ),  # TODO: refuse to start with the default key outside development
            algorithm=os.getenv("ALGORITHM", "HS256"),
            access_token_expire_minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(24 * 60))),
            session_cookie_name=os.getenv("SESSION_COOKIE_NAME", "portal_session"),
            session_max_age_seconds=int(os.getenv("SESSION_MAX_AGE_SECONDS", str(24 * 60 * 60))),
            session_cookie_secure=_env_bool("SESSION_COOKIE_SECURE"),
            unit_price=int(os.getenv("UNIT_PRICE", "13000")),
            seed_admin_username=os.getenv("SEED_ADMIN_USERNAME") or None,
            seed_admin_password=os.getenv("SEED_ADMIN_PASSWORD") or None,
            seed_admin_name=os.getenv("SEED_ADMIN_NAME", "Administrator"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was built with."""
    return request.app.state.settings
