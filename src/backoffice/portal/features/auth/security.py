import logging
from typing import Annotated

from fastapi import Depends, Request, Response

from ....core.access import Actor, Role
from ....core.config import Settings, get_settings
from ....core.exceptions import AuthenticationError, AuthorizationError
from . import models, service as auth_service

logger = logging.getLogger(__name__)


def set_session_cookie(response: Response, session: models.Session, settings: Settings) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.session_id,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )

def clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )

def to_actor(user: models.User) -> Actor:
    return Actor(id=user.id, username=user.username, role=Role(user.role))

async def get_current_user(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> models.User:
    session_id = request.cookies.get(settings.session_cookie_name)
    if not session_id:
        raise AuthenticationError("Please log in first.")
    return await auth_service.resolve_session(session_id)

async def get_current_actor(current_user: Annotated[models.User, Depends(get_current_user)]) -> Actor:
    return to_actor(current_user)

async def get_current_admin(actor: Annotated[Actor, Depends(get_current_actor)]) -> Actor:
    if actor.role is not Role.ADMIN:
        logger.warning(f"User {actor.username} tried to use an admin-only endpoint")
        raise AuthorizationError("Administrator access required.")
    return actor
