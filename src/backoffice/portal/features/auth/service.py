"""Business logic for portal authentication: users and server-side sessions."""
import datetime
import logging
from typing import Optional

from ....core.access import Role
from ....core.exceptions import AuthenticationError, ConflictError
from ....core.security import as_utc, get_password_hash, utcnow, verify_password
from . import models

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password."


async def get_user_by_username(username: str) -> Optional[models.User]:
    """Retrieves a user by their username.

    Args:
        username: The username of the user to retrieve.

    Returns:
        The User object if found, otherwise None.
    """
    return await models.User.get_or_none(username=username)


async def create_user(username: str, password: str, role: Role = Role.USER) -> models.User:
    """Creates a new user with a bcrypt-hashed password.

    Raises:
        ConflictError: If the username is already taken.
    """
    if await models.User.filter(username=username).exists():
        raise ConflictError("Username already registered.")
    return await models.User.create(
        username=username,
        hashed_password=get_password_hash(password),
        role=role,
    )


async def authenticate_user(username: str, password: str) -> models.User:
    """Checks credentials without revealing which part was wrong."""
    user = await get_user_by_username(username)
    if not user or not verify_password(password, user.hashed_password):
        raise AuthenticationError(INVALID_CREDENTIALS, code="invalid_credentials")
    return user


async def create_session(user: models.User, max_age_seconds: int) -> models.Session:
    purged = await models.Session.filter(expires_at__lte=utcnow()).delete()
    if purged:
        logger.info(f"Purged {purged} expired sessions")
    expires_at = utcnow() + datetime.timedelta(seconds=max_age_seconds)
    session = await models.Session.create(user=user, expires_at=expires_at)
    logger.info(f"Session opened for user {user.username}")
    return session


async def resolve_session(session_id: str) -> models.User:
    """Returns the user behind a session id.

    Expired sessions are deleted on sight.

    Raises:
        AuthenticationError: If the session is unknown or expired.
    """
    session = await models.Session.get_or_none(session_id=session_id).prefetch_related("user")
    if session is None:
        raise AuthenticationError("Please log in first.")
    if as_utc(session.expires_at) <= utcnow():
        await session.delete()
        raise AuthenticationError("Your session has expired.", code="session_expired")
    return session.user


async def end_session(session_id: str) -> None:
    deleted = await models.Session.filter(session_id=session_id).delete()
    if deleted:
        logger.info("Session closed")
