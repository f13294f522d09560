"""Business logic for seller accounts."""
import logging
from typing import Optional

from ....core.exceptions import AuthenticationError, ConflictError
from ....core.security import get_password_hash, verify_password
from . import models

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password."


async def get_seller_by_username(username: str) -> Optional[models.Seller]:
    """Retrieves a seller by their username.

    Args:
        username: The username of the seller to retrieve.

    Returns:
        The Seller object if found, otherwise None.
    """
    return await models.Seller.get_or_none(username=username)


async def create_seller(username: str, password: str, nama_lengkap: str) -> models.Seller:
    if await models.Seller.filter(username=username).exists():
        raise ConflictError("Username already registered.")
    return await models.Seller.create(
        username=username,
        hashed_password=get_password_hash(password),
        nama_lengkap=nama_lengkap,
    )


async def authenticate_seller(username: str, password: str) -> models.Seller:
    seller = await get_seller_by_username(username)
    if not seller or not verify_password(password, seller.hashed_password):
        raise AuthenticationError(INVALID_CREDENTIALS, code="invalid_credentials")
    return seller


async def seed_default_seller(username: Optional[str], password: Optional[str], nama_lengkap: str) -> bool:
    """Creates the bootstrap seller account if configured and missing.

    Returns:
        True if an account was created.
    """
    if not username or not password:
        return False
    if await models.Seller.filter(username=username).exists():
        logger.info(f"Default seller '{username}' already exists")
        return False
    await create_seller(username, password, nama_lengkap)
    logger.info(f"Default seller '{username}' created")
    return True
