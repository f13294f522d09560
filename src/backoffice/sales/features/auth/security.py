import logging
from datetime import timedelta
from typing import Optional, Annotated

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import ExpiredSignatureError, JWTError, jwt
from pydantic import ValidationError

from ....core.access import Actor, Role
from ....core.config import Settings, get_settings
from ....core.exceptions import AuthenticationError
from ....core.security import utcnow
from . import models, schemas

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/login", auto_error=False)

BEARER_HEADERS = {"WWW-Authenticate": "Bearer"}

def create_access_token(
    seller: models.Seller,
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    to_encode = {
        "sub": seller.username,
        "id": seller.id,
        "username": seller.username,
        "nama": seller.nama_lengkap,
        "exp": utcnow() + expires_delta,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)

def decode_access_token(token: str, settings: Settings) -> schemas.TokenData:
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except ExpiredSignatureError:
        raise AuthenticationError("Your login has expired.", code="token_expired", headers=BEARER_HEADERS)
    except JWTError as e:
        logger.warning(f"JWT decoding error: {e}")
        raise AuthenticationError("Could not validate credentials.", code="invalid_token", headers=BEARER_HEADERS)

    try:
        token_data = schemas.TokenData(**{k: payload.get(k) for k in ("sub", "id", "username", "nama")})
    except ValidationError as e:
        logger.warning(f"Token data validation error: {e}")
        raise AuthenticationError("Could not validate credentials.", code="invalid_token", headers=BEARER_HEADERS)
    if token_data.sub is None or token_data.id is None:
        logger.warning("Token is missing its subject or id claim.")
        raise AuthenticationError("Could not validate credentials.", code="invalid_token", headers=BEARER_HEADERS)
    return token_data

async def get_token_data(
    token: Annotated[Optional[str], Depends(oauth2_scheme)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> schemas.TokenData:
    if not token:
        raise AuthenticationError("Please log in first.", headers=BEARER_HEADERS)
    return decode_access_token(token, settings)

async def get_current_seller(
    token_data: Annotated[schemas.TokenData, Depends(get_token_data)],
) -> Actor:
    """Resolve the bearer token to the acting seller.

    Sellers have no per-record ownership over buyers and orders, so they act
    with the admin role in the access policy.
    """
    seller = await models.Seller.get_or_none(id=token_data.id)
    if seller is None or seller.username != token_data.sub:
        logger.warning(f"Seller not found for token subject: {token_data.sub}")
        raise AuthenticationError("Could not validate credentials.", code="invalid_token", headers=BEARER_HEADERS)
    return Actor(id=seller.id, username=seller.username, role=Role.ADMIN)
