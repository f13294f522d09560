"""API routes for portal accounts: registration, login and logout via server-side sessions."""
import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status

from ....common.schemas import ApiResponse, MessageResponse
from ....core.config import Settings, get_settings
from ....core.exceptions import AuthenticationError
from . import models, schemas
from . import security as auth_security
from . import service as auth_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Authentication"])


async def _end_current_session(request: Request, settings: Settings) -> None:
    session_id = request.cookies.get(settings.session_cookie_name)
    if session_id:
        await auth_service.end_session(session_id)


@router.post(
    "/register",
    response_model=ApiResponse[schemas.UserResponse],
    status_code=status.HTTP_201_CREATED,
)
async def register_user(
    user_in: schemas.UserCreate,
    request: Request,
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
):
    user = await auth_service.create_user(user_in.username, user_in.password)
    await _end_current_session(request, settings)
    # New accounts are logged in straight away.
    session = await auth_service.create_session(user, settings.session_max_age_seconds)
    auth_security.set_session_cookie(response, session, settings)
    logger.info(f"Registered user {user.username}")
    return ApiResponse(message="Account created.", data=schemas.UserResponse.model_validate(user))


@router.post("/login", response_model=ApiResponse[schemas.UserResponse])
async def login(
    credentials: schemas.Credentials,
    request: Request,
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
):
    user = await auth_service.authenticate_user(credentials.username, credentials.password)
    # A browser logging in again replaces its session instead of adding one.
    await _end_current_session(request, settings)
    session = await auth_service.create_session(user, settings.session_max_age_seconds)
    auth_security.set_session_cookie(response, session, settings)
    return ApiResponse(message="Login successful.", data=schemas.UserResponse.model_validate(user))


@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
):
    await _end_current_session(request, settings)
    auth_security.clear_session_cookie(response, settings)
    return MessageResponse(message="Logged out.")


@router.get("/check-session", response_model=ApiResponse[schemas.SessionStatus])
async def check_session(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
):
    session_id = request.cookies.get(settings.session_cookie_name)
    if not session_id:
        return ApiResponse(data=schemas.SessionStatus(logged_in=False))
    try:
        user = await auth_service.resolve_session(session_id)
    except AuthenticationError:
        return ApiResponse(data=schemas.SessionStatus(logged_in=False))
    return ApiResponse(
        data=schemas.SessionStatus(logged_in=True, user=schemas.UserResponse.model_validate(user))
    )


@router.get("/dashboard", response_model=ApiResponse[schemas.UserResponse])
async def dashboard(
    current_user: Annotated[models.User, Depends(auth_security.get_current_user)],
):
    return ApiResponse(data=schemas.UserResponse.model_validate(current_user))
