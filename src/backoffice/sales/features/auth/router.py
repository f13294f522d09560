"""API routes for seller login and token checks."""
import logging
from fastapi import APIRouter, Depends
from typing import Annotated

from ....common.schemas import ApiResponse
from ....core.config import Settings, get_settings
from . import schemas
from . import security as auth_security
from . import service as auth_service

logger = logging.getLogger(__name__)
router = APIRouter(tags=["Authentication"])

@router.post("/login", response_model=ApiResponse[schemas.Token])
async def login_for_access_token(
    credentials: schemas.LoginRequest,
    settings: Annotated[Settings, Depends(get_settings)],
):
    seller = await auth_service.authenticate_seller(credentials.username, credentials.password)
    access_token = auth_security.create_access_token(seller, settings)
    logger.info(f"Seller {seller.username} logged in")
    return ApiResponse(
        message="Login successful.",
        data=schemas.Token(
            access_token=access_token,
            user=schemas.SellerResponse.model_validate(seller),
        ),
    )

@router.get("/check-auth", response_model=ApiResponse[schemas.SellerResponse])
async def check_auth(
    token_data: Annotated[schemas.TokenData, Depends(auth_security.get_token_data)],
):
    return ApiResponse(
        data=schemas.SellerResponse(id=token_data.id, username=token_data.username or token_data.sub, nama=token_data.nama or "")
    )
