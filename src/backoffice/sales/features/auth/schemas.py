"""Pydantic schemas for seller authentication."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, max_length=50)
    password: str = Field(..., min_length=1)


class SellerResponse(BaseModel):
    id: int
    username: str
    nama: str = Field(..., validation_alias="nama_lengkap", description="Seller display name")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: SellerResponse


class TokenData(BaseModel):
    sub: Optional[str] = None
    id: Optional[int] = None
    username: Optional[str] = None
    nama: Optional[str] = None
