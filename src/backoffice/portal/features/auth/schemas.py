"""Pydantic schemas for portal authentication, defining the structure for request and response data."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from ....core.access import Role


class Credentials(BaseModel):
    username: str = Field(..., min_length=1, max_length=100, description="Username")
    password: str = Field(..., min_length=1, description="User password")


class UserCreate(Credentials):
    pass


class UserResponse(BaseModel):
    id: int = Field(..., description="User identifier")
    username: str
    role: Role = Field(..., description="User role (user or admin)")

    model_config = ConfigDict(from_attributes=True)


class SessionStatus(BaseModel):
    logged_in: bool
    user: Optional[UserResponse] = None
