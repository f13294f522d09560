"""Response envelope shared by every JSON endpoint."""
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    success: bool = Field(True, description="Whether the request succeeded")
    message: Optional[str] = Field(None, description="Human readable outcome")
    data: Optional[DataT] = None


class MessageResponse(BaseModel):
    success: bool = True
    message: str
