from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from typing import Optional
import datetime


class ReportCreate(BaseModel):
    nama: Optional[str] = Field(None, max_length=255, description="Reporter name, 'Anonim' when empty")
    email: Optional[str] = Field(None, max_length=255, description="Contact email, '-' when empty")
    kategori: Optional[str] = Field(None, max_length=100)
    # Older clients send the body as "laporan".
    isi: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("isi", "laporan"),
        description="Report body",
    )


class ReportUpdate(BaseModel):
    id: int
    nama: Optional[str] = Field(None, max_length=255)
    email: Optional[str] = Field(None, max_length=255)
    kategori: Optional[str] = Field(None, max_length=100)
    isi: Optional[str] = Field(None, min_length=1)

    @field_validator("isi")
    @classmethod
    def isi_not_null(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("Report body cannot be null")
        return v


class ReportDelete(BaseModel):
    id: int


class ReportStatusUpdate(BaseModel):
    id: int
    status: str = Field(..., min_length=1, max_length=50)


class ReportPublic(BaseModel):
    id: int
    user_id: int
    nama: str
    email: str
    kategori: Optional[str] = None
    isi: str
    status: str
    created_at: datetime.datetime
    updated_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)


class ReportWithReporter(ReportPublic):
    username: Optional[str] = Field(None, description="Username of the reporter")
