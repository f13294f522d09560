from pydantic import BaseModel, ConfigDict, Field
import datetime


class BuyerBase(BaseModel):
    nama: str = Field(..., min_length=1, max_length=100, description="Buyer name")
    alamat: str = Field(..., min_length=1, description="Delivery address")
    no_hp: str = Field(..., min_length=1, max_length=20, description="Phone number")


class BuyerCreate(BuyerBase):
    pass


class BuyerUpdate(BuyerBase):
    pass


class BuyerPublic(BuyerBase):
    buyer_id: int
    created_at: datetime.datetime

    model_config = ConfigDict(from_attributes=True)
