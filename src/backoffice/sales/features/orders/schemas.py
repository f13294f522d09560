from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
import datetime

from .models import OrderStatus
from .pricing import MAX_SUBTOTAL


class OrderBase(BaseModel):
    buyer_id: int = Field(..., gt=0)
    orderdate: datetime.date = Field(..., description="Order date (YYYY-MM-DD)")
    # Currency is whole rupiah; fractional or string amounts are rejected outright.
    subtotal: int = Field(..., strict=True, le=MAX_SUBTOTAL, description="Whole rupiah, positive multiple of the unit price")


class OrderCreate(OrderBase):
    status: Optional[OrderStatus] = Field(None, description="Defaults to 'pending'")


class OrderUpdate(OrderBase):
    status: OrderStatus


class OrderPublic(BaseModel):
    order_id: int
    buyer_id: int
    orderdate: datetime.date
    subtotal: int
    jumlah_produk: int
    status: OrderStatus
    created_at: datetime.datetime
    nama: Optional[str] = Field(None, description="Buyer name")
    no_hp: Optional[str] = Field(None, description="Buyer phone number")
    alamat: Optional[str] = Field(None, description="Buyer address")

    model_config = ConfigDict(from_attributes=True)


class ProductPrice(BaseModel):
    price_per_product: int


# Helper schema for common time period queries
class TimePeriodQuery(BaseModel):
    start_date: Optional[datetime.date] = Field(None, description="Start date, inclusive (YYYY-MM-DD)")
    end_date: Optional[datetime.date] = Field(None, description="End date, inclusive (YYYY-MM-DD)")
