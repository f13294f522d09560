from fastapi import APIRouter, Depends, Query, status
from typing import Annotated, List, Optional

from ....common.schemas import ApiResponse, MessageResponse
from ....core.access import Actor
from ....core.config import Settings, get_settings
from ....core.exceptions import BadRequestError
from ..auth.security import get_current_seller
from .filters import OrderFilter
from .models import OrderStatus
from .schemas import OrderCreate, OrderPublic, OrderUpdate, ProductPrice, TimePeriodQuery
from . import service as order_service

router = APIRouter(tags=["Orders"])


def _parse_status(value: Optional[str]) -> Optional[OrderStatus]:
    if not value or value == "all":
        return None
    try:
        return OrderStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in OrderStatus)
        raise BadRequestError(f"Unknown status '{value}'. Use one of: {allowed}, all.")


@router.get("/product-price", response_model=ApiResponse[ProductPrice])
async def get_product_price(settings: Annotated[Settings, Depends(get_settings)]):
    return ApiResponse(data=ProductPrice(price_per_product=settings.unit_price))


@router.get("/order", response_model=ApiResponse[List[OrderPublic]])
async def list_orders(current_seller: Annotated[Actor, Depends(get_current_seller)]):
    return ApiResponse(data=await order_service.list_orders())


# Declared before /order/{order_id} so "filter" is never taken for an id.
@router.get("/order/filter", response_model=ApiResponse[List[OrderPublic]])
async def filter_orders(
    current_seller: Annotated[Actor, Depends(get_current_seller)],
    period: TimePeriodQuery = Depends(),
    status_filter: Optional[str] = Query(None, alias="status", description="pending, on process, done or all"),
):
    order_filter = OrderFilter(
        start_date=period.start_date,
        end_date=period.end_date,
        status=_parse_status(status_filter),
    )
    return ApiResponse(data=await order_service.list_orders(order_filter))


@router.post("/order", response_model=ApiResponse[OrderPublic], status_code=status.HTTP_201_CREATED)
async def create_order(
    order_in: OrderCreate,
    current_seller: Annotated[Actor, Depends(get_current_seller)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    order = await order_service.create_order(order_in, settings.unit_price)
    return ApiResponse(message="Order saved.", data=order)


@router.get("/order/{order_id}", response_model=ApiResponse[OrderPublic])
async def get_order(
    order_id: int,
    current_seller: Annotated[Actor, Depends(get_current_seller)],
):
    return ApiResponse(data=await order_service.get_order(current_seller, order_id))


@router.put("/order/{order_id}", response_model=ApiResponse[OrderPublic])
async def update_order(
    order_id: int,
    order_in: OrderUpdate,
    current_seller: Annotated[Actor, Depends(get_current_seller)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    order = await order_service.update_order(current_seller, order_id, order_in, settings.unit_price)
    return ApiResponse(message="Order updated.", data=order)


@router.delete("/order/{order_id}", response_model=MessageResponse)
async def delete_order(
    order_id: int,
    current_seller: Annotated[Actor, Depends(get_current_seller)],
):
    await order_service.delete_order(current_seller, order_id)
    return MessageResponse(message="Order deleted.")
