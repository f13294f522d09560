from fastapi import APIRouter, Depends

from ....common.schemas import ApiResponse
from ..auth.security import get_current_seller
from ..orders.filters import OrderFilter
from ..orders.schemas import TimePeriodQuery
from .schemas import DashboardStats
from . import service as dashboard_service

router = APIRouter(
    tags=["Dashboard"],
    dependencies=[Depends(get_current_seller)],
)


@router.get("/dashboard-stats", response_model=ApiResponse[DashboardStats])
async def get_dashboard_stats():
    return ApiResponse(data=await dashboard_service.aggregate())


@router.get("/dashboard-filter", response_model=ApiResponse[DashboardStats])
async def get_filtered_dashboard_stats(period: TimePeriodQuery = Depends()):
    order_filter = OrderFilter(start_date=period.start_date, end_date=period.end_date)
    return ApiResponse(data=await dashboard_service.aggregate(order_filter))
