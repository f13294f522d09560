"""Dashboard API Schemas

Response models for the sales dashboard rollups. The status breakdown always
lists every order status in a fixed order, including statuses with no orders;
the daily breakdown only lists dates that have at least one order.
"""
from pydantic import BaseModel
from typing import Dict, List
import datetime

from ..orders.models import OrderStatus


class StatusBreakdown(BaseModel):
    status: OrderStatus
    count: int
    total_amount: int


class DailyBreakdown(BaseModel):
    date: datetime.date
    order_count: int
    total_income: int
    total_products: int


class DashboardStats(BaseModel):
    total_buyers: int
    total_orders: int
    total_income: int
    total_products: int
    count_by_status: Dict[str, int]
    status_breakdown: List[StatusBreakdown]
    daily_breakdown: List[DailyBreakdown]
