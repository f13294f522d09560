"""
Dashboard Service Module

Read-only rollups over the orders table for the seller dashboard. All
figures except the buyer count honour the optional date filter; the buyer
count always reflects the whole customer base.
"""

import datetime
import logging
from typing import Optional

from tortoise.functions import Count, Sum

from ..buyers.models import Buyer
from ..orders.filters import OrderFilter
from ..orders.models import Order, OrderStatus, STATUS_ORDER
from .schemas import DailyBreakdown, DashboardStats, StatusBreakdown

logger = logging.getLogger(__name__)


def _as_int(value) -> int:
    # SUM over no rows comes back as NULL; some backends return Decimal.
    return int(value) if value is not None else 0


def _as_date(value) -> datetime.date:
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    return datetime.date.fromisoformat(str(value))


async def aggregate(order_filter: Optional[OrderFilter] = None) -> DashboardStats:
    """
    Builds the dashboard statistics for the orders selected by `order_filter`.

    Args:
        order_filter: Optional date range; with no filter every order counts.

    Returns:
        DashboardStats: totals, per-status breakdown in fixed status order and
        per-day breakdown in ascending date order.
    """
    order_filter = order_filter or OrderFilter()
    # Status is part of the breakdown itself, never a filter here.
    order_filter = order_filter.with_status(None)

    status_rows = await (
        order_filter.apply(Order.all())
        .annotate(count=Count("order_id"), total_amount=Sum("subtotal"))
        .group_by("status")
        .values("status", "count", "total_amount")
    )
    by_status = {}
    for row in status_rows:
        by_status[OrderStatus(row["status"])] = (_as_int(row["count"]), _as_int(row["total_amount"]))

    status_breakdown = [
        StatusBreakdown(
            status=status,
            count=by_status.get(status, (0, 0))[0],
            total_amount=by_status.get(status, (0, 0))[1],
        )
        for status in STATUS_ORDER
    ]

    daily_rows = await (
        order_filter.apply(Order.all())
        .annotate(
            order_count=Count("order_id"),
            total_income=Sum("subtotal"),
            total_products=Sum("jumlah_produk"),
        )
        .group_by("orderdate")
        .order_by("orderdate")
        .values("orderdate", "order_count", "total_income", "total_products")
    )
    daily_breakdown = [
        DailyBreakdown(
            date=_as_date(row["orderdate"]),
            order_count=_as_int(row["order_count"]),
            total_income=_as_int(row["total_income"]),
            total_products=_as_int(row["total_products"]),
        )
        for row in daily_rows
    ]
    daily_breakdown.sort(key=lambda day: day.date)

    total_buyers = await Buyer.all().count()
    done = next(item for item in status_breakdown if item.status is OrderStatus.DONE)

    stats = DashboardStats(
        total_buyers=total_buyers,
        total_orders=sum(item.count for item in status_breakdown),
        total_income=done.total_amount,
        total_products=sum(day.total_products for day in daily_breakdown),
        count_by_status={item.status.value: item.count for item in status_breakdown},
        status_breakdown=status_breakdown,
        daily_breakdown=daily_breakdown,
    )
    logger.debug(
        f"Dashboard aggregate start={order_filter.start_date} end={order_filter.end_date}: "
        f"{stats.total_orders} orders over {len(daily_breakdown)} days"
    )
    return stats
