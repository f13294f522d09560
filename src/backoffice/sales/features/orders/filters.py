"""Composable predicates for order queries.

Each optional criterion contributes at most one `Q` predicate; the list is
ANDed onto a queryset. Criteria that are not set contribute nothing, so an
empty filter selects every order.
"""
import datetime
from dataclasses import dataclass, replace
from typing import List, Optional

from tortoise.expressions import Q
from tortoise.queryset import QuerySet

from .models import Order, OrderStatus


@dataclass(frozen=True)
class OrderFilter:
    start_date: Optional[datetime.date] = None
    end_date: Optional[datetime.date] = None
    status: Optional[OrderStatus] = None

    def predicates(self) -> List[Q]:
        predicates = []
        if self.start_date is not None:
            predicates.append(Q(orderdate__gte=self.start_date))
        if self.end_date is not None:
            predicates.append(Q(orderdate__lte=self.end_date))
        if self.status is not None:
            predicates.append(Q(status=self.status))
        return predicates

    def with_status(self, status: Optional[OrderStatus]) -> "OrderFilter":
        return replace(self, status=status)

    def apply(self, queryset: QuerySet[Order]) -> QuerySet[Order]:
        predicates = self.predicates()
        if not predicates:
            return queryset
        return queryset.filter(*predicates)
