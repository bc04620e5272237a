"""Read-side sales aggregation over paid orders.

Calendar days are cut in India Standard Time, a fixed UTC+05:30 offset, no
matter what ``settings.TIME_ZONE`` says: "today" for the bookstore is the
IST calendar day.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone as dt_timezone
from decimal import Decimal
from typing import Optional

from django.db.models import Count, Sum
from django.utils import timezone

from .models import OrderModel

IST = dt_timezone(timedelta(hours=5, minutes=30))
IST_NAME = "Asia/Kolkata"


@dataclass(frozen=True)
class SalesSummary:
    day: date
    total_orders: int
    total_books_sold: int
    total_revenue: Decimal

    def as_payload(self) -> dict:
        return {
            "totalOrders": self.total_orders,
            "totalBooksSold": self.total_books_sold,
            "totalRevenue": self.total_revenue,
        }


def paid_orders():
    return OrderModel.objects.filter(status=OrderModel.Status.PAID)


def day_window(now: Optional[datetime] = None) -> tuple[date, datetime, datetime]:
    """Return ``(ist_date, start, end)`` for the IST day containing ``now``.

    ``start`` is inclusive and ``end`` exclusive; both are aware datetimes.
    """
    now = now or timezone.now()
    if timezone.is_naive(now):
        now = timezone.make_aware(now, dt_timezone.utc)
    day = now.astimezone(IST).date()
    start = datetime.combine(day, time.min, tzinfo=IST)
    return day, start, start + timedelta(days=1)


def sales_between(start: datetime, end: datetime):
    """Aggregate paid orders created in ``[start, end)``.

    Returns:
        tuple[int, int, Decimal]: order count, copies sold, revenue.
    """
    qs = paid_orders().filter(created_at__gte=start, created_at__lt=end)
    agg = qs.aggregate(orders=Count("id"), revenue=Sum("amount"))
    books_sold = sum(
        int(item.get("count", 0))
        for books in qs.values_list("books", flat=True)
        for item in (books or [])
    )
    return agg["orders"] or 0, books_sold, agg["revenue"] or Decimal("0")


def today_sales(now: Optional[datetime] = None) -> SalesSummary:
    day, start, end = day_window(now)
    orders, books_sold, revenue = sales_between(start, end)
    return SalesSummary(day=day, total_orders=orders, total_books_sold=books_sold, total_revenue=revenue)
