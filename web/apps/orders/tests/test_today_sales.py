"""Daily sales aggregation, cut on India Standard Time days."""

from datetime import datetime, timedelta, timezone as dt_timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from apps.orders import reports
from apps.orders.models import OrderModel

UTC = dt_timezone.utc


def _order(created_at, status="PAID", amount="100.00", counts=(1,)):
    row = OrderModel.objects.create(
        books=[{"book_id": str(uuid4()), "count": c} for c in counts],
        user_name="u",
        user_mobile="1",
        address="a",
        amount=Decimal(amount),
        status=status,
        gateway_order_id=f"order_{uuid4().hex[:14]}",
    )
    OrderModel.objects.filter(pk=row.pk).update(created_at=created_at)
    return row


def test_day_window_is_ist_calendar_day():
    # 20:00 UTC on the 1st is already 01:30 IST on the 2nd
    day, start, end = reports.day_window(datetime(2024, 3, 1, 20, 0, tzinfo=UTC))
    assert day.isoformat() == "2024-03-02"
    assert start == datetime(2024, 3, 1, 18, 30, tzinfo=UTC)
    assert end - start == timedelta(days=1)


@pytest.mark.django_db
def test_today_sales_counts_only_paid_orders_in_window():
    now = datetime(2024, 3, 2, 6, 0, tzinfo=UTC)  # 11:30 IST
    start = datetime(2024, 3, 1, 18, 30, tzinfo=UTC)  # IST midnight

    _order(start, amount="250.00", counts=(2, 1))
    _order(start + timedelta(hours=5), amount="99.50", counts=(4,))
    _order(start + timedelta(hours=1), status="PENDING", amount="1000.00")
    _order(start + timedelta(hours=2), status="FAILED", amount="1000.00")
    _order(start - timedelta(seconds=1), amount="1000.00")  # previous IST day
    _order(start + timedelta(days=1), amount="1000.00")  # next IST day

    summary = reports.today_sales(now)

    assert summary.day.isoformat() == "2024-03-02"
    assert summary.total_orders == 2
    assert summary.total_books_sold == 7
    assert summary.total_revenue == Decimal("349.50")


@pytest.mark.django_db
def test_today_sales_empty_day_is_zero():
    summary = reports.today_sales(datetime(2024, 3, 2, 6, 0, tzinfo=UTC))
    assert summary.as_payload() == {"totalOrders": 0, "totalBooksSold": 0, "totalRevenue": Decimal("0")}


@pytest.mark.django_db
def test_today_sales_endpoint(client):
    _order(datetime.now(UTC), amount="120.00", counts=(3,))
    r = client.get("/api/order/today-sales")
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["timezone"] == "Asia/Kolkata"
    assert body["date"] == reports.day_window()[0].isoformat()
    assert body["data"] == {"totalOrders": 1, "totalBooksSold": 3, "totalRevenue": 120.0}


@pytest.mark.django_db
def test_today_sales_three_paid_one_pending():
    now = datetime(2024, 6, 10, 9, 0, tzinfo=UTC)
    _order(now - timedelta(hours=1), amount="100", counts=(2,))
    _order(now - timedelta(hours=2), amount="250", counts=(1, 2))
    _order(now - timedelta(hours=3), amount="75", counts=(1,))
    _order(now - timedelta(hours=1), status="PENDING", amount="500", counts=(9,))

    summary = reports.today_sales(now)
    assert (summary.total_orders, summary.total_books_sold, summary.total_revenue) == (3, 6, Decimal("425"))
