"""Repository layer for persisting orders.

``OrderRepository`` implements ``OrderStorePort`` on top of the Django ORM
and maps rows to and from the domain ``Order`` dataclass, so the domain
service never sees ORM types. It also serves the read side of the API
(detail and paginated listing).
"""

from typing import Optional

from django.core.paginator import Paginator
from django.db import transaction

from .domain import TERMINAL_STATUSES, Order, OrderItem, OrderStatus, PaymentUpdate
from .models import OrderModel


def to_domain(obj: OrderModel) -> Order:
    """Map an ``OrderModel`` row to a domain ``Order``."""
    return Order(
        id=str(obj.id),
        items=[OrderItem(book_id=str(i["book_id"]), count=int(i["count"])) for i in (obj.books or [])],
        user_name=obj.user_name,
        user_mobile=obj.user_mobile,
        address=obj.address,
        amount=obj.amount,
        status=OrderStatus(obj.status),
        gateway_order_id=obj.gateway_order_id,
        gateway_payment_id=obj.gateway_payment_id,
        gateway_signature=obj.gateway_signature,
        gateway_status=obj.gateway_status,
        payment_method=obj.payment_method,
        currency=obj.currency,
        metadata=dict(obj.metadata or {}),
        created_at=obj.created_at,
        updated_at=obj.updated_at,
    )


class OrderRepository:
    """Repository that persists Order domain objects using Django ORM."""

    def create(self, order: Order) -> Order:
        """Insert a new order row.

        Args:
            order: Domain ``Order`` with items, customer fields, claimed
                amount and gateway order id already set.

        Returns:
            Order: The stored order, with ``id`` and timestamps populated.
        """
        obj = OrderModel.objects.create(
            books=[{"book_id": str(i.book_id), "count": i.count} for i in order.items],
            user_name=order.user_name,
            user_mobile=order.user_mobile,
            address=order.address,
            amount=order.amount,
            status=order.status.value,
            gateway_order_id=order.gateway_order_id,
            currency=order.currency or "INR",
            metadata=order.metadata or {},
        )
        return to_domain(obj)

    def apply_payment(self, gateway_order_id: str, update: PaymentUpdate) -> Optional[Order]:
        """Write a verification result to the order with this gateway id.

        The row is locked (``SELECT ... FOR UPDATE``) for the duration of the
        transaction so concurrent verifications of the same gateway order
        run one after the other. Only a PENDING order is written; a PAID or
        FAILED order is returned as stored.

        Returns:
            Order | None: The stored order, or None when no row matches.
        """
        with transaction.atomic():
            obj = OrderModel.objects.select_for_update().filter(gateway_order_id=gateway_order_id).first()
            if obj is None:
                return None
            if OrderStatus(obj.status) in TERMINAL_STATUSES:
                return to_domain(obj)

            obj.gateway_payment_id = update.payment_id
            obj.gateway_signature = update.signature
            obj.amount = update.amount
            obj.status = update.status.value
            obj.gateway_status = update.gateway_status
            obj.payment_method = update.payment_method
            if update.currency:
                obj.currency = update.currency
            obj.metadata = {**(obj.metadata or {}), **update.metadata}
            obj.save()
            return to_domain(obj)

    def get(self, order_id) -> Optional[Order]:
        obj = OrderModel.objects.filter(pk=order_id).first()
        return to_domain(obj) if obj else None

    def list_page(self, page: int, limit: int) -> tuple[list[Order], int, int, int]:
        """Return ``(orders, total, current_page, total_pages)``, newest first."""
        p = Paginator(OrderModel.objects.order_by("-created_at"), limit)
        page_obj = p.get_page(page)
        orders = [to_domain(o) for o in page_obj.object_list]
        return orders, p.count, page_obj.number, (p.num_pages if p.count else 0)
