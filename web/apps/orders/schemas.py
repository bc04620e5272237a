"""Pydantic schemas for orders.

Request DTOs validate the bodies of the create and verify endpoints.
``OrderReadDTO`` shapes the order payload every order response returns,
with catalog details merged into each line item.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from apps.catalog.lookup import book_summaries
from .domain import Order


class OrderItemIn(BaseModel):
    """Input schema for a single order line item.

    Attributes:
        book_id: Catalog book identifier.
        count: Positive number of copies.
    """

    book_id: uuid.UUID
    count: int = Field(ge=1)


class CreateOrderDTO(BaseModel):
    """Schema for creating an order.

    ``books`` and ``amount`` are only type-checked here; emptiness and
    positivity are business rules enforced by ``OrderService`` so the client
    gets a specific message for each.

    Attributes:
        books: Line items.
        user_mobile / user_name / address: Customer fields, required.
        amount: Claimed total in major currency units.
    """

    books: list[OrderItemIn]
    user_mobile: str = Field(min_length=1, max_length=32)
    user_name: str = Field(min_length=1, max_length=200)
    address: str = Field(min_length=1)
    amount: Decimal = Field(max_digits=12, decimal_places=2)

    @field_validator("user_mobile", "user_name", "address")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("must not be blank")
        return v2


class VerifyPaymentDTO(BaseModel):
    """Identifiers posted by the client after gateway checkout.

    All three are optional at the schema level; the service reports any
    missing one as a single ``MISSING_FIELDS`` error.
    """

    razorpay_order_id: Optional[str] = None
    razorpay_payment_id: Optional[str] = None
    razorpay_signature: Optional[str] = None


class OrderBookOut(BaseModel):
    book_id: str
    count: int
    bookName: Optional[str] = None
    authorName: Optional[str] = None
    mrp: Optional[Decimal] = None
    imageUrl: Optional[str] = None


class OrderReadDTO(BaseModel):
    """Read model returned by the order endpoints."""

    id: uuid.UUID
    books: list[OrderBookOut]
    user_name: str
    user_mobile: str
    address: str
    amount: Decimal
    status: str
    razorpay_order_id: str
    razorpay_payment_id: Optional[str] = None
    razorpay_signature: Optional[str] = None
    gateway_status: Optional[str] = None
    payment_method: Optional[str] = None
    currency: str
    metadata: dict = Field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, order: Order, books: Optional[dict] = None) -> "OrderReadDTO":
        """Build the read model; ``books`` is a ``book_summaries`` result.

        Line items whose book is gone keep only ``book_id`` and ``count``.
        """
        books = books or {}
        return cls(
            id=order.id,
            books=[
                OrderBookOut(book_id=i.book_id, count=i.count, **books.get(i.book_id, {}))
                for i in order.items
            ],
            user_name=order.user_name,
            user_mobile=order.user_mobile,
            address=order.address,
            amount=order.amount,
            status=order.status.value,
            razorpay_order_id=order.gateway_order_id,
            razorpay_payment_id=order.gateway_payment_id or None,
            razorpay_signature=order.gateway_signature or None,
            gateway_status=order.gateway_status or None,
            payment_method=order.payment_method or None,
            currency=order.currency,
            metadata=order.metadata,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )


def serialize_orders(orders: list[Order]) -> list[dict]:
    """Dump orders with one catalog query for all their line items."""
    books = book_summaries(i.book_id for o in orders for i in o.items)
    return [OrderReadDTO.from_domain(o, books).model_dump() for o in orders]


def serialize_order(order: Order) -> dict:
    return serialize_orders([order])[0]
