"""Domain models, ports and service for orders.

This module contains the dataclasses used as DTOs for orders and gateway
payloads, protocol definitions (ports) for the payment gateway and the order
store, and the domain service that runs the order/payment reconciliation
flow:

    create_order  -> gateway order + PENDING order record
    verify_payment -> signature check, authoritative gateway re-fetch,
                      single status transition on the stored order

The service performs no I/O of its own; everything external goes through
the ports handed to it at construction time together with a
``GatewayConfig``.
"""

import hashlib
import hmac
import logging
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import List, Optional, Protocol

from .config import GatewayConfig

logger = logging.getLogger(__name__)


# ---- Enums ----
class OrderStatus(str, Enum):
    """Business status of an order.

    Orders start PENDING and move at most once, at verification time, to
    PAID or FAILED. Both of those are terminal.
    """

    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"


TERMINAL_STATUSES = frozenset({OrderStatus.PAID, OrderStatus.FAILED})

# gateway payment status -> business status; anything else stays PENDING
GATEWAY_STATUS_MAP = {
    "captured": OrderStatus.PAID,
    "failed": OrderStatus.FAILED,
}


class GatewayError(Exception):
    """The payment gateway could not be reached or rejected the call."""


# ---- Entities / DTOs ----
@dataclass(frozen=True)
class OrderItem:
    """A single line item: a catalog book and how many copies.

    Attributes:
        book_id: Catalog ``Book`` identifier (string form of its UUID).
        count: Number of copies, at least 1.
    """

    book_id: str
    count: int


@dataclass
class Order:
    """Container for order data.

    Attributes:
        id: Persistent identifier, or None if not yet saved.
        items: Line items, in the order the client sent them.
        user_name / user_mobile / address: Free-text customer fields.
        amount: Total in major currency units. Claimed by the client at
            creation, replaced by the gateway-confirmed amount at
            verification.
        status: Current ``OrderStatus``.
        gateway_order_id: Gateway order id; unique correlation key.
        gateway_payment_id / gateway_signature: Set by verification.
        gateway_status / payment_method / currency: Informational copy of
            the gateway payment record.
        metadata: Auxiliary gateway data.
    """

    id: Optional[str]
    items: List[OrderItem]
    user_name: str = ""
    user_mobile: str = ""
    address: str = ""
    amount: Optional[Decimal] = None
    status: OrderStatus = OrderStatus.PENDING
    gateway_order_id: str = ""
    gateway_payment_id: str = ""
    gateway_signature: str = ""
    gateway_status: str = ""
    payment_method: str = ""
    currency: str = ""
    metadata: dict = field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(frozen=True)
class GatewayOrder:
    """Remote payment order as returned by the gateway.

    ``raw`` is the untouched gateway descriptor handed back to the client so
    it can open the checkout.
    """

    id: str
    amount_minor: int
    currency: str
    raw: dict = field(default_factory=dict)


@dataclass(frozen=True)
class GatewayPayment:
    """Authoritative payment record fetched from the gateway."""

    id: str
    amount_minor: int
    status: str
    method: str = ""
    currency: str = ""
    raw: dict = field(default_factory=dict)


@dataclass(frozen=True)
class PaymentUpdate:
    """Field values written to an order by a successful verification."""

    payment_id: str
    signature: str
    amount: Decimal
    status: OrderStatus
    gateway_status: str
    payment_method: str
    currency: str
    metadata: dict


# ---- Money / signature helpers ----
def to_minor_units(amount: Decimal) -> int:
    """Major units -> gateway minor units (e.g. rupees -> paise), half-up."""
    return int((Decimal(amount) * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_minor_units(amount_minor: int) -> Decimal:
    """Gateway minor units -> major units with two decimal places."""
    return (Decimal(int(amount_minor)) / 100).quantize(Decimal("0.01"))


def payment_signature(secret: str, gateway_order_id: str, gateway_payment_id: str) -> str:
    """Hex HMAC-SHA256 of ``"<order_id>|<payment_id>"`` keyed by ``secret``."""
    body = f"{gateway_order_id}|{gateway_payment_id}"
    return hmac.new(secret.encode("utf-8"), body.encode("utf-8"), hashlib.sha256).hexdigest()


def signature_matches(secret: str, gateway_order_id: str, gateway_payment_id: str, signature: str) -> bool:
    expected = payment_signature(secret, gateway_order_id, gateway_payment_id)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))


def status_for(gateway_status: str) -> OrderStatus:
    return GATEWAY_STATUS_MAP.get((gateway_status or "").lower(), OrderStatus.PENDING)


# ---- Ports (DIP) ----
class PaymentGatewayPort(Protocol):
    """Port describing the payment gateway operations used by the domain."""

    def create_order(self, amount_minor: int, currency: str) -> GatewayOrder:
        """Create a remote payment order sized in minor units.

        Raises:
            GatewayError: When the gateway is unreachable or refuses.
        """
        raise NotImplementedError()

    def fetch_payment(self, payment_id: str) -> GatewayPayment:
        """Fetch the gateway's own record of a payment.

        Raises:
            GatewayError: When the gateway is unreachable or refuses.
        """
        raise NotImplementedError()


class OrderStorePort(Protocol):
    """Port describing order persistence used by the domain."""

    def create(self, order: Order) -> Order:
        """Insert a new order and return it with id and timestamps set."""
        raise NotImplementedError()

    def apply_payment(self, gateway_order_id: str, update: PaymentUpdate) -> Optional[Order]:
        """Apply a verification result to the order with this gateway id.

        Implementations must serialize concurrent calls for the same
        ``gateway_order_id``, write only while the order is PENDING, and
        return the stored order (updated or not). Returns None when no
        order matches; never inserts.
        """
        raise NotImplementedError()


# ---- Domain service ----
class OrderService:
    """Domain service for placing and reconciling orders.

    The service trusts the gateway, not the client: a valid signature only
    proves the identifiers were issued by the gateway, so the outcome and
    the amount are always re-read from the gateway before anything is
    written.
    """

    def __init__(self, gateway: PaymentGatewayPort, orders: OrderStorePort, config: GatewayConfig):
        """Initialize the service with required dependencies.

        Args:
            gateway: PaymentGatewayPort used to create and look up payments.
            orders: OrderStorePort used to persist orders.
            config: Gateway settings; ``key_secret`` signs payments and
                ``currency`` sizes new gateway orders.
        """
        self.gateway = gateway
        self.orders = orders
        self.config = config

    def create_order(self, order: Order) -> tuple[Order, GatewayOrder]:
        """Open a gateway order and persist a PENDING order pointing at it.

        Args:
            order: Unsaved order carrying items, customer fields and the
                claimed amount.

        Returns:
            tuple[Order, GatewayOrder]: The persisted order and the raw
            gateway order the client needs to start checkout.

        Raises:
            ValueError: 'EMPTY_ORDER' when there are no items,
                'INVALID_AMOUNT' when the amount is missing or not positive.
            GatewayError: When the gateway call fails. Nothing is persisted
                in that case.
        """
        if not order.items:
            raise ValueError("EMPTY_ORDER")
        if order.amount is None or not order.amount > 0:
            raise ValueError("INVALID_AMOUNT")

        currency = self.config.currency
        gateway_order = self.gateway.create_order(to_minor_units(order.amount), currency)

        order.status = OrderStatus.PENDING
        order.gateway_order_id = gateway_order.id
        order.currency = currency
        order.metadata = {"source": "frontend", **(order.metadata or {})}
        # A failure past this point leaves the gateway order orphaned.
        saved = self.orders.create(order)
        logger.info(
            "order created",
            extra={"order_id": saved.id, "gateway_order_id": gateway_order.id, "amount_minor": gateway_order.amount_minor},
        )
        return saved, gateway_order

    def verify_payment(self, gateway_order_id: str, gateway_payment_id: str, signature: str) -> Order:
        """Reconcile an order against the gateway after client checkout.

        Args:
            gateway_order_id: Gateway order id returned at creation.
            gateway_payment_id: Gateway payment id reported by the client.
            signature: Gateway-issued HMAC over both ids.

        Returns:
            Order: The stored order after reconciliation. Its status and
            amount reflect the gateway record, or its existing terminal
            state when it had already been settled.

        Raises:
            ValueError: 'MISSING_FIELDS' if an identifier is absent,
                'INVALID_SIGNATURE' on signature mismatch (nothing is
                written), 'ORDER_NOT_FOUND' when no order carries
                ``gateway_order_id``.
            GatewayError: When the payment cannot be fetched.
        """
        if not (gateway_order_id and gateway_payment_id and signature):
            raise ValueError("MISSING_FIELDS")

        if not signature_matches(self.config.key_secret, gateway_order_id, gateway_payment_id, signature):
            logger.warning(
                "payment signature mismatch",
                extra={"gateway_order_id": gateway_order_id, "gateway_payment_id": gateway_payment_id},
            )
            raise ValueError("INVALID_SIGNATURE")

        payment = self.gateway.fetch_payment(gateway_payment_id)
        update = PaymentUpdate(
            payment_id=gateway_payment_id,
            signature=signature,
            amount=from_minor_units(payment.amount_minor),
            status=status_for(payment.status),
            gateway_status=payment.status,
            payment_method=payment.method,
            currency=payment.currency,
            metadata={"gateway_payment": payment.raw},
        )

        order = self.orders.apply_payment(gateway_order_id, update)
        if order is None:
            logger.warning("verification for unknown order", extra={"gateway_order_id": gateway_order_id})
            raise ValueError("ORDER_NOT_FOUND")

        logger.info(
            "payment verified",
            extra={
                "order_id": order.id,
                "gateway_order_id": gateway_order_id,
                "gateway_status": payment.status,
                "status": order.status.value,
            },
        )
        return order
