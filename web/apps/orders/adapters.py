"""In-process stub adapter for the payment gateway port.

``PaymentGatewayStub`` implements ``PaymentGatewayPort`` without network
calls. It is used by tests and by local development when
``settings.USE_HTTP_ADAPTERS`` is off. The stub keeps a class-level ledger so
that separate instances (one per request, as built by the provider) see the
same orders and payments, and ``pay`` stands in for the customer completing
checkout on the gateway's side.
"""

import uuid
from typing import Dict

from .domain import GatewayError, GatewayOrder, GatewayPayment, PaymentGatewayPort


class PaymentGatewayStub(PaymentGatewayPort):
    """Deterministic fake of the Razorpay orders/payments API.

    Orders get ids ``order_<hex>`` and payments ``pay_<hex>``. Fetching a
    payment that was never created through ``pay`` raises ``GatewayError``,
    like a 404 from the real gateway.
    """

    orders: Dict[str, dict] = {}
    payments: Dict[str, dict] = {}

    @classmethod
    def reset(cls) -> None:
        cls.orders.clear()
        cls.payments.clear()

    @classmethod
    def pay(cls, gateway_order_id: str, status: str = "captured", amount_minor: int | None = None,
            method: str = "upi") -> str:
        """Record a payment against a stub order and return its payment id.

        Args:
            gateway_order_id: Id returned earlier by ``create_order``.
            status: Gateway payment status ('captured', 'failed', ...).
            amount_minor: Amount actually paid; defaults to the order amount.
            method: Payment method label.
        """
        order = cls.orders.get(gateway_order_id)
        if order is None:
            raise GatewayError(f"unknown gateway order {gateway_order_id}")
        payment_id = f"pay_{uuid.uuid4().hex[:14]}"
        cls.payments[payment_id] = {
            "id": payment_id,
            "entity": "payment",
            "order_id": gateway_order_id,
            "amount": order["amount"] if amount_minor is None else amount_minor,
            "currency": order["currency"],
            "status": status,
            "method": method,
        }
        return payment_id

    def create_order(self, amount_minor: int, currency: str) -> GatewayOrder:
        if amount_minor <= 0:
            raise GatewayError("amount must be at least 1 minor unit")
        order_id = f"order_{uuid.uuid4().hex[:14]}"
        raw = {
            "id": order_id,
            "entity": "order",
            "amount": amount_minor,
            "currency": currency,
            "status": "created",
        }
        self.orders[order_id] = raw
        return GatewayOrder(id=order_id, amount_minor=amount_minor, currency=currency, raw=dict(raw))

    def fetch_payment(self, payment_id: str) -> GatewayPayment:
        raw = self.payments.get(payment_id)
        if raw is None:
            raise GatewayError(f"payment {payment_id} not found")
        return GatewayPayment(
            id=payment_id,
            amount_minor=raw["amount"],
            status=raw["status"],
            method=raw["method"],
            currency=raw["currency"],
            raw=dict(raw),
        )
