"""HTTP adapter for the Razorpay REST API.

This module implements ``PaymentGatewayPort`` using ``httpx``:

- ``POST {base_url}/orders`` creates the gateway order for a checkout.
- ``GET {base_url}/payments/{id}`` fetches the authoritative payment.

Requests authenticate with HTTP Basic (``key_id:key_secret``) from the
injected ``GatewayConfig`` and propagate ``X-Request-ID`` from the ContextVar
set by ``bookstore.middleware``. Calls are single-shot: transport errors and
non-2xx answers are raised as ``GatewayError`` with no retry.
"""

import logging
from typing import Optional

import httpx

from bookstore.middleware import REQUEST_ID_CTX
from .config import GatewayConfig
from .domain import GatewayError, GatewayOrder, GatewayPayment, PaymentGatewayPort

logger = logging.getLogger(__name__)


def _request_headers(extra: Optional[dict] = None) -> dict:
    """Build base headers including X-Request-ID and any extras.

    Args:
        extra: Optional dict of additional headers to include.

    Returns:
        dict: Final headers dictionary for the outgoing request.
    """
    headers: dict[str, str] = {"Accept": "application/json"}
    rid = REQUEST_ID_CTX.get()
    if rid and rid != "-":
        headers["X-Request-ID"] = rid
    if extra:
        headers.update(extra)
    return headers


def _error_detail(resp: httpx.Response) -> str:
    """Best-effort ``error.description`` from a Razorpay error body."""
    try:
        body = resp.json()
    except ValueError:
        return resp.text[:200]
    err = body.get("error") if isinstance(body, dict) else None
    if isinstance(err, dict):
        return str(err.get("description") or err.get("code") or "")
    return ""


class HttpRazorpayClient(PaymentGatewayPort):
    """HTTP client for the Razorpay orders and payments endpoints."""

    def __init__(self, config: GatewayConfig):
        self.config = config

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.config.base_url,
            auth=(self.config.key_id, self.config.key_secret),
            timeout=self.config.timeout_secs,
        )

    def _checked(self, resp: httpx.Response, action: str) -> dict:
        if resp.status_code // 100 != 2:
            detail = _error_detail(resp)
            logger.error("gateway %s failed", action, extra={"status": resp.status_code, "detail": detail})
            raise GatewayError(f"{action} failed with HTTP {resp.status_code}: {detail}".rstrip(": "))
        try:
            data = resp.json()
        except ValueError as e:
            logger.error("gateway %s returned a non-JSON body", action, extra={"status": resp.status_code})
            raise GatewayError(f"{action} returned a non-JSON body") from e
        if not isinstance(data, dict):
            raise GatewayError(f"{action} returned an unexpected body")
        return data

    def create_order(self, amount_minor: int, currency: str) -> GatewayOrder:
        """Create a Razorpay order.

        Args:
            amount_minor: Amount in minor units (paise), positive integer.
            currency: Three-letter ISO currency code.

        Returns:
            GatewayOrder: Order id, echoed amount/currency and the raw body.

        Raises:
            GatewayError: On transport errors, non-2xx responses or
                malformed bodies.
        """
        payload = {"amount": amount_minor, "currency": currency}
        try:
            with self._client() as client:
                resp = client.post("/orders", json=payload, headers=_request_headers())
        except httpx.RequestError as e:
            logger.error("gateway create_order unreachable", extra={"error": str(e)})
            raise GatewayError(f"create_order unreachable: {e}") from e

        data = self._checked(resp, "create_order")
        try:
            return GatewayOrder(
                id=str(data["id"]),
                amount_minor=int(data.get("amount", amount_minor)),
                currency=data.get("currency", currency),
                raw=data,
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.error("gateway create_order returned a malformed order", extra={"error": repr(e)})
            raise GatewayError("create_order returned a malformed order") from e

    def fetch_payment(self, payment_id: str) -> GatewayPayment:
        """Fetch a Razorpay payment by id.

        Args:
            payment_id: Gateway payment id (``pay_...``).

        Returns:
            GatewayPayment: Amount in minor units, status, method, currency
            and the raw body.

        Raises:
            GatewayError: On transport errors, non-2xx responses or
                malformed bodies.
        """
        try:
            with self._client() as client:
                resp = client.get(f"/payments/{payment_id}", headers=_request_headers())
        except httpx.RequestError as e:
            logger.error("gateway fetch_payment unreachable", extra={"error": str(e)})
            raise GatewayError(f"fetch_payment unreachable: {e}") from e

        data = self._checked(resp, "fetch_payment")
        try:
            return GatewayPayment(
                id=data.get("id", payment_id),
                amount_minor=int(data["amount"]),
                status=str(data.get("status", "")),
                method=str(data.get("method") or ""),
                currency=str(data.get("currency") or ""),
                raw=data,
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.error("gateway fetch_payment returned a malformed payment", extra={"error": repr(e)})
            raise GatewayError("fetch_payment returned a malformed payment") from e
