"""Unit tests for the Razorpay HTTP adapter.

``httpx.Client.post``/``get`` are monkeypatched, so the adapter's payload,
path, auth and error translation are checked without any network.
"""

import httpx
import pytest

from apps.orders.config import GatewayConfig
from apps.orders.domain import GatewayError
from apps.orders.http_adapters import HttpRazorpayClient
from bookstore.middleware import REQUEST_ID_CTX

CONFIG = GatewayConfig(key_id="rzp_key", key_secret="rzp_secret", base_url="https://gw.test/v1")


def test_create_order_posts_minor_units(monkeypatch):
    seen = {}

    def fake_post(self, url, json=None, headers=None, **kw):
        seen.update(url=url, json=json, headers=headers, base_url=str(self.base_url), auth=self.auth)
        return httpx.Response(200, json={"id": "order_abc", "amount": json["amount"], "currency": "INR", "status": "created"})

    monkeypatch.setattr(httpx.Client, "post", fake_post, raising=True)
    token = REQUEST_ID_CTX.set("rid-1")
    try:
        out = HttpRazorpayClient(CONFIG).create_order(49950, "INR")
    finally:
        REQUEST_ID_CTX.reset(token)

    assert seen["url"] == "/orders"
    assert seen["json"] == {"amount": 49950, "currency": "INR"}
    assert seen["base_url"].startswith("https://gw.test/v1")
    assert isinstance(seen["auth"], httpx.BasicAuth)
    assert seen["headers"]["X-Request-ID"] == "rid-1"
    assert out.id == "order_abc"
    assert out.amount_minor == 49950
    assert out.raw["status"] == "created"


def test_create_order_non_2xx_raises_gateway_error(monkeypatch):
    def fake_post(self, url, json=None, headers=None, **kw):
        return httpx.Response(400, json={"error": {"code": "BAD_REQUEST_ERROR", "description": "amount too low"}})

    monkeypatch.setattr(httpx.Client, "post", fake_post, raising=True)
    with pytest.raises(GatewayError) as e:
        HttpRazorpayClient(CONFIG).create_order(1, "INR")
    assert "amount too low" in str(e.value)


def test_create_order_network_error_raises_gateway_error(monkeypatch):
    def fake_post(self, url, json=None, headers=None, **kw):
        raise httpx.ConnectError("boom")

    monkeypatch.setattr(httpx.Client, "post", fake_post, raising=True)
    with pytest.raises(GatewayError):
        HttpRazorpayClient(CONFIG).create_order(100, "INR")


def test_fetch_payment_ok(monkeypatch):
    def fake_get(self, url, headers=None, **kw):
        assert url == "/payments/pay_1"
        return httpx.Response(
            200,
            json={"id": "pay_1", "amount": 40000, "status": "captured", "method": "upi", "currency": "INR"},
        )

    monkeypatch.setattr(httpx.Client, "get", fake_get, raising=True)
    p = HttpRazorpayClient(CONFIG).fetch_payment("pay_1")
    assert (p.id, p.amount_minor, p.status, p.method, p.currency) == ("pay_1", 40000, "captured", "upi", "INR")
    assert p.raw["amount"] == 40000


def test_fetch_payment_404_raises_gateway_error(monkeypatch):
    def fake_get(self, url, headers=None, **kw):
        return httpx.Response(404, text="not found")

    monkeypatch.setattr(httpx.Client, "get", fake_get, raising=True)
    with pytest.raises(GatewayError):
        HttpRazorpayClient(CONFIG).fetch_payment("pay_missing")


def test_fetch_payment_timeout_raises_gateway_error(monkeypatch):
    def fake_get(self, url, headers=None, **kw):
        raise httpx.ReadTimeout("slow")

    monkeypatch.setattr(httpx.Client, "get", fake_get, raising=True)
    with pytest.raises(GatewayError):
        HttpRazorpayClient(CONFIG).fetch_payment("pay_1")


def test_create_order_non_json_body_raises_gateway_error(monkeypatch):
    def fake_post(self, url, json=None, headers=None, **kw):
        return httpx.Response(200, text="<html>upstream proxy</html>")

    monkeypatch.setattr(httpx.Client, "post", fake_post, raising=True)
    with pytest.raises(GatewayError):
        HttpRazorpayClient(CONFIG).create_order(100, "INR")


def test_create_order_without_id_raises_gateway_error(monkeypatch):
    def fake_post(self, url, json=None, headers=None, **kw):
        return httpx.Response(200, json={"amount": 100, "currency": "INR"})

    monkeypatch.setattr(httpx.Client, "post", fake_post, raising=True)
    with pytest.raises(GatewayError):
        HttpRazorpayClient(CONFIG).create_order(100, "INR")


def test_fetch_payment_non_numeric_amount_raises_gateway_error(monkeypatch):
    def fake_get(self, url, headers=None, **kw):
        return httpx.Response(200, json={"id": "pay_1", "amount": "lots", "status": "captured"})

    monkeypatch.setattr(httpx.Client, "get", fake_get, raising=True)
    with pytest.raises(GatewayError):
        HttpRazorpayClient(CONFIG).fetch_payment("pay_1")
