"""Service provider helpers for wiring OrderService with ports.

``get_order_service`` returns an ``OrderService`` built from the current
Django settings: a ``GatewayConfig`` is assembled once and injected into both
the service and, when ``settings.USE_HTTP_ADAPTERS`` is truthy, the
``HttpRazorpayClient``. Otherwise the in-process ``PaymentGatewayStub`` is
used, which is what tests and offline development run against.

Views call ``providers.get_order_service()`` through the module so tests can
monkeypatch it with a service wired to their own ports.
"""

from django.conf import settings

from .adapters import PaymentGatewayStub
from .config import GatewayConfig
from .domain import OrderService
from .http_adapters import HttpRazorpayClient
from .repository import OrderRepository


def get_gateway_config() -> GatewayConfig:
    return GatewayConfig.from_settings(settings)


def get_order_service() -> OrderService:
    """Return a configured OrderService instance.

    Returns:
        OrderService: Service wired to the Django order repository and to
        either the HTTP or the stub gateway.
    """
    config = get_gateway_config()
    if getattr(settings, "USE_HTTP_ADAPTERS", True):
        gateway = HttpRazorpayClient(config)
    else:
        gateway = PaymentGatewayStub()
    return OrderService(gateway=gateway, orders=OrderRepository(), config=config)
