import pytest

from apps.orders.adapters import PaymentGatewayStub


@pytest.fixture(autouse=True)
def use_stubs_for_tests(settings):
    settings.USE_HTTP_ADAPTERS = False
    settings.RAZORPAY_KEY_SECRET = "rzp_test_secret"
    PaymentGatewayStub.reset()
    yield
    PaymentGatewayStub.reset()
