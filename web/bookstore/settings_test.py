from .settings import *  # noqa: F401,F403

DEBUG = False

SECRET_KEY = "test-secret-key"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

ALLOWED_HOSTS = ["testserver"]

USE_HTTP_ADAPTERS = False
RAZORPAY_KEY_ID = "rzp_test_key"
RAZORPAY_KEY_SECRET = "rzp_test_secret"
RAZORPAY_BASE_URL = "https://razorpay.test/v1"

# throttle history is never stored, so rate limits never trip in tests
CACHES = {"default": {"BACKEND": "django.core.cache.backends.dummy.DummyCache"}}
