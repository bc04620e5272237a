"""Explicit payment gateway configuration.

Credentials and endpoint settings are gathered once into a frozen
``GatewayConfig`` and passed to both the order service (which signs with
``key_secret``) and the HTTP gateway client. Nothing downstream reads the
environment or Django settings for these values.
"""

from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.razorpay.com/v1"


@dataclass(frozen=True)
class GatewayConfig:
    """Razorpay connection settings.

    Attributes:
        key_id: Public API key id (HTTP Basic username).
        key_secret: Shared secret (HTTP Basic password and HMAC key).
        base_url: REST API root, without trailing slash.
        currency: ISO currency used for new gateway orders.
        timeout_secs: Per-request HTTP timeout.
    """

    key_id: str
    key_secret: str
    base_url: str = DEFAULT_BASE_URL
    currency: str = "INR"
    timeout_secs: float = 10.0

    @property
    def configured(self) -> bool:
        return bool(self.key_id and self.key_secret)

    @classmethod
    def from_settings(cls, settings) -> "GatewayConfig":
        return cls(
            key_id=getattr(settings, "RAZORPAY_KEY_ID", "") or "",
            key_secret=getattr(settings, "RAZORPAY_KEY_SECRET", "") or "",
            base_url=(getattr(settings, "RAZORPAY_BASE_URL", "") or DEFAULT_BASE_URL).rstrip("/"),
            currency=getattr(settings, "RAZORPAY_CURRENCY", "INR") or "INR",
            timeout_secs=float(getattr(settings, "HTTP_TIMEOUT_SECS", 10.0)),
        )
