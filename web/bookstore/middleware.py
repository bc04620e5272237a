"""Middleware that assigns a request identifier and guards API body sizes.

Every incoming HTTP request receives a request identifier (UUID). The
identifier is read from the incoming ``X-Request-Id`` header when the
storefront provides one, or generated server-side otherwise. The id is stored
on the ``request`` object and in a context variable so log records emitted
anywhere downstream (views, the order service, the gateway adapter) can be
correlated without passing the value explicitly.

Behavior contract:
- If the incoming request carries ``X-Request-Id``, that value is reused.
- Otherwise a new UUIDv4 is generated.
- The response carries the same id in the ``X-Request-ID`` header.
- One structured ``request handled`` log line is written per request.
"""

import contextvars
import logging
import os
import uuid

from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

REQUEST_ID_CTX = contextvars.ContextVar("request_id", default="-")
MAX_API_BYTES = int(os.getenv("API_MAX_BYTES", str(1 * 1024 * 1024)))

logger = logging.getLogger("bookstore.requests")


class RequestIdMiddleware(MiddlewareMixin):
    """Django middleware that sets and returns a per-request identifier.

    Attributes:
        HEADER (str): Incoming header name in ``request.META`` casing.
        RESPONSE_HEADER (str): Header name set on outgoing responses.
    """

    HEADER = "HTTP_X_REQUEST_ID"
    RESPONSE_HEADER = "X-Request-ID"

    def process_request(self, request):
        """Attach the request id to ``request`` and to ``REQUEST_ID_CTX``."""
        rid = request.META.get(self.HEADER) or str(uuid.uuid4())
        request.request_id = rid
        REQUEST_ID_CTX.set(rid)

    def process_response(self, request, response):
        """Echo the request id on the response and log the request.

        Falls back to the ContextVar value when the request object has no id
        (for example when an earlier middleware short-circuited).
        """
        rid = getattr(request, "request_id", REQUEST_ID_CTX.get())
        response[self.RESPONSE_HEADER] = rid
        logger.info(
            "request handled",
            extra={"path": request.path, "method": request.method, "status": response.status_code},
        )
        return response


class ApiSizeLimitMiddleware(MiddlewareMixin):
    """Reject ``/api/`` requests whose declared body exceeds ``API_MAX_BYTES``."""

    def process_request(self, request):
        if not request.path.startswith("/api/"):
            return None
        clen = request.META.get("CONTENT_LENGTH")
        if clen and clen.isdigit() and int(clen) > MAX_API_BYTES:
            return JsonResponse({"success": False, "message": "Payload too large"}, status=413)
        return None
