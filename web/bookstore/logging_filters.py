"""Logging filter that stamps records with the current request id.

The id comes from the ContextVar populated by
``bookstore.middleware.RequestIdMiddleware``. The filter is wired into the
JSON console handler in ``settings.LOGGING`` so every line, including those
from the order service and gateway adapter, carries ``request_id``.
"""

from logging import Filter, LogRecord

from .middleware import REQUEST_ID_CTX


class RequestIdFilter(Filter):
    """Attach a ``request_id`` attribute to log records.

    Records emitted outside a request (management commands, startup) get a
    hyphen so formatters can always reference ``%(request_id)s``.
    """

    def filter(self, record: LogRecord) -> bool:
        if not getattr(record, "request_id", None):
            record.request_id = REQUEST_ID_CTX.get()
        return True
