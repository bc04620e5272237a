import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse

from apps.orders.providers import get_gateway_config

logger = logging.getLogger(__name__)


def health_view(_request):
    """Report database reachability and whether gateway keys are set.

    Only the database decides the status code; a missing gateway key is
    reported but still answers 200.
    """
    db_ok = False
    try:
        with connection.cursor() as cur:
            cur.execute("SELECT 1;")
        db_ok = True
    except DatabaseError:
        logger.exception("health check: database unreachable")

    gateway_configured = get_gateway_config().configured
    return JsonResponse(
        {
            "success": db_ok,
            "components": {
                "db": {"ok": db_ok},
                "payment_gateway": {"configured": gateway_configured},
            },
        },
        status=200 if db_ok else 503,
    )
