"""Uniform ``{success, message}`` error envelope for every endpoint.

``envelope_exception_handler`` is installed as DRF's ``EXCEPTION_HANDLER``.
Framework errors DRF already knows how to render (parse errors, throttling,
405, 404) keep their status code but are reshaped into the envelope.
Anything else is an unexpected error: it is logged with its traceback and
reported as a generic 500 without leaking internals.

``not_found`` and ``server_error`` are the Django-level ``handler404`` /
``handler500`` so URLs outside DRF answer with the same JSON shape.
"""

import logging

from django.http import JsonResponse
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Server error"


def _message_from(data) -> str:
    """Flatten DRF error data (str, list or dict) into one readable line."""
    if isinstance(data, dict):
        if "detail" in data:
            return str(data["detail"])
        return "; ".join(f"{k}: {_message_from(v)}" for k, v in data.items())
    if isinstance(data, (list, tuple)):
        return "; ".join(_message_from(v) for v in data)
    return str(data)


def envelope_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        response.data = {"success": False, "message": _message_from(response.data)}
        return response

    view = context.get("view")
    logger.exception("Unhandled error in %s", type(view).__name__ if view else "view")
    return Response(
        {"success": False, "message": SERVER_ERROR_MESSAGE},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def not_found(request, exception=None):
    return JsonResponse({"success": False, "message": "Not found"}, status=404)


def server_error(request):
    return JsonResponse({"success": False, "message": SERVER_ERROR_MESSAGE}, status=500)
