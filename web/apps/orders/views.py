"""HTTP views for the orders app.

Views are kept small: they validate requests (via Pydantic), map to domain
DTOs, delegate to ``OrderService`` and answer with the
``{success, message, ...}`` envelope.

The service comes from ``providers.get_order_service()``, which wires the
HTTP Razorpay client or the in-process ``PaymentGatewayStub`` depending on
``settings.USE_HTTP_ADAPTERS``. Tests monkeypatch the provider to inject
their own ports.

Error mapping:
    - 400 for DTO validation errors, empty orders, bad amounts, missing
      verification fields and signature mismatches.
    - 404 when an order cannot be found.
    - 502 when the payment gateway fails.
    - 500 for any other error raised by the service.
"""

import logging
import uuid

from pydantic import ValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from bookstore.exceptions import SERVER_ERROR_MESSAGE
from bookstore.http import page_params, validation_message
from . import providers, reports
from .domain import GatewayError, Order, OrderItem
from .repository import OrderRepository
from .schemas import CreateOrderDTO, VerifyPaymentDTO, serialize_order, serialize_orders

logger = logging.getLogger(__name__)

# domain error code -> (HTTP status, client message)
DOMAIN_ERRORS = {
    "EMPTY_ORDER": (status.HTTP_400_BAD_REQUEST, "Books are required"),
    "INVALID_AMOUNT": (status.HTTP_400_BAD_REQUEST, "Valid amount is required"),
    "MISSING_FIELDS": (status.HTTP_400_BAD_REQUEST, "Missing fields"),
    "INVALID_SIGNATURE": (status.HTTP_400_BAD_REQUEST, "Invalid signature"),
    "ORDER_NOT_FOUND": (status.HTTP_404_NOT_FOUND, "Order not found"),
}


def _error(message: str, status_code: int) -> Response:
    return Response({"success": False, "message": message}, status=status_code)


def _domain_error(exc: ValueError) -> Response:
    mapped = DOMAIN_ERRORS.get(str(exc))
    if mapped is None:
        logger.exception("unexpected error from order service")
        return _error(SERVER_ERROR_MESSAGE, status.HTTP_500_INTERNAL_SERVER_ERROR)
    status_code, message = mapped
    return _error(message, status_code)


def _gateway_error(exc: GatewayError) -> Response:
    logger.exception("payment gateway call failed", extra={"error": str(exc)})
    return _error("Payment gateway error", status.HTTP_502_BAD_GATEWAY)


class OrdersPingView(APIView):
    """Liveness endpoint for the orders module."""

    def get(self, request):
        return Response({"success": True, "message": "Order routes working"})


class OrdersCollectionView(APIView):
    """Paginated order listing, newest first."""

    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "orders_list"

    def get(self, request):
        page, limit = page_params(request)
        orders, total, current, total_pages = OrderRepository().list_page(page, limit)
        return Response(
            {
                "success": True,
                "message": "Orders fetched successfully",
                "total": total,
                "currentPage": current,
                "totalPages": total_pages,
                "data": serialize_orders(orders),
            }
        )


class CreateOrderView(APIView):
    """Open a gateway order and store a PENDING order pointing at it."""

    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "orders_create"

    def post(self, request):
        """Create a new order.

        Returns:
            Response: 201 with ``{success, message, order, razorpay_order}``;
            ``razorpay_order`` is the gateway's order descriptor, passed
            through untouched for the checkout widget.
        """
        try:
            dto = CreateOrderDTO.model_validate(request.data)
        except ValidationError as e:
            return _error(validation_message(e), status.HTTP_400_BAD_REQUEST)

        order = Order(
            id=None,
            items=[OrderItem(book_id=str(i.book_id), count=i.count) for i in dto.books],
            user_name=dto.user_name,
            user_mobile=dto.user_mobile,
            address=dto.address,
            amount=dto.amount,
        )
        service = providers.get_order_service()
        try:
            saved, gateway_order = service.create_order(order)
        except ValueError as e:
            return _domain_error(e)
        except GatewayError as e:
            return _gateway_error(e)

        return Response(
            {
                "success": True,
                "message": "Order created successfully",
                "order": serialize_order(saved),
                "razorpay_order": gateway_order.raw,
            },
            status=status.HTTP_201_CREATED,
        )


class VerifyPaymentView(APIView):
    """Reconcile an order with the gateway after client checkout."""

    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "orders_verify"

    def post(self, request):
        try:
            dto = VerifyPaymentDTO.model_validate(request.data)
        except ValidationError as e:
            return _error(validation_message(e), status.HTTP_400_BAD_REQUEST)

        service = providers.get_order_service()
        try:
            order = service.verify_payment(
                dto.razorpay_order_id or "",
                dto.razorpay_payment_id or "",
                dto.razorpay_signature or "",
            )
        except ValueError as e:
            return _domain_error(e)
        except GatewayError as e:
            return _gateway_error(e)

        return Response(
            {"success": True, "message": "Payment verified successfully", "order": serialize_order(order)}
        )


class TodaySalesView(APIView):
    """Paid-order totals for the current India Standard Time day."""

    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "orders_report"

    def get(self, request):
        summary = reports.today_sales()
        return Response(
            {
                "success": True,
                "message": "Today's sales fetched successfully",
                "date": summary.day.isoformat(),
                "timezone": reports.IST_NAME,
                "data": summary.as_payload(),
            }
        )


class RetrieveOrderView(APIView):
    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "orders_detail"

    def get(self, request, oid: str):
        try:
            pk = uuid.UUID(str(oid))
        except ValueError:
            return _error("Invalid order ID", status.HTTP_400_BAD_REQUEST)

        order = OrderRepository().get(pk)
        if order is None:
            return _error("Order not found", status.HTTP_404_NOT_FOUND)
        return Response({"success": True, "message": "Order fetched successfully", "data": serialize_order(order)})
