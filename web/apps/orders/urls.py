from django.urls import path

from .views import (
    CreateOrderView,
    OrdersCollectionView,
    OrdersPingView,
    RetrieveOrderView,
    TodaySalesView,
    VerifyPaymentView,
)

app_name = "orders"

urlpatterns = [
    path("", OrdersCollectionView.as_view(), name="orders-collection"),
    path("ping", OrdersPingView.as_view(), name="ping"),
    path("create-order", CreateOrderView.as_view(), name="create-order"),
    path("verify-payment", VerifyPaymentView.as_view(), name="verify-payment"),
    path("today-sales", TodaySalesView.as_view(), name="today-sales"),
    # keep last: catches any other single path segment
    path("<str:oid>", RetrieveOrderView.as_view(), name="orders-detail"),
]
