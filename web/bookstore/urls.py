from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("apps.monitoring.urls")),
    path("api/order/", include("apps.orders.urls")),
    path("api/", include("apps.catalog.urls")),
]

handler404 = "bookstore.exceptions.not_found"
handler500 = "bookstore.exceptions.server_error"
