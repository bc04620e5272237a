from django.contrib import admin

from .models import OrderModel


@admin.register(OrderModel)
class OrderAdmin(admin.ModelAdmin):
    list_display = ("gateway_order_id", "user_name", "amount", "currency", "status", "created_at")
    search_fields = ("gateway_order_id", "gateway_payment_id", "user_name", "user_mobile")
    list_filter = ("status", "currency", "created_at")
    readonly_fields = ("created_at", "updated_at", "gateway_signature", "metadata")
