import uuid
from django.db import models


class OrderModel(models.Model):
    # UUID PK exposed in the API
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    class Status(models.TextChoices):
        PENDING = "PENDING"
        PAID = "PAID"
        FAILED = "FAILED"

    # [{"book_id": "<uuid>", "count": 2}, ...]
    books = models.JSONField(default=list)
    user_name = models.CharField(max_length=200)
    user_mobile = models.CharField(max_length=32)
    address = models.TextField()

    # major units; replaced by the gateway-confirmed amount on verification
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.PENDING, db_index=True)

    gateway_order_id = models.CharField(max_length=64, unique=True)
    gateway_payment_id = models.CharField(max_length=64, blank=True, default="")
    gateway_signature = models.CharField(max_length=128, blank=True, default="")
    gateway_status = models.CharField(max_length=32, blank=True, default="")
    payment_method = models.CharField(max_length=32, blank=True, default="")
    currency = models.CharField(max_length=8, default="INR")
    metadata = models.JSONField(default=dict, blank=True)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "orders"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.gateway_order_id} ({self.status})"
