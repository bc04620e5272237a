import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="OrderModel",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("books", models.JSONField(default=list)),
                ("user_name", models.CharField(max_length=200)),
                ("user_mobile", models.CharField(max_length=32)),
                ("address", models.TextField()),
                ("amount", models.DecimalField(decimal_places=2, max_digits=12)),
                (
                    "status",
                    models.CharField(
                        choices=[("PENDING", "Pending"), ("PAID", "Paid"), ("FAILED", "Failed")],
                        db_index=True,
                        default="PENDING",
                        max_length=16,
                    ),
                ),
                ("gateway_order_id", models.CharField(max_length=64, unique=True)),
                ("gateway_payment_id", models.CharField(blank=True, default="", max_length=64)),
                ("gateway_signature", models.CharField(blank=True, default="", max_length=128)),
                ("gateway_status", models.CharField(blank=True, default="", max_length=32)),
                ("payment_method", models.CharField(blank=True, default="", max_length=32)),
                ("currency", models.CharField(default="INR", max_length=8)),
                ("metadata", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "db_table": "orders",
                "ordering": ["-created_at"],
            },
        ),
    ]
