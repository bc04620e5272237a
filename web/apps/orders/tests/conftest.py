from decimal import Decimal

import pytest

from apps.catalog.models import Book, BookType
from apps.orders.domain import payment_signature


@pytest.fixture
def books(db):
    fiction = BookType.objects.create(name="Fiction")
    return [
        Book.objects.create(book_name="Malgudi Days", author_name="R. K. Narayan", mrp=Decimal("299.00"),
                            book_type=fiction, count=10, image_url="https://img.test/malgudi.jpg"),
        Book.objects.create(book_name="Godaan", author_name="Premchand", mrp=Decimal("199.50"),
                            book_type=fiction, count=4),
    ]


@pytest.fixture
def order_payload(books):
    return {
        "books": [{"book_id": str(books[0].id), "count": 2}, {"book_id": str(books[1].id), "count": 1}],
        "user_mobile": "9876543210",
        "user_name": "Asha",
        "address": "12 MG Road, Bengaluru",
        "amount": "797.50",
    }


@pytest.fixture
def sign(settings):
    def _sign(gateway_order_id, gateway_payment_id):
        return payment_signature(settings.RAZORPAY_KEY_SECRET, gateway_order_id, gateway_payment_id)
    return _sign
