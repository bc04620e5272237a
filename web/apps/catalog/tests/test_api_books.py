"""API tests for the book catalog endpoints."""

from decimal import Decimal
from uuid import uuid4

import pytest
from django.core.exceptions import ValidationError

from apps.catalog.lookup import book_summaries
from apps.catalog.models import Book, BookType

BOOKS_URL = "/api/books/"
PUBLIC_URL = "/api/public-books/"


@pytest.fixture
def types(db):
    return {
        "fiction": BookType.objects.create(name="Fiction"),
        "poetry": BookType.objects.create(name="Poetry"),
    }


def _book(book_type, name="Gitanjali", author="Tagore", mrp="150.00"):
    return Book.objects.create(book_name=name, author_name=author, mrp=Decimal(mrp), book_type=book_type, count=5)


@pytest.mark.django_db
def test_create_book(client, types):
    payload = {
        "book_name": "  Gitanjali ",
        "author_name": "Tagore",
        "mrp": "150.00",
        "discount": "10.00",
        "book_type_id": str(types["poetry"].id),
        "count": 3,
    }
    r = client.post(BOOKS_URL, data=payload, content_type="application/json")
    assert r.status_code == 201
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Book added successfully"
    assert body["data"]["book_name"] == "Gitanjali"
    assert body["data"]["book_type"] == "Poetry"
    assert Book.objects.get(pk=body["data"]["id"]).discount == Decimal("10.00")


@pytest.mark.django_db
def test_create_book_unknown_type(client):
    payload = {"book_name": "X", "mrp": "10", "book_type_id": str(uuid4())}
    r = client.post(BOOKS_URL, data=payload, content_type="application/json")
    assert r.status_code == 400
    assert r.json() == {"success": False, "message": "Book type not found"}


@pytest.mark.django_db
def test_create_book_validation_error(client, types):
    payload = {"book_name": " ", "mrp": "0", "book_type_id": str(types["fiction"].id)}
    r = client.post(BOOKS_URL, data=payload, content_type="application/json")
    assert r.status_code == 400
    assert r.json()["success"] is False
    assert Book.objects.count() == 0


@pytest.mark.django_db
def test_list_books_search_and_pagination(client, types):
    _book(types["poetry"])
    _book(types["fiction"], name="Godaan", author="Premchand")
    _book(types["fiction"], name="Nirmala", author="Premchand")

    r = client.get(BOOKS_URL, {"search": "premchand", "limit": 1})
    assert r.status_code == 200
    body = r.json()
    assert body["pagination"] == {"totalBooks": 2, "totalPages": 2, "currentPage": 1, "pageSize": 1}
    assert len(body["data"]) == 1

    r = client.get(BOOKS_URL, {"search": "poetry"})
    assert [b["book_name"] for b in r.json()["data"]] == ["Gitanjali"]


@pytest.mark.django_db
def test_get_update_delete_book(client, types):
    book = _book(types["poetry"])
    url = f"{BOOKS_URL}{book.id}/"

    r = client.get(url)
    assert r.status_code == 200
    assert r.json()["data"]["author_name"] == "Tagore"

    r = client.patch(url, data={"count": 9, "book_type_id": str(types["fiction"].id)}, content_type="application/json")
    assert r.status_code == 200
    assert r.json()["data"]["count"] == 9
    assert r.json()["data"]["book_type"] == "Fiction"

    r = client.delete(url)
    assert r.status_code == 200
    assert not Book.objects.filter(pk=book.id).exists()


@pytest.mark.django_db
def test_book_detail_bad_and_unknown_ids(client):
    assert client.get(f"{BOOKS_URL}nope/").status_code == 400
    r = client.get(f"{BOOKS_URL}{uuid4()}/")
    assert r.status_code == 404
    assert r.json() == {"success": False, "message": "Book not found"}


@pytest.mark.django_db
def test_public_books_filters(client, types):
    _book(types["poetry"])
    _book(types["fiction"], name="Godaan", author="Premchand")

    r = client.get(PUBLIC_URL, {"type": "fic"})
    body = r.json()
    assert body["message"] == "Books fetched successfully"
    assert [b["book_name"] for b in body["data"]] == ["Godaan"]

    r = client.get(PUBLIC_URL, {"search": "zzz"})
    assert r.json() == {"success": True, "data": [], "message": "No books found for given filters"}


@pytest.mark.django_db
def test_public_book_detail_is_read_only(client, types):
    book = _book(types["poetry"])
    url = f"{PUBLIC_URL}{book.id}/"
    assert client.get(url).status_code == 200
    assert client.delete(url).status_code == 405
    assert Book.objects.filter(pk=book.id).exists()


@pytest.mark.django_db
def test_book_type_names_unique_ignoring_case(types):
    with pytest.raises(ValidationError):
        BookType(name="FICTION").full_clean()


@pytest.mark.django_db
def test_book_summaries_skips_missing_and_malformed_ids(types):
    book = _book(types["poetry"])
    out = book_summaries([str(book.id), str(uuid4()), "garbage"])
    assert list(out) == [str(book.id)]
    assert out[str(book.id)]["bookName"] == "Gitanjali"


@pytest.mark.django_db
def test_update_book_rejects_blank_name_and_trims(client, types):
    book = _book(types["poetry"])
    url = f"{BOOKS_URL}{book.id}/"

    r = client.patch(url, data={"book_name": "   "}, content_type="application/json")
    assert r.status_code == 400
    book.refresh_from_db()
    assert book.book_name == "Gitanjali"

    r = client.patch(url, data={"book_name": "  Gora "}, content_type="application/json")
    assert r.status_code == 200
    assert r.json()["data"]["book_name"] == "Gora"
