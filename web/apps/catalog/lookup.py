"""Catalog lookup used by the orders app to display book identity.

Order line items only store ``book_id``; read views call
``book_summaries`` once per response to merge name, author, MRP and image
into each item without one query per line.
"""

import uuid
from typing import Iterable

from .models import Book


def _as_uuid(value) -> uuid.UUID | None:
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError):
        return None


def book_summaries(book_ids: Iterable) -> dict[str, dict]:
    """Return ``{str(book_id): summary}`` for the books that still exist.

    Malformed or deleted ids are simply absent from the result.
    """
    ids = {u for u in (_as_uuid(b) for b in book_ids) if u is not None}
    if not ids:
        return {}
    rows = Book.objects.filter(id__in=ids).values("id", "book_name", "author_name", "mrp", "image_url")
    return {
        str(r["id"]): {
            "bookName": r["book_name"],
            "authorName": r["author_name"],
            "mrp": r["mrp"],
            "imageUrl": r["image_url"],
        }
        for r in rows
    }
