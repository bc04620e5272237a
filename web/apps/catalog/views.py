"""HTTP views for the book catalog.

Views validate bodies with the Pydantic DTOs in ``schemas``, talk to the
Django ORM directly (the catalog has no domain rules beyond required
fields) and answer with the ``{success, message, data}`` envelope.
"""

import logging
import uuid

from django.core.paginator import Paginator
from django.db.models import Q
from pydantic import ValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.throttling import ScopedRateThrottle
from rest_framework.views import APIView

from bookstore.http import page_params, validation_message
from .models import Book, BookType
from .schemas import BookIn, BookReadDTO, BookUpdate

logger = logging.getLogger(__name__)


def _error(message: str, status_code: int) -> Response:
    return Response({"success": False, "message": message}, status=status_code)


def _load_book(book_id: str):
    """Return ``(book, error_response)``; exactly one of them is None."""
    try:
        pk = uuid.UUID(str(book_id))
    except ValueError:
        return None, _error("Invalid book ID", status.HTTP_400_BAD_REQUEST)
    book = Book.objects.select_related("book_type").filter(pk=pk).first()
    if book is None:
        return None, _error("Book not found", status.HTTP_404_NOT_FOUND)
    return book, None


def _dump(book) -> dict:
    return BookReadDTO.from_model(book).model_dump()


class BooksCollectionView(APIView):
    """Admin listing (paginated, searchable) and creation of books."""

    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "books"

    def get(self, request):
        page, limit = page_params(request)
        search = (request.GET.get("search") or "").strip()

        qs = Book.objects.select_related("book_type").order_by("-created_at")
        if search:
            qs = qs.filter(
                Q(book_name__icontains=search)
                | Q(author_name__icontains=search)
                | Q(book_type__name__icontains=search)
            )
        p = Paginator(qs, limit)
        page_obj = p.get_page(page)

        return Response(
            {
                "success": True,
                "data": [_dump(b) for b in page_obj.object_list],
                "pagination": {
                    "totalBooks": p.count,
                    "totalPages": p.num_pages if p.count else 0,
                    "currentPage": page_obj.number,
                    "pageSize": limit,
                },
            }
        )

    def post(self, request):
        try:
            dto = BookIn.model_validate(request.data)
        except ValidationError as e:
            return _error(validation_message(e), status.HTTP_400_BAD_REQUEST)

        book_type = BookType.objects.filter(pk=dto.book_type_id).first()
        if book_type is None:
            return _error("Book type not found", status.HTTP_400_BAD_REQUEST)

        book = Book.objects.create(
            book_name=dto.book_name,
            description=dto.description,
            mrp=dto.mrp,
            discount=dto.discount,
            book_type=book_type,
            count=dto.count,
            author_name=dto.author_name,
            image_url=dto.image_url,
        )
        logger.info("book created", extra={"book_id": str(book.id)})
        return Response(
            {"success": True, "message": "Book added successfully", "data": _dump(book)},
            status=status.HTTP_201_CREATED,
        )


class BookDetailView(APIView):
    """Read, update (partial, PUT or PATCH) and delete a single book."""

    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "books"

    def get(self, request, book_id: str):
        book, err = _load_book(book_id)
        if err:
            return err
        return Response({"success": True, "data": _dump(book)})

    def patch(self, request, book_id: str):
        book, err = _load_book(book_id)
        if err:
            return err
        try:
            dto = BookUpdate.model_validate(request.data)
        except ValidationError as e:
            return _error(validation_message(e), status.HTTP_400_BAD_REQUEST)

        changes = dto.model_dump(exclude_unset=True, exclude_none=True)
        type_id = changes.pop("book_type_id", None)
        if type_id is not None:
            book_type = BookType.objects.filter(pk=type_id).first()
            if book_type is None:
                return _error("Book type not found", status.HTTP_400_BAD_REQUEST)
            book.book_type = book_type
        for field, value in changes.items():
            setattr(book, field, value)
        book.save()

        return Response({"success": True, "message": "Book updated successfully", "data": _dump(book)})

    put = patch

    def delete(self, request, book_id: str):
        book, err = _load_book(book_id)
        if err:
            return err
        book.delete()
        logger.info("book deleted", extra={"book_id": str(book_id)})
        return Response({"success": True, "message": "Book deleted successfully"})


class PublicBooksView(APIView):
    """Storefront listing: every matching book, newest first, no pagination."""

    throttle_classes = [ScopedRateThrottle]
    throttle_scope = "books"

    def get(self, request):
        search = (request.GET.get("search") or "").strip()
        type_name = (request.GET.get("type") or "").strip()

        qs = Book.objects.select_related("book_type").order_by("-created_at")
        if search:
            qs = qs.filter(book_name__icontains=search)
        if type_name:
            qs = qs.filter(book_type__name__icontains=type_name)

        data = [_dump(b) for b in qs]
        return Response(
            {
                "success": True,
                "data": data,
                "message": "Books fetched successfully" if data else "No books found for given filters",
            }
        )
