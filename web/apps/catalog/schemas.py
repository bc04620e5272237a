"""Pydantic schemas for the book catalog.

Request DTOs validate the JSON bodies of the book endpoints; ``BookReadDTO``
shapes the book payload every catalog response returns.
"""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def _strip_book_name(v: str) -> str:
    v2 = v.strip()
    if not v2:
        raise ValueError("Book name is required")
    return v2


class BookIn(BaseModel):
    """Schema for creating a book.

    Attributes:
        book_name: Display title, trimmed, required.
        mrp: Maximum retail price in major currency units (must be > 0).
        discount: Discount in major units, defaults to 0.
        book_type_id: Reference to an existing ``BookType``.
        count: Units in stock.
    """

    book_name: str = Field(min_length=1, max_length=255)
    description: str = ""
    mrp: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    discount: Decimal = Field(default=Decimal("0"), ge=0, max_digits=10, decimal_places=2)
    book_type_id: uuid.UUID
    count: int = Field(default=0, ge=0)
    author_name: str = Field(default="", max_length=255)
    image_url: str = Field(default="", max_length=500)

    @field_validator("book_name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return _strip_book_name(v)


class BookUpdate(BaseModel):
    """Partial update; only the fields present in the body are applied."""

    book_name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    description: Optional[str] = None
    mrp: Optional[Decimal] = Field(default=None, gt=0, max_digits=10, decimal_places=2)
    discount: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    book_type_id: Optional[uuid.UUID] = None
    count: Optional[int] = Field(default=None, ge=0)
    author_name: Optional[str] = Field(default=None, max_length=255)
    image_url: Optional[str] = Field(default=None, max_length=500)

    @field_validator("book_name")
    @classmethod
    def strip_name(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _strip_book_name(v)


class BookReadDTO(BaseModel):
    id: uuid.UUID
    book_name: str
    description: str
    mrp: Decimal
    discount: Decimal
    book_type_id: uuid.UUID
    book_type: str
    count: int
    author_name: str
    image_url: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_model(cls, book) -> "BookReadDTO":
        return cls(
            id=book.id,
            book_name=book.book_name,
            description=book.description,
            mrp=book.mrp,
            discount=book.discount,
            book_type_id=book.book_type_id,
            book_type=book.book_type.name,
            count=book.count,
            author_name=book.author_name,
            image_url=book.image_url,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )
