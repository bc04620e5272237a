import uuid
from django.core.exceptions import ValidationError
from django.db import models


class BookType(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "book_types"
        ordering = ["-created_at"]

    def __str__(self):
        return self.name

    def clean(self):
        # names are unique regardless of case ("Fiction" == "fiction")
        clash = BookType.objects.filter(name__iexact=self.name).exclude(pk=self.pk)
        if clash.exists():
            raise ValidationError({"name": "Type already exists"})


class Book(models.Model):
    # UUID PK exposed in the API and referenced by order line items
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    book_name = models.CharField(max_length=255)
    description = models.TextField(blank=True, default="")
    mrp = models.DecimalField(max_digits=10, decimal_places=2)
    discount = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    book_type = models.ForeignKey(BookType, on_delete=models.PROTECT, related_name="books")
    # units in stock
    count = models.PositiveIntegerField(default=0)
    author_name = models.CharField(max_length=255, blank=True, default="")
    image_url = models.URLField(max_length=500, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "books"
        ordering = ["-created_at"]

    def __str__(self):
        return self.book_name
