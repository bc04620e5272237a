from django.contrib import admin

from .models import Book, BookType


@admin.register(BookType)
class BookTypeAdmin(admin.ModelAdmin):
    list_display = ("name", "created_at")
    search_fields = ("name",)


@admin.register(Book)
class BookAdmin(admin.ModelAdmin):
    list_display = ("book_name", "author_name", "book_type", "mrp", "discount", "count", "created_at")
    search_fields = ("book_name", "author_name", "book_type__name")
    list_filter = ("book_type", "created_at")
    readonly_fields = ("created_at", "updated_at")
