from django.urls import path
from .views import BookDetailView, BooksCollectionView, PublicBooksView

app_name = "catalog"

urlpatterns = [
    path("books/", BooksCollectionView.as_view(), name="books-collection"),  # GET list / POST create
    path("books/<str:book_id>/", BookDetailView.as_view(), name="books-detail"),
    path("public-books/", PublicBooksView.as_view(), name="public-books"),
    path("public-books/<str:book_id>/", BookDetailView.as_view(http_method_names=["get"]), name="public-books-detail"),
]
