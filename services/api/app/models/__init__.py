from app.models.base import Base
from app.models.book import Book, same_identity


__all__ = [
    "Base",
    "Book",
    "same_identity",
]
