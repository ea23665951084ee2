from .book import book_to_schema, book_from_schema
from .order import order_to_schema, order_from_schema
from .review import review_to_schema, review_from_schema

__all__ = [
    "book_to_schema",
    "book_from_schema",
    "order_to_schema",
    "order_from_schema",
    "review_to_schema",
    "review_from_schema",
]
