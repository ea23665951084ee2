from .book import Book
from .order import Order
from .review import Review

__all__ = ["Book", "Order", "Review"]
