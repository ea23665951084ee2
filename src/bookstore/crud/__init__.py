from .base import BaseRepository
from .crud_book import BookRepository
from .crud_order import OrderRepository, assemble_orders
from .crud_review import ReviewRepository

__all__ = [
    "BaseRepository",
    "BookRepository",
    "OrderRepository",
    "ReviewRepository",
    "assemble_orders",
]
