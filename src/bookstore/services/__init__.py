from .book_service import BookService
from .order_service import OrderService
from .review_service import ReviewService

__all__ = ["BookService", "OrderService", "ReviewService"]
