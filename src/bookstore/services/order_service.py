"""
Order service.

Reads convert in two explicit steps: the order's books are mapped first,
then handed to `order_to_schema`. Creating an order never associates books;
that is done with add_book, one call per book, outside any shared transaction.
"""

from typing import List, Optional
import logging

from bookstore.crud import OrderRepository
from bookstore.entities.order import Order
from bookstore.mappers import book_to_schema, order_from_schema, order_to_schema
from bookstore.schemas.order import OrderSchema

logger = logging.getLogger(__name__)


def _to_schema(order: Order) -> OrderSchema:
    books = [book_to_schema(book) for book in order.books]
    return order_to_schema(order, books)


class OrderService:

    def __init__(self, order_repository: OrderRepository) -> None:
        self.order_repository = order_repository

    def get_all(self) -> List[OrderSchema]:
        return [_to_schema(order) for order in self.order_repository.get_all()]

    def get_by_id(self, order_id: int) -> Optional[OrderSchema]:
        order = self.order_repository.get_by_id(order_id)
        return _to_schema(order) if order is not None else None

    def create(self, order_in: OrderSchema) -> OrderSchema:
        """
        Create the order row and return it with the assigned id.

        Any books listed in `order_in` are ignored; the returned schema has
        an empty book list. The id is also written back to `order_in`.
        """
        if order_in.books:
            logger.warning(
                f"Ignoring {len(order_in.books)} books on order creation; use add_book to associate them"
            )
        order = self.order_repository.create(order_from_schema(order_in))
        order_in.id = order.id
        return _to_schema(order)

    def update(self, order_in: OrderSchema) -> None:
        """Replace the order's customer, date and status; both id and date are required."""
        if order_in.id is None:
            raise ValueError("Cannot update an order without an id")
        if order_in.date is None:
            raise ValueError("Cannot update an order without a date")
        self.order_repository.update(order_from_schema(order_in))

    def delete(self, order_id: int) -> None:
        self.order_repository.delete(order_id)

    def add_book(self, order_id: int, book_id: int) -> None:
        self.order_repository.add_book(order_id, book_id)

    def remove_book(self, order_id: int, book_id: int) -> None:
        self.order_repository.remove_book(order_id, book_id)
