"""
Data access for orders and their book associations.

Orders are read with a LEFT OUTER JOIN over order_books and books, which
yields one row per associated book (or a single row with NULL book columns
for an order without books). The rows are folded back into one Order per id.
"""

from typing import Iterable, List, Optional
import logging

from sqlalchemy import select, insert, update, delete
from sqlalchemy.engine import Row

from bookstore.crud.base import BaseRepository
from bookstore.crud.crud_book import books, _row_to_book
from bookstore.entities.order import Order
from bookstore.models.order import OrderModel, order_books

logger = logging.getLogger(__name__)

orders = OrderModel.__table__


def _select_orders_with_books():
    return (
        select(
            orders.c.id.label("order_id"),
            orders.c.customer,
            orders.c.date,
            orders.c.status,
            books.c.id.label("book_id"),
            books.c.title,
            books.c.author,
            books.c.genre,
            books.c.price,
        )
        .select_from(
            orders.outerjoin(order_books, orders.c.id == order_books.c.order_id)
            .outerjoin(books, order_books.c.book_id == books.c.id)
        )
        .order_by(orders.c.id, books.c.id)
    )


def assemble_orders(rows: Iterable[Row]) -> List[Order]:
    """
    Fold joined order/book rows into Order objects.

    Rows are grouped by order id, so every order appears exactly once and
    carries all of its books. Rows with a NULL book id (orders without books)
    contribute the order only, leaving its book list empty.

    Args:
        rows: Rows produced by the orders/order_books/books outer join.

    Returns:
        Orders in the order their ids were first seen.
    """
    orders_by_id: dict[int, Order] = {}
    for row in rows:
        order = orders_by_id.get(row.order_id)
        if order is None:
            order = Order(
                id=row.order_id,
                customer=row.customer,
                date=row.date,
                status=row.status,
            )
            orders_by_id[row.order_id] = order
        if row.book_id is not None:
            order.add_book(_row_to_book(row, id_column="book_id"))
    return list(orders_by_id.values())


class OrderRepository(BaseRepository):
    """Repository for the orders table and the order_books junction."""

    def get_all(self) -> List[Order]:
        """Return every order with its books; empty list if there are none."""
        with self._unit_of_work("get all orders") as db:
            rows = db.execute(_select_orders_with_books()).all()
        result = assemble_orders(rows)
        logger.debug(f"Fetched {len(result)} orders from {len(rows)} joined rows")
        return result

    def get_by_id(self, order_id: int) -> Optional[Order]:
        """Return one order with all of its books, or None if it does not exist."""
        stmt = _select_orders_with_books().where(orders.c.id == order_id)
        with self._unit_of_work("get order by id") as db:
            rows = db.execute(stmt).all()
        found = assemble_orders(rows)
        if not found:
            logger.debug(f"Order {order_id} not found")
            return None
        return found[0]

    def get_by_book_id(self, book_id: int) -> List[Order]:
        """
        Return the orders that contain the given book.

        Each returned order carries its complete book list, not only the
        matching book.
        """
        containing = select(order_books.c.order_id).where(order_books.c.book_id == book_id)
        stmt = _select_orders_with_books().where(orders.c.id.in_(containing))
        with self._unit_of_work("get orders by book id") as db:
            rows = db.execute(stmt).all()
        return assemble_orders(rows)

    def create(self, order: Order) -> Order:
        """
        Insert the order row and store the generated id on `order`.

        Book associations are not created here, even if `order.books` is
        not empty; use add_book for each of them.
        """
        stmt = insert(orders).values(
            customer=order.customer,
            date=order.date,
            status=order.status,
        )
        with self._unit_of_work("create order") as db:
            result = db.execute(stmt)
            order.id = result.inserted_primary_key[0]
        logger.info(f"Order {order.id} created for customer '{order.customer}'")
        return order

    def update(self, order: Order) -> None:
        """Replace customer, date and status of the order; associations are untouched."""
        stmt = (
            update(orders)
            .where(orders.c.id == order.id)
            .values(customer=order.customer, date=order.date, status=order.status)
        )
        with self._unit_of_work("update order") as db:
            affected = db.execute(stmt).rowcount
        if affected:
            logger.info(f"Order {order.id} updated")
        else:
            logger.warning(f"Update of order {order.id} affected no rows")

    def delete(self, order_id: int) -> None:
        """
        Delete the order row.

        Junction rows are not removed; while any exist the database rejects
        the delete and DataAccessError is raised.
        """
        stmt = delete(orders).where(orders.c.id == order_id)
        with self._unit_of_work("delete order") as db:
            affected = db.execute(stmt).rowcount
        if affected:
            logger.info(f"Order {order_id} deleted")
        else:
            logger.warning(f"Attempted delete of non-existent order ID: {order_id}")

    def add_book(self, order_id: int, book_id: int) -> None:
        """Associate a book with an order. Unknown ids or duplicates fail in storage."""
        stmt = insert(order_books).values(order_id=order_id, book_id=book_id)
        with self._unit_of_work("add book to order") as db:
            db.execute(stmt)
        logger.info(f"Book {book_id} added to order {order_id}")

    def remove_book(self, order_id: int, book_id: int) -> None:
        """Remove a book from an order; a missing association is a no-op."""
        stmt = delete(order_books).where(
            order_books.c.order_id == order_id,
            order_books.c.book_id == book_id,
        )
        with self._unit_of_work("remove book from order") as db:
            affected = db.execute(stmt).rowcount
        if affected:
            logger.info(f"Book {book_id} removed from order {order_id}")
        else:
            logger.warning(f"Order {order_id} had no book {book_id} to remove")
