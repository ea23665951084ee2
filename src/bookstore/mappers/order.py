"""
Conversions between Order entities and OrderSchema.

The books of an order are never walked here. `order_to_schema` receives the
already converted book schemas from the caller, and `order_from_schema`
produces an order with an empty book list: associations are managed through
their own operations.
"""

from datetime import datetime, timezone
from typing import List

from bookstore.entities.order import Order
from bookstore.schemas.book import BookSchema
from bookstore.schemas.order import OrderSchema


def order_to_schema(order: Order, books: List[BookSchema]) -> OrderSchema:
    """
    Build the transfer form of an order.

    Args:
        order: Order entity.
        books: Transfer form of the order's books, resolved by the caller.

    Returns:
        OrderSchema with the scalar fields of `order` and exactly `books`.
    """
    return OrderSchema(
        id=order.id,
        customer=order.customer,
        date=order.date,
        status=order.status,
        books=list(books),
    )


def _to_naive_utc(value: datetime) -> datetime:
    # The date column stores no offset
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def order_from_schema(schema: OrderSchema) -> Order:
    """
    Build an Order from its transfer form; `schema.books` is not carried over.

    A date with an offset is converted to UTC and stored without it. A missing
    date becomes the current time.
    """
    return Order(
        id=schema.id,
        customer=schema.customer,
        date=_to_naive_utc(schema.date) if schema.date is not None else datetime.now(),
        status=schema.status,
    )
