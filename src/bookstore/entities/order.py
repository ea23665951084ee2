"""
entities/order.py
-----------------
Domain model for a customer order and the books it contains.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from bookstore.entities.book import Book


@dataclass
class Order:
    """
    Represents an order.

    Attributes:
        customer: Customer name.
        status: Free-form status label.
        date: Order timestamp (defaults to now).
        id: Database primary key (None for new records).
        books: Snapshots of the associated books, rebuilt from each fetch.
    """
    customer: str
    status: str
    date: datetime = field(default_factory=datetime.now)
    id: Optional[int] = None
    books: list[Book] = field(default_factory=list)

    def add_book(self, book: Book) -> None:
        self.books.append(book)

    @property
    def book_ids(self) -> list[int]:
        """Ids of the books currently in the list, in list order."""
        return [book.id for book in self.books]
