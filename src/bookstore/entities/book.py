"""
entities/book.py
----------------
Domain model for a book in the catalogue.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Book:
    """
    Represents a book.

    The reviews and orders that reference a book are not kept on the
    instance; they are fetched on demand through the review and order
    repositories.

    Attributes:
        title: Book title.
        author: Author name.
        genre: Free-form genre label.
        price: Unit price, zero or positive.
        id: Database primary key (None for new records).
    """
    title: str
    author: str
    genre: str
    price: float
    id: Optional[int] = None

    def __str__(self) -> str:
        return f"#{self.id} {self.title} by {self.author} ({self.price:.2f})"
