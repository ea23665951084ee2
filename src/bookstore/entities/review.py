"""
entities/review.py
------------------
Domain model for a review written about one book.
"""

from dataclasses import dataclass
from typing import Optional

from bookstore.entities.book import Book


@dataclass
class Review:
    """
    Represents a review.

    Attributes:
        book_id: Id of the reviewed book (the stored relation).
        reviewer: Name of the reviewer.
        rating: Integer score.
        text: Free-text body.
        id: Database primary key (None for new records).
        book: Snapshot of the reviewed book, filled in by reads only.
    """
    book_id: int
    reviewer: str
    rating: int
    text: str
    id: Optional[int] = None
    book: Optional[Book] = None
