"""
Conversions between Review entities and ReviewSchema.

Like orders, the nested book is supplied by the caller on the way out and
reduced to its id on the way in.
"""

from typing import Optional

from bookstore.entities.review import Review
from bookstore.schemas.book import BookSchema
from bookstore.schemas.review import ReviewSchema


def review_to_schema(review: Review, book: Optional[BookSchema]) -> ReviewSchema:
    return ReviewSchema(
        id=review.id,
        book_id=review.book_id,
        reviewer=review.reviewer,
        rating=review.rating,
        text=review.text,
        book=book,
    )


def review_from_schema(schema: ReviewSchema) -> Review:
    """
    Build a Review from its transfer form.

    The book id comes from `schema.book_id`, falling back to the id of the
    nested book when only that is given. The nested book itself is dropped.
    """
    book_id = schema.book_id
    if book_id is None and schema.book is not None:
        book_id = schema.book.id
    return Review(
        id=schema.id,
        book_id=book_id,
        reviewer=schema.reviewer,
        rating=schema.rating,
        text=schema.text,
    )
