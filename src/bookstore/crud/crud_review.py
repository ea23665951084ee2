from typing import List, Optional
import logging

from sqlalchemy import select, insert, update, delete

from bookstore.crud.base import BaseRepository
from bookstore.crud.crud_book import books, _row_to_book
from bookstore.entities.review import Review
from bookstore.models.review import ReviewModel

logger = logging.getLogger(__name__)

reviews = ReviewModel.__table__


def _select_reviews_with_book():
    # INNER JOIN: a review whose book row is gone is not returned at all
    return (
        select(
            reviews.c.id,
            reviews.c.book_id,
            reviews.c.reviewer,
            reviews.c.rating,
            reviews.c.text,
            books.c.title,
            books.c.author,
            books.c.genre,
            books.c.price,
        )
        .select_from(reviews.join(books, reviews.c.book_id == books.c.id))
        .order_by(reviews.c.id)
    )


def _row_to_review(row) -> Review:
    return Review(
        id=row.id,
        book_id=row.book_id,
        reviewer=row.reviewer,
        rating=row.rating,
        text=row.text,
        book=_row_to_book(row, id_column="book_id"),
    )


class ReviewRepository(BaseRepository):

    def get_all(self) -> List[Review]:
        """Obtiene todas las reseñas cuyo libro existe, cada una con su libro."""
        with self._unit_of_work("get all reviews") as db:
            rows = db.execute(_select_reviews_with_book()).all()
        logger.debug(f"Fetched {len(rows)} reviews")
        return [_row_to_review(row) for row in rows]

    def get_by_id(self, review_id: int) -> Optional[Review]:
        """Obtiene una reseña por ID; None si no existe o si su libro ya no existe."""
        stmt = _select_reviews_with_book().where(reviews.c.id == review_id)
        with self._unit_of_work("get review by id") as db:
            row = db.execute(stmt).first()
        return _row_to_review(row) if row is not None else None

    def get_by_book_id(self, book_id: int) -> List[Review]:
        """Obtiene las reseñas de un libro."""
        stmt = _select_reviews_with_book().where(reviews.c.book_id == book_id)
        with self._unit_of_work("get reviews by book id") as db:
            rows = db.execute(stmt).all()
        return [_row_to_review(row) for row in rows]

    def create(self, review: Review) -> Review:
        stmt = insert(reviews).values(
            book_id=review.book_id,
            reviewer=review.reviewer,
            rating=review.rating,
            text=review.text,
        )
        with self._unit_of_work("create review") as db:
            result = db.execute(stmt)
            review.id = result.inserted_primary_key[0]
        logger.info(f"Review {review.id} created for book {review.book_id} by '{review.reviewer}'")
        return review

    def update(self, review: Review) -> None:
        # book_id is replaced too: a review can be moved to another book
        stmt = (
            update(reviews)
            .where(reviews.c.id == review.id)
            .values(
                book_id=review.book_id,
                reviewer=review.reviewer,
                rating=review.rating,
                text=review.text,
            )
        )
        with self._unit_of_work("update review") as db:
            affected = db.execute(stmt).rowcount
        if affected:
            logger.info(f"Review {review.id} updated")
        else:
            logger.warning(f"Update of review {review.id} affected no rows")

    def delete(self, review_id: int) -> None:
        stmt = delete(reviews).where(reviews.c.id == review_id)
        with self._unit_of_work("delete review") as db:
            affected = db.execute(stmt).rowcount
        if affected:
            logger.info(f"Review {review_id} deleted")
        else:
            logger.warning(f"Attempted delete of non-existent review ID: {review_id}")
