from typing import List, Optional

from bookstore.crud import ReviewRepository
from bookstore.entities.review import Review
from bookstore.mappers import book_to_schema, review_from_schema, review_to_schema
from bookstore.schemas.review import ReviewSchema


def _to_schema(review: Review) -> ReviewSchema:
    # The book is mapped on its own and attached explicitly
    book = book_to_schema(review.book) if review.book is not None else None
    return review_to_schema(review, book)


class ReviewService:

    def __init__(self, review_repository: ReviewRepository) -> None:
        self.review_repository = review_repository

    def get_all(self) -> List[ReviewSchema]:
        return [_to_schema(review) for review in self.review_repository.get_all()]

    def get_by_id(self, review_id: int) -> Optional[ReviewSchema]:
        review = self.review_repository.get_by_id(review_id)
        return _to_schema(review) if review is not None else None

    def create(self, review_in: ReviewSchema) -> ReviewSchema:
        """Crea la reseña; el ID asignado se escribe también en `review_in`."""
        review = self.review_repository.create(review_from_schema(review_in))
        review_in.id = review.id
        return _to_schema(review)

    def update(self, review_in: ReviewSchema) -> None:
        if review_in.id is None:
            raise ValueError("Cannot update a review without an id")
        self.review_repository.update(review_from_schema(review_in))

    def delete(self, review_id: int) -> None:
        self.review_repository.delete(review_id)
