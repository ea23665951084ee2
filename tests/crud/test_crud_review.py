# tests/crud/test_crud_review.py
import pytest
from sqlalchemy import delete

from bookstore.core.exceptions import DataAccessError
from bookstore.entities import Book, Review
from bookstore.models.book import BookModel

# --- Helper Fixtures ---
@pytest.fixture
def test_review(review_repository, test_book):
    return review_repository.create(Review(book_id=test_book.id, reviewer="Reviewer", rating=5, text="Excellent book!"))

def _delete_book_ignoring_fks(engine, book_id):
    """Remove a book row behind the repositories' back, leaving its reviews orphaned."""
    with engine.connect() as conn:
        conn.exec_driver_sql("PRAGMA foreign_keys=OFF")
        conn.execute(delete(BookModel.__table__).where(BookModel.__table__.c.id == book_id))
        conn.commit()
        conn.exec_driver_sql("PRAGMA foreign_keys=ON")
# --------------------------------------------------------------------------------

def test_create_review_assigns_id(test_review):
    assert test_review.id is not None

def test_get_review_by_id_includes_book(review_repository, test_review, test_book):
    """Test the review comes back with a fresh snapshot of its book."""
    found = review_repository.get_by_id(test_review.id)

    assert found is not None
    assert found.reviewer == "Reviewer"
    assert found.rating == 5
    assert found.text == "Excellent book!"
    assert found.book_id == test_book.id
    assert found.book == test_book

def test_get_review_by_id_not_found(review_repository):
    assert review_repository.get_by_id(99999) is None

def test_get_all_reviews(review_repository, test_review, test_book):
    second = review_repository.create(Review(book_id=test_book.id, reviewer="Other", rating=3, text="Fine"))

    reviews = review_repository.get_all()

    assert [review.id for review in reviews] == [test_review.id, second.id]
    assert all(review.book == test_book for review in reviews)

def test_create_review_unknown_book_fails(review_repository):
    with pytest.raises(DataAccessError):
        review_repository.create(Review(book_id=99999, reviewer="R", rating=1, text="T"))

def test_update_review_moves_to_other_book(review_repository, book_repository, test_review):
    """Test update replaces book_id along with the other columns."""
    other_book = book_repository.create(Book(title="Other", author="Someone", genre="Essay", price=9.99))
    test_review.book_id = other_book.id
    test_review.reviewer = "New Reviewer"
    test_review.rating = 2
    test_review.text = "Changed my mind"

    review_repository.update(test_review)

    updated = review_repository.get_by_id(test_review.id)
    assert updated.book_id == other_book.id
    assert updated.book == other_book
    assert updated.reviewer == "New Reviewer"
    assert updated.rating == 2
    assert updated.text == "Changed my mind"

def test_update_non_existent_review_is_silent(review_repository, test_book):
    review_repository.update(Review(id=99999, book_id=test_book.id, reviewer="R", rating=1, text="T"))

def test_delete_review(review_repository, test_review):
    review_repository.delete(test_review.id)

    assert review_repository.get_by_id(test_review.id) is None

def test_delete_non_existent_review_is_silent(review_repository):
    review_repository.delete(99999)

def test_get_reviews_by_book_id(review_repository, book_repository, test_review, test_book):
    other_book = book_repository.create(Book(title="Other", author="Someone", genre="Essay", price=9.99))
    review_repository.create(Review(book_id=other_book.id, reviewer="R", rating=4, text="Other book"))

    reviews = review_repository.get_by_book_id(test_book.id)

    assert [review.id for review in reviews] == [test_review.id]

def test_orphaned_review_is_invisible(db_engine, review_repository, book_repository, test_review, test_book):
    """Test a review whose book row is gone is not returned by any read."""
    survivor_book = book_repository.create(Book(title="Kept", author="Author", genre="Genre", price=1.0))
    survivor = review_repository.create(Review(book_id=survivor_book.id, reviewer="R", rating=4, text="Still here"))

    _delete_book_ignoring_fks(db_engine, test_book.id)

    assert [review.id for review in review_repository.get_all()] == [survivor.id]
    assert review_repository.get_by_id(test_review.id) is None
