# tests/models/test_models.py
import pytest
from sqlalchemy import inspect, insert
from sqlalchemy.exc import IntegrityError

from bookstore.models.book import BookModel
from bookstore.models.order import OrderModel, order_books
from bookstore.models.review import ReviewModel

def test_tables_created(db_engine):
    """Test the four tables exist after init_db."""
    tables = set(inspect(db_engine).get_table_names())
    assert {"books", "orders", "order_books", "reviews"} <= tables

def test_order_books_primary_key():
    assert {column.name for column in order_books.primary_key.columns} == {"order_id", "book_id"}

def test_book_title_not_nullable(db_engine):
    """Test that inserting a book without a title raises IntegrityError."""
    with db_engine.connect() as conn:
        with pytest.raises(IntegrityError):
            conn.execute(insert(BookModel.__table__).values(author="Author", genre="Genre", price=1.0))

def test_review_requires_book(db_engine):
    """Test that a review without book_id is rejected by the database."""
    with db_engine.connect() as conn:
        with pytest.raises(IntegrityError):
            conn.execute(insert(ReviewModel.__table__).values(reviewer="R", rating=1, text="T"))

def test_model_repr():
    book = BookModel(id=1, title="Representation Test Book Title That Is Quite Long", price=9.5)
    order = OrderModel(id=2, customer="Customer", status="Status")

    assert repr(book) == "<BookModel(id=1, title='Representation Test Book Title...', price=9.5)>"
    assert repr(order) == "<OrderModel(id=2, customer='Customer', status='Status')>"

def test_engine_pings_connections(db_engine):
    """Test pooled connections are checked before use, SQLite included."""
    assert db_engine.pool._pre_ping is True
