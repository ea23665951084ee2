# tests/conftest.py
import pytest
from fastapi.testclient import TestClient
import os
import sys

# Add the src directory to the Python path to allow imports
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
src_path = os.path.join(project_root, 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from bookstore.core.config import Settings
from bookstore.crud import BookRepository, OrderRepository, ReviewRepository
from bookstore.db.session import create_db_engine, create_session_factory, init_db
from bookstore.entities import Book
from bookstore.main import create_app
from bookstore.services import BookService, OrderService, ReviewService

# --- Test Database Setup ---
# Use an in-memory SQLite database for testing. Repositories commit through
# their own sessions, so every test gets a fresh engine instead of a
# rolled-back transaction.
TEST_DATABASE_URL = "sqlite:///:memory:"

@pytest.fixture(scope="function")
def db_engine():
    engine = create_db_engine(TEST_DATABASE_URL)
    # Create all tables defined in the models
    init_db(engine)
    yield engine
    engine.dispose()

@pytest.fixture(scope="function")
def db_session_factory(db_engine):
    """Returns a SQLAlchemy session factory bound to the test engine."""
    return create_session_factory(db_engine)

# --- Repositories ---
@pytest.fixture
def book_repository(db_session_factory):
    return BookRepository(db_session_factory)

@pytest.fixture
def order_repository(db_session_factory):
    return OrderRepository(db_session_factory)

@pytest.fixture
def review_repository(db_session_factory):
    return ReviewRepository(db_session_factory)

# --- Services ---
@pytest.fixture
def book_service(book_repository, review_repository, order_repository):
    return BookService(book_repository, review_repository, order_repository)

@pytest.fixture
def order_service(order_repository):
    return OrderService(order_repository)

@pytest.fixture
def review_service(review_repository):
    return ReviewService(review_repository)

# --- Helper Fixtures ---
@pytest.fixture
def test_book(book_repository):
    return book_repository.create(Book(title="Title", author="Author", genre="Genre", price=15.0))

@pytest.fixture
def client():
    app = create_app(Settings(DATABASE_URL=TEST_DATABASE_URL))
    with TestClient(app) as test_client:
        yield test_client
