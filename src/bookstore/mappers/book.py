"""Conversions between Book entities and BookSchema."""

from bookstore.entities.book import Book
from bookstore.schemas.book import BookSchema


def book_to_schema(book: Book) -> BookSchema:
    return BookSchema(
        id=book.id,
        title=book.title,
        author=book.author,
        genre=book.genre,
        price=book.price,
    )


def book_from_schema(schema: BookSchema) -> Book:
    return Book(
        id=schema.id,
        title=schema.title,
        author=schema.author,
        genre=schema.genre,
        price=schema.price,
    )
