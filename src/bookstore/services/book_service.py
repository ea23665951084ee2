"""
Servicio de libros: delega en los repositorios y convierte entre entidades y esquemas.
También expone las relaciones inversas (reseñas y pedidos de un libro), que se
consultan bajo demanda en lugar de guardarse en el propio libro.
"""

from typing import List, Optional

from bookstore.crud import BookRepository, OrderRepository, ReviewRepository
from bookstore.mappers import book_from_schema, book_to_schema, order_to_schema, review_to_schema
from bookstore.schemas.book import BookSchema
from bookstore.schemas.order import OrderSchema
from bookstore.schemas.review import ReviewSchema


class BookService:

    def __init__(
        self,
        book_repository: BookRepository,
        review_repository: ReviewRepository,
        order_repository: OrderRepository,
    ) -> None:
        self.book_repository = book_repository
        self.review_repository = review_repository
        self.order_repository = order_repository

    def get_all(self) -> List[BookSchema]:
        return [book_to_schema(book) for book in self.book_repository.get_all()]

    def get_by_id(self, book_id: int) -> Optional[BookSchema]:
        book = self.book_repository.get_by_id(book_id)
        return book_to_schema(book) if book is not None else None

    def create(self, book_in: BookSchema) -> BookSchema:
        """
        Crea un libro y devuelve su representación con el ID asignado.
        El ID también se escribe en `book_in`.
        """
        book = self.book_repository.create(book_from_schema(book_in))
        book_in.id = book.id
        return book_to_schema(book)

    def update(self, book_in: BookSchema) -> None:
        if book_in.id is None:
            raise ValueError("Cannot update a book without an id")
        self.book_repository.update(book_from_schema(book_in))

    def delete(self, book_id: int) -> None:
        self.book_repository.delete(book_id)

    def get_reviews(self, book_id: int) -> List[ReviewSchema]:
        """Reseñas del libro, cada una con su libro adjunto."""
        return [
            review_to_schema(review, book_to_schema(review.book))
            for review in self.review_repository.get_by_book_id(book_id)
        ]

    def get_orders(self, book_id: int) -> List[OrderSchema]:
        """Pedidos que contienen el libro, cada uno con su lista completa de libros."""
        return [
            order_to_schema(order, [book_to_schema(book) for book in order.books])
            for order in self.order_repository.get_by_book_id(book_id)
        ]
