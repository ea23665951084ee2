"""
Operaciones CRUD para los libros del bookstore.
Incluye listar, obtener por ID, crear, reemplazar y borrar libros.
Pensado para ser utilizado por la capa de servicios.
"""

from typing import List, Optional
import logging

from sqlalchemy import select, insert, update, delete
from sqlalchemy.engine import Row

from bookstore.core.exceptions import DataAccessError
from bookstore.crud.base import BaseRepository
from bookstore.entities.book import Book
from bookstore.models.book import BookModel

logger = logging.getLogger(__name__)

books = BookModel.__table__


def _row_to_book(row: Row, id_column: str = "id") -> Book:
    """
    Construye un Book a partir de una fila con las columnas title, author, genre y price.

    Args:
        row (Row): Fila resultado de una consulta.
        id_column (str): Nombre de la columna que contiene el ID del libro.

    Returns:
        Book: Nuevo objeto Book con los valores de la fila.
    """
    return Book(
        id=getattr(row, id_column),
        title=row.title,
        author=row.author,
        genre=row.genre,
        price=row.price,
    )


class BookRepository(BaseRepository):
    """Acceso a la tabla books."""

    def get_all(self) -> List[Book]:
        """
        Obtiene todos los libros ordenados por ID.

        Returns:
            List[Book]: Lista de libros; vacía si no hay ninguno.
        """
        stmt = select(books).order_by(books.c.id)
        with self._unit_of_work("get all books") as db:
            rows = db.execute(stmt).all()
        logger.debug(f"Fetched {len(rows)} books")
        return [_row_to_book(row) for row in rows]

    def get_by_id(self, book_id: int) -> Optional[Book]:
        """
        Recupera un libro por su ID primario.

        Args:
            book_id (int): ID del libro a recuperar.

        Returns:
            Optional[Book]: El libro si existe, None si no.
        """
        stmt = select(books).where(books.c.id == book_id)
        with self._unit_of_work("get book by id") as db:
            row = db.execute(stmt).first()
        if row is None:
            logger.debug(f"Book {book_id} not found")
            return None
        return _row_to_book(row)

    def create(self, book: Book) -> Book:
        """
        Inserta un libro y escribe en él el ID asignado por la base de datos.

        Args:
            book (Book): Libro a crear; su id se ignora y se sobrescribe.

        Returns:
            Book: El mismo objeto, con el id ya asignado.

        Raises:
            DataAccessError: Si no se insertó ninguna fila, no se obtuvo un ID,
                o la base de datos falla.
        """
        stmt = insert(books).values(
            title=book.title,
            author=book.author,
            genre=book.genre,
            price=book.price,
        )
        with self._unit_of_work("create book") as db:
            result = db.execute(stmt)
            if result.rowcount == 0:
                raise DataAccessError("Creating book failed, no rows affected.")
            primary_key = result.inserted_primary_key
            if primary_key is None or primary_key[0] is None:
                raise DataAccessError("Creating book failed, no ID obtained.")
            book.id = primary_key[0]
        logger.info(f"Book {book.id} created: '{book.title}'")
        return book

    def update(self, book: Book) -> None:
        """
        Reemplaza title, author, genre y price del libro con el mismo ID.
        Si el ID no existe no se modifica ninguna fila y no se lanza error.

        Args:
            book (Book): Libro con el ID existente y los nuevos valores.
        """
        stmt = (
            update(books)
            .where(books.c.id == book.id)
            .values(title=book.title, author=book.author, genre=book.genre, price=book.price)
        )
        with self._unit_of_work("update book") as db:
            affected = db.execute(stmt).rowcount
        if affected:
            logger.info(f"Book {book.id} updated")
        else:
            logger.warning(f"Update of book {book.id} affected no rows")

    def delete(self, book_id: int) -> None:
        """
        Borra un libro por ID. Borrar un ID inexistente no hace nada.

        Args:
            book_id (int): ID del libro a borrar.

        Raises:
            DataAccessError: Si el libro sigue referenciado por reseñas o pedidos.
        """
        stmt = delete(books).where(books.c.id == book_id)
        with self._unit_of_work("delete book") as db:
            affected = db.execute(stmt).rowcount
        if affected:
            logger.info(f"Book {book_id} deleted")
        else:
            logger.warning(f"Attempted delete of non-existent book ID: {book_id}")
