"""
Modelo ORM para la tabla books del bookstore.
Define únicamente las columnas del libro; las relaciones con pedidos y reseñas
se guardan por identificador en las tablas order_books y reviews.
"""

from sqlalchemy import Column, Integer, String, Float
from bookstore.db.session import Base

class BookModel(Base):
    """
    Representa una fila de la tabla books.

    Atributos:
        id (int): Identificador primario asignado por la base de datos.
        title (str): Título del libro.
        author (str): Autor del libro.
        genre (str): Género literario.
        price (float): Precio del libro.
    """
    __tablename__ = "books"

    id = Column(Integer, primary_key=True)
    title = Column(String(255), nullable=False)
    author = Column(String(255), nullable=False)
    genre = Column(String(255), nullable=False)
    price = Column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<BookModel(id={self.id}, title='{self.title[:30]}...', price={self.price})>"
