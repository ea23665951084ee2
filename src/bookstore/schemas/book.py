"""
Esquemas Pydantic para la entidad Book en la API del bookstore.
Define la representación externa de un libro usada para serialización.
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional

class BookBase(BaseModel):
    """
    Esquema base para un libro.

    Atributos:
        title (str): Título del libro.
        author (str): Autor del libro.
        genre (str): Género literario.
        price (float): Precio del libro.
    """
    title: str
    author: str
    genre: str
    price: float

class BookSchema(BookBase):
    """
    Representación de transferencia de un libro.
    No incluye las reseñas ni los pedidos del libro, para que la serialización
    nunca entre en un ciclo Book -> Review -> Book.

    Atributos:
        id (Optional[int]): ID del libro; None antes de crearlo.
    """
    id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)
