"""
Esquemas Pydantic para la entidad Review en la API del bookstore.
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional

from bookstore.schemas.book import BookSchema

class ReviewBase(BaseModel):
    """
    Esquema base para una reseña.

    Atributos:
        reviewer (str): Nombre de quien escribe la reseña.
        rating (int): Calificación.
        text (str): Texto de la reseña.
    """
    reviewer: str
    rating: int
    text: str

class ReviewSchema(ReviewBase):
    """
    Representación de transferencia de una reseña.

    Atributos:
        id (Optional[int]): ID de la reseña; None antes de crearla.
        book_id (Optional[int]): ID del libro reseñado.
        book (Optional[BookSchema]): Libro reseñado; lo adjunta el servicio en las lecturas.
    """
    id: Optional[int] = None
    book_id: Optional[int] = None
    book: Optional[BookSchema] = None

    model_config = ConfigDict(from_attributes=True)
