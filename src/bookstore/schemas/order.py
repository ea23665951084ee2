"""
Esquemas Pydantic para la entidad Order en la API del bookstore.
"""

import datetime
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional

from bookstore.schemas.book import BookSchema

class OrderBase(BaseModel):
    """
    Esquema base para un pedido.

    Atributos:
        customer (str): Nombre del cliente.
        status (str): Estado libre del pedido.
        date (Optional[datetime.datetime]): Fecha del pedido; si falta se usa la actual.
    """
    customer: str
    status: str
    date: Optional[datetime.datetime] = None

class OrderSchema(OrderBase):
    """
    Representación de transferencia de un pedido.
    La lista de libros la rellena el servicio; al crear un pedido se ignora.
    """
    id: Optional[int] = None
    books: List[BookSchema] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)
