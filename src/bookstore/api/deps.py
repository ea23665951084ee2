"""
Dependencias FastAPI: entregan a cada ruta los servicios construidos en create_app.
"""

from dataclasses import dataclass

from fastapi import Request
from sqlalchemy.engine import Engine

from bookstore.services import BookService, OrderService, ReviewService


@dataclass
class Container:
    """Objetos construidos una sola vez al arrancar la aplicación."""
    engine: Engine
    book_service: BookService
    order_service: OrderService
    review_service: ReviewService


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_book_service(request: Request) -> BookService:
    return get_container(request).book_service


def get_order_service(request: Request) -> OrderService:
    return get_container(request).order_service


def get_review_service(request: Request) -> ReviewService:
    return get_container(request).review_service
