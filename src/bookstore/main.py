"""
Punto de entrada de la API del bookstore.

`create_app` construye explícitamente el motor, la fábrica de sesiones, los
repositorios y los servicios, y los guarda en `app.state.container`. No hay
instancias globales: cada aplicación (y cada test) tiene las suyas.

Uso:
    uvicorn bookstore.main:create_app --factory
    o bien el script `bookstore` instalado con el paquete.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from bookstore.api import books, orders, reviews
from bookstore.api.deps import Container
from bookstore.core.config import Settings, get_settings
from bookstore.core.exceptions import DataAccessError
from bookstore.crud import BookRepository, OrderRepository, ReviewRepository
from bookstore.db.session import create_db_engine, create_session_factory, init_db
from bookstore.services import BookService, OrderService, ReviewService

logger = logging.getLogger(__name__)


def build_container(settings: Settings) -> Container:
    """
    Construye el grafo de dependencias a partir de la configuración.

    Args:
        settings (Settings): Configuración de la aplicación.

    Returns:
        Container: Motor y servicios listos para usar.
    """
    engine = create_db_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
    init_db(engine)
    session_factory = create_session_factory(engine)

    book_repository = BookRepository(session_factory)
    order_repository = OrderRepository(session_factory)
    review_repository = ReviewRepository(session_factory)

    return Container(
        engine=engine,
        book_service=BookService(book_repository, review_repository, order_repository),
        order_service=OrderService(order_repository),
        review_service=ReviewService(review_repository),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    app.state.container.engine.dispose()
    logger.info("Database engine disposed")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Crea la aplicación FastAPI con sus rutas y manejadores de errores.

    Args:
        settings (Optional[Settings]): Configuración; si es None se usa get_settings().

    Returns:
        FastAPI: Aplicación lista para servir.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    app = FastAPI(title="Bookstore API", lifespan=lifespan)
    app.state.container = build_container(settings)

    app.include_router(books.router)
    app.include_router(orders.router)
    app.include_router(reviews.router)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        logger.error(f"HTTPException: {exc.detail} (status_code={exc.status_code})")
        return JSONResponse(status_code=exc.status_code, content={"message": exc.detail})

    @app.exception_handler(DataAccessError)
    async def data_access_exception_handler(request: Request, exc: DataAccessError):
        logger.error(f"Data access error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=500, content={"message": str(exc)})

    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        logger.error(f"Invalid request on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=400, content={"message": str(exc)})

    logger.info(f"Bookstore API created (environment={settings.ENVIRONMENT})")
    return app


def run() -> None:
    """Arranca uvicorn con la configuración del entorno."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
