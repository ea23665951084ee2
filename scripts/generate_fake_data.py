"""
Script para generación de datos falsos en la base de datos del bookstore.

Este módulo crea libros, pedidos (con sus libros asociados) y reseñas de prueba
utilizando Faker y los servicios del proyecto. Está pensado para poblar entornos
de desarrollo o pruebas con datos realistas y variados.

Uso:
    Ejecutar directamente este script. Usa la DATABASE_URL de la configuración
    (variables de entorno o .env) y crea las tablas si no existen.

Nota:
    - Crear un pedido y asociarle libros son llamadas separadas: si una asociación
      falla, el pedido queda creado con los libros que sí se asociaron.
"""

import random
import logging
import sys
from faker import Faker
from typing import List

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

try:
    from bookstore.core.config import get_settings
    from bookstore.core.exceptions import DataAccessError
    from bookstore.main import build_container
    from bookstore.schemas.book import BookSchema
    from bookstore.schemas.order import OrderSchema
    from bookstore.schemas.review import ReviewSchema
    logger.info("Módulos del proyecto importados correctamente.")
except ImportError as e:
    logger.error(f"Error importando módulos: {e}.")
    logger.error("Asegúrate de haber ejecutado 'uv pip install -e .[seed]'")
    sys.exit(1)

NUM_FAKE_BOOKS: int = 40
NUM_FAKE_ORDERS: int = 25
MAX_BOOKS_PER_ORDER: int = 5
MAX_REVIEWS_PER_BOOK: int = 4
GENRES: List[str] = [
    "Novela", "Ciencia ficción", "Fantasía", "Historia", "Biografía",
    "Ensayo", "Poesía", "Programación",
]
STATUSES: List[str] = ["NEW", "PAID", "SHIPPED", "DELIVERED", "CANCELLED"]

fake = Faker(['es_ES', 'en_US'])
logger.info("Instancia de Faker creada.")

def generate_data() -> None:
    """
    Genera libros, pedidos y reseñas falsas en la base de datos.

    Los errores de la base de datos en un elemento concreto se registran y el
    script continúa con el siguiente.

    Returns:
        None
    """
    logger.info("=============================================")
    logger.info(" Iniciando script de generación de datos falsos")
    logger.info("=============================================")

    container = build_container(get_settings())
    book_ids: List[int] = []

    try:
        logger.info(f"--- Fase 1: Creando {NUM_FAKE_BOOKS} Libros Falsos ---")
        for i in range(NUM_FAKE_BOOKS):
            book_in = BookSchema(
                title=fake.sentence(nb_words=random.randint(2, 6)).rstrip("."),
                author=fake.name(),
                genre=random.choice(GENRES),
                price=round(random.uniform(5, 60), 2),
            )
            try:
                created = container.book_service.create(book_in)
                book_ids.append(created.id)
                logger.info(f"  ({i+1}/{NUM_FAKE_BOOKS}) Libro Creado: '{created.title}' (ID: {created.id})")
            except DataAccessError as e:
                logger.error(f"  ({i+1}/{NUM_FAKE_BOOKS}) Error creando libro: {e}")

        if not book_ids:
            logger.error("No se pudo crear ningún libro. Abortando.")
            return
        logger.info(f"--- Fase 1 Completada: {len(book_ids)} libros listos. ---")

        logger.info(f"--- Fase 2: Creando {NUM_FAKE_ORDERS} Pedidos Falsos ---")
        total_links: int = 0
        for i in range(NUM_FAKE_ORDERS):
            order_in = OrderSchema(
                customer=fake.name(),
                date=fake.date_time_between(start_date="-1y", end_date="now"),
                status=random.choice(STATUSES),
            )
            try:
                order = container.order_service.create(order_in)
            except DataAccessError as e:
                logger.error(f"  ({i+1}/{NUM_FAKE_ORDERS}) Error creando pedido: {e}")
                continue

            selected: List[int] = random.sample(book_ids, random.randint(0, min(MAX_BOOKS_PER_ORDER, len(book_ids))))
            for book_id in selected:
                try:
                    container.order_service.add_book(order.id, book_id)
                    total_links += 1
                except DataAccessError as e:
                    logger.warning(f"  No se pudo asociar el libro {book_id} al pedido {order.id}: {e}")
            logger.info(f"  ({i+1}/{NUM_FAKE_ORDERS}) Pedido {order.id} de {order.customer} con {len(selected)} libros")
        logger.info(f"--- Fase 2 Completada: {total_links} asociaciones creadas. ---")

        logger.info(f"--- Fase 3: Generando Reseñas Falsas (0-{MAX_REVIEWS_PER_BOOK} por libro) ---")
        total_reviews_added: int = 0
        for book_id in book_ids:
            for _ in range(random.randint(0, MAX_REVIEWS_PER_BOOK)):
                review_in = ReviewSchema(
                    book_id=book_id,
                    reviewer=fake.name(),
                    rating=random.randint(1, 5),
                    text=fake.paragraph(nb_sentences=random.randint(1, 4)),
                )
                try:
                    container.review_service.create(review_in)
                    total_reviews_added += 1
                except DataAccessError as e:
                    logger.warning(f"  Error creando reseña para el libro {book_id}: {e}")
        logger.info(f"--- Fase 3 Completada: Total reseñas falsas añadidas: {total_reviews_added} ---")

    finally:
        logger.info("Cerrando conexiones de base de datos.")
        container.engine.dispose()

if __name__ == "__main__":
    generate_data()
    logger.info("============================================")
    logger.info(" Script de Generación de Datos Finalizado")
    logger.info("============================================")
