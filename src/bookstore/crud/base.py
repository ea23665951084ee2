"""
Base común para los repositorios del bookstore.

Cada operación de un repositorio abre su propia sesión (una unidad de trabajo por
llamada), confirma al terminar y la cierra. Cualquier SQLAlchemyError se revierte,
se registra y se propaga como DataAccessError; no hay reintentos.
"""

from contextlib import contextmanager
from typing import Iterator
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from bookstore.core.exceptions import DataAccessError

logger = logging.getLogger(__name__)


class BaseRepository:
    """Repositorio base: guarda la fábrica de sesiones inyectada."""

    def __init__(self, session_factory: sessionmaker) -> None:
        """
        Args:
            session_factory (sessionmaker): Fábrica de sesiones SQLAlchemy.
        """
        self._session_factory = session_factory

    @contextmanager
    def _unit_of_work(self, operation: str) -> Iterator[Session]:
        """
        Abre una sesión para una sola operación y la confirma al salir.

        Args:
            operation (str): Descripción corta de la operación, usada en logs y errores.

        Yields:
            Session: Sesión SQLAlchemy válida solo dentro del bloque.

        Raises:
            DataAccessError: Si la base de datos falla durante la operación.
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.exception(f"Database error while trying to {operation}: {e}")
            raise DataAccessError(f"Failed to {operation}") from e
        except DataAccessError:
            session.rollback()
            raise
        finally:
            session.close()
