"""
Configuración y utilidades para la gestión de la base de datos SQLAlchemy del bookstore.
Incluye la creación del motor, la fábrica de sesiones y la clase base para los modelos ORM.
El motor y la fábrica se construyen explícitamente en el punto de entrada y se inyectan
en los repositorios; este módulo no mantiene ningún estado global.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
import logging

logger = logging.getLogger(__name__)

Base = declarative_base()

def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    Crea el motor SQLAlchemy para la URL indicada.

    En SQLite se activan las claves foráneas en cada conexión, para que los errores
    de integridad referencial surjan del almacenamiento igual que en PostgreSQL.
    Una base en memoria usa StaticPool, así todas las sesiones ven la misma base.

    Args:
        url (str): Cadena de conexión.
        echo (bool): Si True, SQLAlchemy registra el SQL emitido.

    Returns:
        Engine: Motor listo para usar.
    """
    kwargs = {"echo": echo, "pool_pre_ping": True}
    is_sqlite = url.startswith("sqlite")
    if is_sqlite:
        kwargs["connect_args"] = {"check_same_thread": False}
        if ":memory:" in url or url in ("sqlite://", "sqlite+pysqlite://"):
            kwargs["poolclass"] = StaticPool
    engine = create_engine(url, **kwargs)
    if is_sqlite:
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    logger.info(f"Database engine created for dialect '{engine.dialect.name}'")
    return engine

def create_session_factory(engine: Engine) -> sessionmaker:
    """
    Devuelve la fábrica de sesiones ligada al motor.

    Args:
        engine (Engine): Motor SQLAlchemy.

    Returns:
        sessionmaker: Fábrica de sesiones; cada operación de repositorio abre la suya.
    """
    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)

def init_db(engine: Engine) -> None:
    """
    Crea todas las tablas definidas en los modelos si no existen.

    Args:
        engine (Engine): Motor SQLAlchemy.
    """
    # Importar los modelos registra sus tablas en Base.metadata
    from bookstore.models import book, order, review  # noqa: F401
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created (if missing).")
