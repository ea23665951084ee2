"""
Errores de la capa de acceso a datos.

Cualquier fallo del almacenamiento (conexión perdida, violación de
restricción, error del driver) se propaga como DataAccessError. La ausencia
de una fila nunca es un error: se representa con None o con una lista vacía.
"""


class DataAccessError(RuntimeError):
    """Fallo no recuperable al acceder a la base de datos."""
