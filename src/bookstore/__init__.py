"""Backend de gestión de una librería: libros, pedidos y reseñas."""

__version__ = "0.1.0"
