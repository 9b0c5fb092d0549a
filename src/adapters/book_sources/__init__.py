"""Clientes de la API de libros (uno por formato de respuesta).

Por qué un paquete:
- Cada módulo implementa `core.interfaces.book_client.BookRequestHandler`.
- Las variantes no heredan entre sí; la fachada elige por `ResponseFormat`.
"""

from adapters.book_sources.json_client import JsonBookClient
from adapters.book_sources.xml_client import XmlBookClient

__all__ = [
    "JsonBookClient",
    "XmlBookClient",
]
