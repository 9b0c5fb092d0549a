"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni parsers: solo conceptos del problema.
"""

from core.domain.formats import ResponseFormat
from core.domain.models import Book, BookDetails, BookResponse, StockInfo

__all__ = [
    "Book",
    "BookDetails",
    "BookResponse",
    "ResponseFormat",
    "StockInfo",
]
