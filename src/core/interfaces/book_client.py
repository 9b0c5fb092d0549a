"""Contrato de los clientes de la API de libros.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Las variantes JSON/XML son intercambiables para la fachada y testeables
  por separado, sin que una extienda a la otra.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Book


@runtime_checkable
class BookRequestHandler(Protocol):
    """Contrato mínimo para un cliente de formato concreto.

    Reglas de diseño:
    - `fetch_books` es asíncrono porque hace exactamente un GET.
    - Devuelve los libros ya normalizados, en el orden del servidor.
    """

    async def fetch_books(self, author: str, limit: int) -> list[Book]:
        """Consulta la API por `author` (hasta `limit` resultados) y normaliza."""

        ...
