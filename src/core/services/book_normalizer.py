"""Normalización de respuestas de la API a `Book`.

Por qué un módulo aparte:
- Es lógica pura (sin I/O) compartida por los clientes JSON y XML.
- La validación de forma vive en un único sitio: si la API (o el parseo XML)
  entrega algo que no encaja con `BookResponse`, fallamos aquí de forma
  explícita en lugar de devolver libros con campos vacíos.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from core.domain.models import Book, BookResponse

logger = logging.getLogger(__name__)

_BOOK_RESPONSES = TypeAdapter(list[BookResponse])


class MalformedResponseError(ValueError):
    """La respuesta decodificada no tiene la forma de `BookResponse`."""


def parse_book_response(raw: Any) -> BookResponse:
    """Valida un elemento decodificado (dict) como `BookResponse`.

    Modo laxo: pensado para el grafo genérico del XML, donde todo llega como
    texto (`"5"`, `"9.99"`). Es la única ruta con coerción numérica.
    """

    try:
        return BookResponse.model_validate(raw)
    except ValidationError as exc:
        raise MalformedResponseError(f"Malformed book response: {exc}") from exc


def normalize_book(response: BookResponse) -> Book:
    """Aplana un `BookResponse` en un `Book` sin transformar los valores."""

    return Book(
        title=response.book.title,
        author=response.book.author,
        isbn=response.book.isbn,
        quantity=response.stock.quantity,
        price=response.stock.price,
    )


def normalize_books(raw_items: Any) -> list[Book]:
    """Normaliza una lista de elementos decodificados, respetando el orden."""

    if not isinstance(raw_items, list):
        raise MalformedResponseError(
            f"Expected a list of book responses, got {type(raw_items).__name__}"
        )
    books = [normalize_book(parse_book_response(item)) for item in raw_items]
    logger.debug("Normalized %d book records", len(books))
    return books


def normalize_books_json(payload: str | bytes) -> list[Book]:
    """Valida un cuerpo JSON (array de `BookResponse`) en modo estricto y aplana.

    Sin coerción: `"5"` o `true` en `stock` son errores de forma, no números.
    Un JSON mal formado o que no sea un array también es `MalformedResponseError`.
    """

    try:
        responses = _BOOK_RESPONSES.validate_json(payload, strict=True)
    except ValidationError as exc:
        raise MalformedResponseError(f"Malformed book response: {exc}") from exc
    books = [normalize_book(response) for response in responses]
    logger.debug("Normalized %d book records", len(books))
    return books
