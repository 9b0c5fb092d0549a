"""Fachada de búsqueda de libros.

Punto de entrada único para los llamadores: oculta qué cliente (JSON/XML)
atiende la petición. Cada llamada construye su propio cliente, así que no hay
estado compartido entre invocaciones concurrentes.

Los errores no se traducen: fallos de red/HTTP (`httpx.HTTPError`), de parseo
XML (`ParseError`) o de forma (`MalformedResponseError`) llegan tal cual.
"""

from __future__ import annotations

import httpx

from adapters.book_sources import JsonBookClient, XmlBookClient
from core.config import AppSettings
from core.domain.formats import ResponseFormat
from core.domain.models import Book
from core.interfaces.book_client import BookRequestHandler

_HANDLERS: dict[ResponseFormat, type[JsonBookClient] | type[XmlBookClient]] = {
    ResponseFormat.JSON: JsonBookClient,
    ResponseFormat.XML: XmlBookClient,
}


def get_request_handler(
    response_format: ResponseFormat | None = None,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> BookRequestHandler:
    """Construye el cliente que corresponde a `response_format` (JSON por defecto)."""

    fmt = ResponseFormat.default() if response_format is None else response_format
    handler_cls = _HANDLERS.get(fmt)
    if handler_cls is None:
        raise ValueError(f"Unsupported response format: {fmt!r}")

    settings = settings or AppSettings()
    return handler_cls(base_url=settings.base_url, settings=settings, client=client)


async def fetch_books_by_author(
    author: str,
    limit: int,
    format: ResponseFormat | None = None,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[Book]:
    """Devuelve los libros de `author` (hasta `limit`) en el formato pedido.

    Hace exactamente un GET. `author` y `limit` se pasan al servidor sin validar.
    """

    handler = get_request_handler(format, settings=settings, client=client)
    return await handler.fetch_books(author, limit)
