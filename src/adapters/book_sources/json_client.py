"""Cliente de la API de libros: respuestas JSON.

La API devuelve un array de objetos `{book: {...}, stock: {...}}`. El cuerpo
se valida en modo estricto: los valores JSON pasan tal cual, sin coerción.
"""

from __future__ import annotations

import httpx

from adapters.http_client import BookEndpoint
from core.config import AppSettings
from core.domain.formats import ResponseFormat
from core.domain.models import Book
from core.interfaces.book_client import BookRequestHandler
from core.services.book_normalizer import normalize_books_json


class JsonBookClient(BookRequestHandler):
    """Consulta libros por autor pidiendo `application/json`."""

    response_format = ResponseFormat.JSON

    def __init__(
        self,
        base_url: str | None = None,
        settings: AppSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.endpoint = BookEndpoint.build(base_url, settings, client)

    @property
    def base_url(self) -> str:
        return self.endpoint.base_url

    async def fetch_books(self, author: str, limit: int) -> list[Book]:
        response = await self.endpoint.fetch(author, limit, self.response_format)
        return normalize_books_json(response.content)
