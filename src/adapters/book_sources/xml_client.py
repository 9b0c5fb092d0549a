"""Cliente de la API de libros: respuestas XML.

Pide `application/xml` y entrega los bytes crudos del cuerpo a
`adapters.xml_parser`, para que la declaración `encoding` del documento
decida la decodificación.

Nota:
- El grafo genérico del XML no garantiza la forma de `BookResponse`; el
  normalizador valida cada ruta de campo y lanza `MalformedResponseError`
  si falta alguna (p.ej. un `<stock>` ausente).
"""

from __future__ import annotations

import httpx

from adapters.http_client import BookEndpoint
from adapters.xml_parser import parse_xml_document
from core.config import AppSettings
from core.domain.formats import ResponseFormat
from core.domain.models import Book
from core.interfaces.book_client import BookRequestHandler
from core.services.book_normalizer import normalize_books


class XmlBookClient(BookRequestHandler):
    """Consulta libros por autor pidiendo `application/xml`."""

    response_format = ResponseFormat.XML

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
        return normalize_books(parse_xml_document(response.content))
