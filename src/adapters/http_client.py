"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts y headers de todas las peticiones a la API.
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con transporte mock.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from core.config import AppSettings
from core.domain.formats import ResponseFormat

logger = logging.getLogger(__name__)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults seguros.

    Por qué un builder:
    - Centraliza timeouts/headers para que ambos formatos se comporten igual.
    - Sin reintentos: cualquier fallo del transporte llega tal cual al llamador.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
    )


def build_query_params(author: str, limit: int) -> dict[str, Any]:
    """Parámetros de consulta que espera la API del librero."""

    return {"author": author, "limit": limit}


async def get_books_payload(
    url: str,
    params: dict[str, Any],
    response_format: ResponseFormat,
    *,
    settings: AppSettings | None = None,
    client: httpx.AsyncClient | None = None,
) -> httpx.Response:
    """Hace el único GET de una consulta y devuelve la respuesta 2xx.

    - `Accept` se negocia con el valor del `ResponseFormat`.
    - Un status no-2xx lanza `httpx.HTTPStatusError` sin envolver.
    - Si el llamador inyecta `client`, no se cierra aquí.
    """

    headers = {"Accept": response_format.value}
    logger.debug("GET %s params=%s accept=%s", url, params, response_format.value)

    if client is not None:
        response = await client.get(url, params=params, headers=headers)
    else:
        async with build_async_client(settings) as own_client:
            response = await own_client.get(url, params=params, headers=headers)

    response.raise_for_status()
    return response


@dataclass(frozen=True)
class BookEndpoint:
    """Destino de las consultas de un cliente: URL base, settings y client opcional.

    Los clientes JSON/XML lo componen en lugar de heredar uno del otro.
    """

    base_url: str
    settings: AppSettings
    client: httpx.AsyncClient | None = None

    @classmethod
    def build(
        cls,
        base_url: str | None = None,
        settings: AppSettings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> "BookEndpoint":
        settings = settings or AppSettings()
        return cls(base_url=base_url or settings.base_url, settings=settings, client=client)

    async def fetch(self, author: str, limit: int, response_format: ResponseFormat) -> httpx.Response:
        return await get_books_payload(
            self.base_url,
            build_query_params(author, limit),
            response_format,
            settings=self.settings,
            client=self.client,
        )
