"""Datos de prueba y respuestas HTTP simuladas."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx

BASE_URL = "http://books.test/by-author"

HAMLET = {
    "book": {"title": "Hamlet", "author": "Shakespeare", "isbn": "111"},
    "stock": {"quantity": 5, "price": 9.99},
}
MACBETH = {
    "book": {"title": "Macbeth", "author": "Shakespeare", "isbn": "222"},
    "stock": {"quantity": 0, "price": 7.5},
}

BOOKS_XML = """<?xml version="1.0" encoding="UTF-8"?>
<books>
  <bookResponse>
    <book><title>Hamlet</title><author>Shakespeare</author><isbn>111</isbn></book>
    <stock><quantity>5</quantity><price>9.99</price></stock>
  </bookResponse>
  <bookResponse>
    <book><title>Macbeth</title><author>Shakespeare</author><isbn>222</isbn></book>
    <stock><quantity>0</quantity><price>7.5</price></stock>
  </bookResponse>
</books>
"""


class RecordingTransport:
    """Devuelve la respuesta del handler y guarda cada request recibido."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )


def xml_response(text: str, status_code: int = 200) -> httpx.Response:
    return httpx.Response(
        status_code,
        content=text.encode("utf-8"),
        headers={"Content-Type": "application/xml"},
    )


def make_client(
    handler: Callable[[httpx.Request], httpx.Response],
) -> tuple[RecordingTransport, httpx.AsyncClient]:
    transport = RecordingTransport(handler)
    return transport, httpx.AsyncClient(transport=httpx.MockTransport(transport))
