"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- El mismo contrato sirve para JSON (decodificado) y XML (tras el parseo).

Nota:
- `Book` es lo que ve el llamador; `BookResponse` es la forma anidada que
  devuelve la API y solo vive durante una petición.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class Book(BaseModel):
    """Registro plano de un libro, tal como se entrega al llamador.

    Inmutable: se construye una vez en el normalizador y no cambia.
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(
        ...,
        description="Título del libro.",
    )
    author: str = Field(
        ...,
        description="Autor tal como lo devuelve la API.",
    )
    isbn: str = Field(
        ...,
        description="Identificador ISBN.",
    )
    quantity: int = Field(
        ...,
        ge=0,
        description="Unidades en stock.",
    )
    price: float = Field(
        ...,
        ge=0,
        description="Precio unitario, sin conversión de moneda.",
    )


class BookDetails(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: str = Field(..., description="Título del libro.")
    author: str = Field(..., description="Autor del libro.")
    isbn: str = Field(..., description="Identificador ISBN.")


class StockInfo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    quantity: int = Field(..., ge=0, description="Unidades en stock.")
    price: float = Field(..., ge=0, description="Precio unitario.")


class BookResponse(BaseModel):
    """Elemento de la respuesta de la API antes de normalizar.

    Forma: `{"book": {title, author, isbn}, "stock": {quantity, price}}`.
    """

    model_config = ConfigDict(extra="ignore")

    book: BookDetails = Field(
        ...,
        description="Sub-registro descriptivo.",
    )
    stock: StockInfo = Field(
        ...,
        description="Sub-registro de inventario.",
    )
