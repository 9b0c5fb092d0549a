"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los clientes HTTP reciben la URL base por inyección, nunca desde un global.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.formats import ResponseFormat

DEFAULT_BASE_URL = "http://api.book-seller-example.com/by-author"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "book-search"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "book-search"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "book-search"
    return Path.home() / ".config" / "book-search"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="BOOK_SEARCH_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        min_length=8,
        description="Endpoint de la API del librero (búsqueda por autor).",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request (segundos).",
    )
    user_agent: str = Field(
        default="book-search-client/0.1",
        min_length=1,
        description="User-Agent para las peticiones a la API.",
    )
    default_format: ResponseFormat = Field(
        default=ResponseFormat.JSON,
        description="Formato de respuesta por defecto de la CLI (json/xml).",
    )

    @field_validator("default_format", mode="before")
    @classmethod
    def _parse_default_format(cls, value: object) -> object:
        # Permite `BOOK_SEARCH_DEFAULT_FORMAT=xml` además del media type.
        if isinstance(value, str):
            return ResponseFormat.from_name(value)
        return value
