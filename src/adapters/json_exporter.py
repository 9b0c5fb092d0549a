"""Exportación JSON de resultados.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- Guarda exactamente la forma plana de `Book` que ve el llamador.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Sequence

from core.domain.models import Book


def export_books_json(*, books: Sequence[Book], output_path: Path) -> Path:
    """Exporta una lista de `Book` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [book.model_dump(mode="json") for book in books]
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
