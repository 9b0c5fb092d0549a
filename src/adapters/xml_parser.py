"""Conversión genérica de documentos XML a objetos Python.

Reglas:
- Los hijos del elemento raíz forman la lista resultante.
- Un elemento con hijos se convierte en dict {tag: valor}; tags repetidos
  se agrupan en una lista.
- Un elemento hoja se convierte en su texto, sin tocar, o `None` si está vacío.
- Se eliminan los namespaces (`{uri}tag` -> `tag`).

No conoce `BookResponse`: la validación de forma la hace el normalizador.
"""

from __future__ import annotations

from typing import Any
from xml.etree import ElementTree as ET


def parse_xml_document(text: str | bytes) -> list[Any]:
    """Parsea un documento y devuelve los hijos de la raíz como objetos.

    Con `bytes`, la declaración `encoding` del propio documento manda.

    Un XML mal formado lanza `xml.etree.ElementTree.ParseError` tal cual.
    """

    root = ET.fromstring(text)
    return [element_to_object(child) for child in root]


def element_to_object(element: ET.Element) -> Any:
    children = list(element)
    if not children:
        return element.text or None

    data: dict[str, Any] = {}
    for child in children:
        tag = _local_name(child.tag)
        value = element_to_object(child)
        if tag in data:
            existing = data[tag]
            if isinstance(existing, list):
                existing.append(value)
            else:
                data[tag] = [existing, value]
        else:
            data[tag] = value
    return data


def _local_name(tag: str) -> str:
    # "{http://ns}book" -> "book"
    return tag.rsplit("}", 1)[-1]
