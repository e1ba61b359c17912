"""
Normalización de enums para el importador.

Convierte valores libres o traducidos (inglés / griego) al token
canónico en mayúsculas que espera el esquema. Si no hay match
devuelve None para que el llamador marque la fila; nunca lanza.
"""

import json
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any, Optional

from propmatch.importer.enum_mappings import (
    CLIENT_ENUM_MAPPINGS,
    PROPERTY_ENUM_MAPPINGS,
    EnumMapping,
)

_WHITESPACE = re.compile(r"\s+")


def _stringify(value: Any) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, ensure_ascii=False, default=str)
    return str(value)


def _is_empty(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def normalize_enum_value(value: Any, mapping: EnumMapping) -> Optional[str]:
    """
    Normaliza un valor al token canónico de `mapping`.

    1. None / vacío -> None
    2. Si el valor en mayúsculas ya es canónico se devuelve tal cual
    3. Si no, se busca en minúsculas (espacios colapsados) en la tabla

    Args:
        value: Valor crudo de la fila (str, número, dict...)
        mapping: Tabla alias -> token

    Returns:
        Token canónico o None
    """
    if _is_empty(value):
        return None

    text = _stringify(value).strip()

    upper = text.upper()
    if upper in set(mapping.values()):
        return upper

    key = _WHITESPACE.sub(" ", text.lower())
    return mapping.get(key)


def _normalize_row(row: Mapping[str, Any], mappings: Mapping[str, EnumMapping]) -> dict[str, Any]:
    normalized = dict(row)
    for field, mapping in mappings.items():
        if field in normalized and not _is_empty(normalized[field]):
            normalized[field] = normalize_enum_value(normalized[field], mapping)
    return normalized


def normalize_property_enums(row: Mapping[str, Any]) -> dict[str, Any]:
    """Copia de la fila con los enums de propiedad normalizados."""
    return _normalize_row(row, PROPERTY_ENUM_MAPPINGS)


def normalize_client_enums(row: Mapping[str, Any]) -> dict[str, Any]:
    """Copia de la fila con los enums de cliente normalizados."""
    return _normalize_row(row, CLIENT_ENUM_MAPPINGS)


def find_unrecognized_enums(
    row: Mapping[str, Any],
    mappings: Mapping[str, EnumMapping],
) -> dict[str, Any]:
    """
    Campos enum con valor no vacío que no se pueden normalizar.

    Returns:
        Dict campo -> valor original
    """
    return {
        field: row[field]
        for field, mapping in mappings.items()
        if field in row
        and not _is_empty(row[field])
        and normalize_enum_value(row[field], mapping) is None
    }
