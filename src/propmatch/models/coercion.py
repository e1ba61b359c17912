"""
Coerción tolerante de valores crudos.

Los registros llegan del ORM o de archivos importados con campos
parcialmente nulos o mal formados. Estas funciones nunca lanzan:
ante un valor inválido devuelven None (o una colección vacía).
"""

import json
import math
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional

_TRUE_STRINGS = {"true", "yes", "y", "1", "si", "sí", "ναι"}
_FALSE_STRINGS = {"false", "no", "n", "0", "όχι", "οχι"}


def to_number(value: Any) -> Optional[float]:
    """Convierte int/float/Decimal/str numérico a float."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, Decimal):
        try:
            number = float(value)
        except (InvalidOperation, ValueError):
            return None
    elif isinstance(value, str):
        cleaned = value.strip().replace(" ", "")
        if not cleaned:
            return None
        try:
            number = float(cleaned)
        except ValueError:
            return None
    else:
        return None

    if math.isnan(number) or math.isinf(number):
        return None
    return number


def to_int(value: Any) -> Optional[int]:
    number = to_number(value)
    if number is None:
        return None
    return int(round(number))


def to_bool(value: Any) -> Optional[bool]:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        if value in (0, 1):
            return bool(value)
        return None
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    return None


def to_text(value: Any) -> Optional[str]:
    """Texto recortado; vacío o no escalar -> None."""
    if value is None or isinstance(value, (dict, list, tuple, set)):
        return None
    if isinstance(value, Enum):
        value = value.value
    text = str(value).strip()
    return text or None


def to_token(value: Any) -> Optional[str]:
    """Token de enum en mayúsculas (sin validar contra el vocabulario)."""
    text = to_text(value)
    return text.upper() if text else None


def parse_json(value: Any) -> Any:
    """Decodifica strings JSON; cualquier otro valor se devuelve tal cual."""
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8", errors="ignore")
    if isinstance(value, str):
        try:
            return json.loads(value)
        except (json.JSONDecodeError, ValueError):
            return value
    return value


def to_str_list(value: Any) -> list[str]:
    """
    Lista de strings desde una lista, un array JSON o un string
    separado por comas.
    """
    if value is None:
        return []

    parsed = parse_json(value)
    if isinstance(parsed, str):
        items = parsed.split(",")
    elif isinstance(parsed, (list, tuple, set)):
        items = list(parsed)
    else:
        return []

    result = []
    for item in items:
        text = to_text(item)
        if text:
            result.append(text)
    return result


def to_dict(value: Any) -> Optional[dict]:
    parsed = parse_json(value)
    if isinstance(parsed, dict):
        return parsed
    return None
