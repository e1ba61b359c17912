"""
Normalizadores para matching.

Extraen y normalizan datos de clientes y propiedades para que los
scorers comparen valores consistentes (ubicaciones sin acentos,
amenities en snake_case, superficies en m², enums canónicos).
"""

import re
import unicodedata
from typing import Any, Optional

from propmatch.models import ClientForMatching, ClientPropertyPreferences, PropertyForMatching
from propmatch.models.coercion import parse_json, to_bool, to_number, to_str_list

SQFT_TO_SQM = 0.092903

_FLOOR_NAMES = {
    "ground": 0.0,
    "ισόγειο": 0.0,
    "basement": -1.0,
    "υπόγειο": -1.0,
    "penthouse": 99.0,  # Último piso
    "ρετιρέ": 99.0,
    "mezzanine": 0.5,
    "ημιώροφος": 0.5,
}

# Sin acentos: se aplican después de quitar diacríticos
_LOCATION_PREFIX = re.compile(r"^(city of|municipality of|δημος|νομος)\s*", re.IGNORECASE)
_LOCATION_SUFFIX = re.compile(r"\s*(city|municipality|δημος)$", re.IGNORECASE)


# =============================================================================
# Números
# =============================================================================


def parse_floor(floor: Any) -> Optional[float]:
    """
    Convierte el piso a número.

    Maneja: "1", "Ground", "Ισόγειο", "Basement", "-1", "Penthouse"...
    """
    if floor is None or isinstance(floor, bool):
        return None
    if isinstance(floor, (int, float)):
        return to_number(floor)

    normalized = str(floor).strip().lower()
    if not normalized:
        return None
    if normalized in _FLOOR_NAMES:
        return _FLOOR_NAMES[normalized]

    match = re.match(r"^-?\d+(\.\d+)?", normalized)
    if not match:
        return None
    return float(match.group(0))


# =============================================================================
# Rangos desde preferencias
# =============================================================================


def get_budget_range(client: ClientForMatching) -> tuple[Optional[float], Optional[float]]:
    return client.budget_min, client.budget_max


def get_bedroom_range(prefs: ClientPropertyPreferences) -> tuple[Optional[int], Optional[int]]:
    return prefs.bedrooms_min, prefs.bedrooms_max


def get_size_range(prefs: ClientPropertyPreferences) -> tuple[Optional[float], Optional[float]]:
    return prefs.size_min_sqm, prefs.size_max_sqm


def get_floor_range(
    prefs: ClientPropertyPreferences,
) -> tuple[Optional[float], Optional[float], bool]:
    return prefs.floor_min, prefs.floor_max, prefs.ground_floor_only


def is_price_in_budget(
    price: Optional[float],
    budget_min: Optional[float],
    budget_max: Optional[float],
    tolerance_percent: float = 0,
) -> bool:
    """Chequea si el precio entra en el presupuesto con tolerancia opcional."""
    if price is None:
        return False

    if budget_min is None and budget_max is None:
        return True

    tolerance = tolerance_percent / 100
    if budget_min is not None and price < budget_min * (1 - tolerance):
        return False
    if budget_max is not None and price > budget_max * (1 + tolerance):
        return False
    return True


# =============================================================================
# Ubicación
# =============================================================================


def normalize_location(location: Any) -> str:
    """Minúsculas, sin acentos y sin prefijos tipo 'City of' / 'Δήμος'."""
    if not location or not isinstance(location, str):
        return ""

    decomposed = unicodedata.normalize("NFD", location.strip().lower())
    text = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    text = _LOCATION_PREFIX.sub("", text)
    text = _LOCATION_SUFFIX.sub("", text)
    return text.strip()


def get_property_locations(property: PropertyForMatching) -> list[str]:
    """Identificadores de ubicación de la propiedad, sin duplicados."""
    locations = []
    for raw in (
        property.area,
        property.address_city,
        property.municipality,
        property.address_state,
    ):
        normalized = normalize_location(raw)
        if normalized and normalized not in locations:
            locations.append(normalized)
    return locations


def parse_areas_of_interest(areas: Any) -> list[str]:
    """Zonas del cliente desde lista, array JSON o string separado por comas."""
    result = []
    for area in to_str_list(areas):
        normalized = normalize_location(area)
        if normalized:
            result.append(normalized)
    return result


# =============================================================================
# Amenities
# =============================================================================


def normalize_amenity_key(key: str) -> str:
    key = re.sub(r"[\s-]+", "_", key.strip().lower())
    return re.sub(r"[^a-z0-9_]", "", key)


def extract_property_amenities(amenities: Any) -> set[str]:
    """
    Amenities de la propiedad como set de keys normalizadas.

    Acepta {"pool": true, "gym": false} o ["pool", "gym"].
    """
    parsed = parse_json(amenities)
    result = set()

    if isinstance(parsed, dict):
        for key, value in parsed.items():
            if to_bool(value) is True:
                result.add(normalize_amenity_key(str(key)))
    elif isinstance(parsed, (list, tuple, set)):
        for item in parsed:
            if isinstance(item, str):
                result.add(normalize_amenity_key(item))

    result.discard("")
    return result


def parse_amenity_preferences(
    required: Optional[list[str]],
    preferred: Optional[list[str]],
) -> tuple[set[str], set[str]]:
    required_set = {normalize_amenity_key(a) for a in (required or [])} - {""}
    preferred_set = {normalize_amenity_key(a) for a in (preferred or [])} - {""}
    return required_set, preferred_set


# =============================================================================
# Superficie
# =============================================================================


def get_property_size_sqm(property: PropertyForMatching) -> Optional[float]:
    """Superficie en m²: neta, si no bruta, si no convertida desde sq ft."""
    if property.size_net_sqm:
        return property.size_net_sqm
    if property.size_gross_sqm:
        return property.size_gross_sqm
    if property.square_feet:
        return float(round(property.square_feet * SQFT_TO_SQM))
    return None


# =============================================================================
# Enums
# =============================================================================

_FURNISHED = {
    "NO": "NO",
    "UNFURNISHED": "NO",
    "NONE": "NO",
    "PARTIALLY": "PARTIALLY",
    "PARTIAL": "PARTIALLY",
    "SEMI": "PARTIALLY",
    "FULLY": "FULLY",
    "FULL": "FULLY",
    "YES": "FULLY",
    "FURNISHED": "FULLY",
}

_HEATING = {
    "AUTONOMOUS": "AUTONOMOUS",
    "INDIVIDUAL": "AUTONOMOUS",
    "CENTRAL": "CENTRAL",
    "COMMUNAL": "CENTRAL",
    "NATURAL_GAS": "NATURAL_GAS",
    "GAS": "NATURAL_GAS",
    "HEAT_PUMP": "HEAT_PUMP",
    "HEATPUMP": "HEAT_PUMP",
    "ELECTRIC": "ELECTRIC",
    "ELECTRICAL": "ELECTRIC",
    "NONE": "NONE",
    "NO": "NONE",
}

_CONDITION = {
    "EXCELLENT": "EXCELLENT",
    "NEW": "EXCELLENT",
    "VERY_GOOD": "VERY_GOOD",
    "VERYGOOD": "VERY_GOOD",
    "GOOD": "GOOD",
    "AVERAGE": "GOOD",
    "NEEDS_RENOVATION": "NEEDS_RENOVATION",
    "NEEDSRENOVATION": "NEEDS_RENOVATION",
    "RENOVATE": "NEEDS_RENOVATION",
    "FIXER": "NEEDS_RENOVATION",
}

_ENERGY_CLASS = {
    "A_PLUS": "A_PLUS",
    "APLUS": "A_PLUS",
    "A": "A",
    "B": "B",
    "C": "C",
    "D": "D",
    "E": "E",
    "F": "F",
    "G": "G",
    "H": "H",
    "IN_PROGRESS": "IN_PROGRESS",
    "INPROGRESS": "IN_PROGRESS",
    "PENDING": "IN_PROGRESS",
}


def _to_key(value: Any) -> Optional[str]:
    if value is None:
        return None
    key = re.sub(r"[\s_-]+", "_", str(value).strip().upper())
    return key or None


def normalize_furnished(value: Any) -> Optional[str]:
    key = _to_key(value)
    if not key:
        return None
    return _FURNISHED.get(key, key)


def normalize_heating(value: Any) -> Optional[str]:
    key = _to_key(value)
    if not key:
        return None
    return _HEATING.get(key, key)


def normalize_condition(value: Any) -> Optional[str]:
    key = _to_key(value)
    if not key:
        return None
    return _CONDITION.get(key, key)


def normalize_energy_class(value: Any) -> Optional[str]:
    key = _to_key(value)
    if not key:
        return None
    key = re.sub(r"_?\+", "_PLUS", key)
    return _ENERGY_CLASS.get(key, key)
