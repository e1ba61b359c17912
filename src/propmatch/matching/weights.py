"""
Tablas de compatibilidad y umbrales del matching.

Los pesos y curvas numéricas viven en models.scoring (configurables);
acá quedan las reglas fijas del dominio.
"""

from types import MappingProxyType
from typing import Optional

# Intención del cliente -> tipos de operación compatibles
INTENT_TO_TRANSACTION = MappingProxyType({
    "BUY": ("SALE",),
    "RENT": ("RENTAL", "SHORT_TERM"),
    "LEASE": ("RENTAL",),
    "SELL": ("SALE",),
    "INVEST": ("SALE", "EXCHANGE"),
})

# Propósito del cliente -> tipos de propiedad compatibles
PURPOSE_TO_PROPERTY_TYPE = MappingProxyType({
    "RESIDENTIAL": (
        "RESIDENTIAL",
        "APARTMENT",
        "HOUSE",
        "MAISONETTE",
        "VACATION",
        "RENTAL",
    ),
    "COMMERCIAL": ("COMMERCIAL", "WAREHOUSE", "INDUSTRIAL"),
    "LAND": ("LAND", "PLOT", "FARM"),
    "PARKING": ("PARKING",),
    "OTHER": ("OTHER",),
})

# Mejor a peor. IN_PROGRESS no tiene rango: nunca cumple un mínimo.
ENERGY_CLASS_ORDER = ("A_PLUS", "A", "B", "C", "D", "E", "F", "G", "H")

# Umbrales de calidad del score global
MATCH_THRESHOLDS = MappingProxyType({
    "EXCELLENT": 85,
    "GOOD": 70,
    "FAIR": 50,
    "POOR": 25,
})

PARKING_AMENITIES = frozenset({"parking", "garage", "parking_space"})


def meets_energy_requirement(property_class: Optional[str], min_class: Optional[str]) -> bool:
    """True si la clase energética es igual o mejor que el mínimo pedido."""
    if not property_class or not min_class:
        return False
    if property_class not in ENERGY_CLASS_ORDER or min_class not in ENERGY_CLASS_ORDER:
        return False
    return ENERGY_CLASS_ORDER.index(property_class) <= ENERGY_CLASS_ORDER.index(min_class)


def match_quality(score: float) -> str:
    """Etiqueta de calidad para un score global."""
    for label in ("EXCELLENT", "GOOD", "FAIR", "POOR"):
        if score >= MATCH_THRESHOLDS[label]:
            return label
    return "NONE"
