"""
Configuración de pytest y fixtures compartidos.
"""

import pytest

from propmatch.config import get_settings
from propmatch.matching import MatchCalculator, MatchingEngine
from propmatch.models import CriterionWeights, ScoringCurves


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Cada test arranca con la configuración recién leída del entorno."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def calculator():
    """Calculador con pesos y curvas por defecto (independiente del .env)."""
    return MatchCalculator(weights=CriterionWeights(), curves=ScoringCurves())


@pytest.fixture
def engine(calculator):
    return MatchingEngine(calculator)


@pytest.fixture
def sample_client():
    """Cliente comprador con presupuesto, zonas y ambientes."""
    return {
        "id": "client-001",
        "client_name": "Maria Papadopoulou",
        "full_name": "Maria Papadopoulou",
        "intent": "BUY",
        "purpose": "RESIDENTIAL",
        "budget_min": 200000,
        "budget_max": 300000,
        "areas_of_interest": ["Kifisia", "Marousi"],
        "client_status": "ACTIVE",
        "property_preferences": {
            "bedrooms_min": 2,
            "bedrooms_max": 3,
            "size_min_sqm": 80,
            "size_max_sqm": 120,
        },
    }


@pytest.fixture
def sample_property():
    """Departamento en venta que cumple las preferencias de sample_client."""
    return {
        "id": "prop-001",
        "property_name": "Kifisia 3BR",
        "price": 250000,
        "property_type": "APARTMENT",
        "transaction_type": "SALE",
        "property_status": "ACTIVE",
        "area": "Kifisia",
        "address_city": "Athens",
        "bedrooms": 3,
        "bathrooms": 2,
        "size_net_sqm": 100,
        "floor": "2",
        "elevator": True,
        "amenities": {"parking": True, "balcony": True, "pool": False},
        "energy_cert_class": "B",
    }
