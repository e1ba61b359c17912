"""
Parámetros del algoritmo de matching.

Pesos por criterio y curvas de penalización. Son configurables desde
el entorno (ver Settings.weights / Settings.scoring); los defaults
reproducen el comportamiento del CRM.
"""

from pydantic import BaseModel, Field


class CriterionWeights(BaseModel):
    """
    Peso relativo de cada criterio en el score final.

    No es necesario que sumen 100: el score se normaliza por la suma
    total de pesos.
    """

    budget: float = Field(default=25.0, ge=0)
    location: float = Field(default=20.0, ge=0)
    transaction_type: float = Field(default=10.0, ge=0)
    property_type: float = Field(default=10.0, ge=0)
    bedrooms: float = Field(default=8.0, ge=0)
    size: float = Field(default=7.0, ge=0)
    amenities: float = Field(default=5.0, ge=0)
    condition: float = Field(default=2.0, ge=0)
    furnished: float = Field(default=2.0, ge=0)
    floor: float = Field(default=2.0, ge=0)
    elevator: float = Field(default=2.0, ge=0)
    pet_friendly: float = Field(default=2.0, ge=0)
    heating: float = Field(default=1.0, ge=0)
    energy_class: float = Field(default=1.0, ge=0)
    parking: float = Field(default=3.0, ge=0)

    def get(self, criterion: str) -> float:
        return float(getattr(self, criterion, 0.0))

    @property
    def total(self) -> float:
        return sum(self.model_dump().values())


class ScoringCurves(BaseModel):
    """Umbrales y pendientes de cada criterio (escala 0-100)."""

    # Valores neutros
    neutral_score: float = Field(
        default=100.0, ge=0, le=100,
        description="Sin preferencia en presupuesto, ubicación, superficie o ambientes",
    )
    optional_neutral_score: float = Field(
        default=80.0, ge=0, le=100,
        description="Sin preferencia en los criterios secundarios",
    )
    unknown_data_score: float = Field(
        default=50.0, ge=0, le=100,
        description="El cliente tiene preferencia pero la propiedad no tiene el dato",
    )
    matched_threshold: float = Field(default=80.0, ge=0, le=100)

    # Presupuesto
    max_over_percent: float = Field(default=30.0, gt=0)
    under_budget_penalty_start: float = Field(default=50.0, gt=0)
    min_under_budget_score: float = Field(default=60.0, ge=0, le=100)

    # Ubicación
    partial_location_score: float = Field(default=70.0, ge=0, le=100)

    # Superficie
    size_max_deviation_percent: float = Field(default=30.0, gt=0)

    # Ambientes
    score_per_bedroom_diff: float = Field(default=25.0, ge=0)
    bedrooms_min_score: float = Field(default=0.0, ge=0, le=100)

    # Piso
    score_per_floor_diff: float = Field(default=20.0, ge=0)
    ground_floor_mismatch_score: float = Field(default=20.0, ge=0, le=100)

    # Amenities
    amenities_required_weight: float = Field(default=70.0, ge=0, le=100)
    amenities_preferred_weight: float = Field(default=30.0, ge=0, le=100)

    # Criterios categóricos
    generic_property_type_score: float = Field(default=50.0, ge=0, le=100)
    partial_furnished_score: float = Field(default=60.0, ge=0, le=100)
    heating_mismatch_score: float = Field(default=30.0, ge=0, le=100)
