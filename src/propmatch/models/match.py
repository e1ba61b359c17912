"""
Resultados de matching y analytics

Modelos efímeros que produce el motor: el score por criterio,
el resultado de un par cliente-propiedad y los agregados para
el dashboard.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field

MATCH_CRITERIA = (
    "budget",
    "location",
    "transaction_type",
    "property_type",
    "bedrooms",
    "size",
    "amenities",
    "condition",
    "furnished",
    "floor",
    "elevator",
    "pet_friendly",
    "heating",
    "energy_class",
    "parking",
)


class CriterionScore(BaseModel):
    """
    Score de un criterio individual.

    weighted_score es la parte del criterio en el score global:
    score * weight / suma de pesos. Los weighted_score de un resultado
    suman (salvo redondeo) su score global, sea cual sea el total de pesos.
    """

    criterion: str
    weight: float
    score: float = Field(..., ge=0, le=100)
    weighted_score: float = Field(..., ge=0, le=100)
    matched: bool = False
    reason: Optional[str] = None


class MatchResult(BaseModel):
    """Resultado completo de un par cliente-propiedad."""

    client_id: Optional[str] = None
    property_id: Optional[str] = None
    score: float = Field(..., ge=0, le=100, description="Score global 0-100")
    breakdown: dict[str, float] = Field(
        default_factory=dict, description="Score 0-100 por criterio"
    )
    criteria: list[CriterionScore] = Field(default_factory=list)
    matched_criteria: int = 0
    total_criteria: int = 0
    calculated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def get_criterion(self, criterion: str) -> Optional[CriterionScore]:
        for item in self.criteria:
            if item.criterion == criterion:
                return item
        return None


# =============================================================================
# Analytics
# =============================================================================


class ClientSummary(BaseModel):
    id: Optional[str] = None
    client_name: Optional[str] = None
    full_name: Optional[str] = None
    intent: Optional[str] = None
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None
    client_status: Optional[str] = None
    best_match_score: Optional[float] = None


class PropertySummary(BaseModel):
    id: Optional[str] = None
    property_name: Optional[str] = None
    price: Optional[float] = None
    property_type: Optional[str] = None
    bedrooms: Optional[int] = None
    area: Optional[str] = None
    address_city: Optional[str] = None
    property_status: Optional[str] = None
    image_url: Optional[str] = None


class PropertyWithMatchStats(PropertySummary):
    match_count: int = 0
    average_match_score: float = 0
    top_match_score: float = 0


class TopMatch(BaseModel):
    """Match destacado con los datos de ambas partes."""

    result: MatchResult
    client: ClientSummary
    listing: PropertySummary


class MatchDistribution(BaseModel):
    range: str
    min: int
    max: int
    count: int = 0


def default_distribution() -> list[MatchDistribution]:
    buckets = [(0, 25), (26, 50), (51, 70), (71, 85), (86, 100)]
    return [
        MatchDistribution(range=f"{low}-{high}%", min=low, max=high)
        for low, high in buckets
    ]


class MatchAnalytics(BaseModel):
    """Datos agregados para el dashboard de matchmaking."""

    top_matches: list[TopMatch] = Field(default_factory=list)
    match_distribution: list[MatchDistribution] = Field(default_factory=default_distribution)
    unmatched_clients: list[ClientSummary] = Field(default_factory=list)
    hot_properties: list[PropertyWithMatchStats] = Field(default_factory=list)

    total_clients: int = 0
    total_properties: int = 0
    average_match_score: float = 0
    clients_with_matches: int = 0


class MatchSummaryStats(BaseModel):
    total_clients: int = 0
    total_properties: int = 0
    matches_above_50: int = 0
    matches_above_70: int = 0
    average_score: float = 0
