"""
Modelos de datos del sistema.

- Entrada: ClientForMatching, PropertyForMatching (tolerantes a nulos)
- Salida: MatchResult, CriterionScore, MatchAnalytics
- Parámetros: CriterionWeights, ScoringCurves
"""

from propmatch.models.client import ClientForMatching, ClientPropertyPreferences
from propmatch.models.property import PropertyForMatching
from propmatch.models.match import (
    MATCH_CRITERIA,
    ClientSummary,
    CriterionScore,
    MatchAnalytics,
    MatchDistribution,
    MatchResult,
    MatchSummaryStats,
    PropertySummary,
    PropertyWithMatchStats,
    TopMatch,
)
from propmatch.models.scoring import CriterionWeights, ScoringCurves

__all__ = [
    # Entrada
    "ClientForMatching",
    "ClientPropertyPreferences",
    "PropertyForMatching",
    # Resultados
    "MATCH_CRITERIA",
    "CriterionScore",
    "MatchResult",
    # Analytics
    "ClientSummary",
    "PropertySummary",
    "PropertyWithMatchStats",
    "TopMatch",
    "MatchDistribution",
    "MatchAnalytics",
    "MatchSummaryStats",
    # Parámetros
    "CriterionWeights",
    "ScoringCurves",
]
