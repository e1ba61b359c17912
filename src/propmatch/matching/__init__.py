"""
Motor de matching.

Combina scores por criterio (presupuesto, ubicación, superficie,
ambientes...) en un score ponderado 0-100 por par cliente-propiedad.
"""

from propmatch.matching.calculator import MatchCalculator, calculate_match_score
from propmatch.matching.engine import (
    MatchingEngine,
    calculate_batch_matches,
    find_matching_clients,
    find_matching_properties,
)
from propmatch.matching.analytics import build_match_analytics, get_match_summary_stats
from propmatch.matching.weights import MATCH_THRESHOLDS, match_quality

__all__ = [
    "MatchCalculator",
    "calculate_match_score",
    "MatchingEngine",
    "calculate_batch_matches",
    "find_matching_clients",
    "find_matching_properties",
    "build_match_analytics",
    "get_match_summary_stats",
    "MATCH_THRESHOLDS",
    "match_quality",
]
