"""
Analytics de matchmaking para el dashboard.

A partir de los clientes y propiedades activos calcula top matches,
distribución de scores, clientes sin buenos matches y propiedades
con más interés.
"""

import math
from collections.abc import Iterable
from typing import Optional

import structlog

from propmatch.config import get_settings
from propmatch.models import (
    ClientForMatching,
    ClientSummary,
    MatchAnalytics,
    MatchDistribution,
    MatchSummaryStats,
    PropertyForMatching,
    PropertySummary,
    PropertyWithMatchStats,
    TopMatch,
)
from propmatch.matching.calculator import ClientInput, PropertyInput, coerce_client, coerce_property
from propmatch.matching.engine import MatchingEngine
from propmatch.matching.weights import MATCH_THRESHOLDS

logger = structlog.get_logger()


def _client_summary(client: ClientForMatching, best_score: Optional[float] = None) -> ClientSummary:
    return ClientSummary(
        id=client.id,
        client_name=client.client_name,
        full_name=client.full_name,
        intent=client.intent,
        budget_min=client.budget_min,
        budget_max=client.budget_max,
        client_status=client.client_status,
        best_match_score=best_score,
    )


def _property_summary(property: PropertyForMatching) -> dict:
    return {
        "id": property.id,
        "property_name": property.property_name,
        "price": property.price,
        "property_type": property.property_type,
        "bedrooms": property.bedrooms,
        "area": property.area,
        "address_city": property.address_city,
        "property_status": property.property_status,
        "image_url": property.image_url,
    }


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _bucket_for(score: float, distribution: list[MatchDistribution]) -> Optional[MatchDistribution]:
    # Los buckets son enteros (0-25, 26-50...): se redondea el score
    rounded = _round_half_up(score)
    for bucket in distribution:
        if bucket.min <= rounded <= bucket.max:
            return bucket
    return None


def build_match_analytics(
    clients: Iterable[ClientInput],
    properties: Iterable[PropertyInput],
    engine: Optional[MatchingEngine] = None,
    top_limit: Optional[int] = None,
    list_limit: Optional[int] = None,
    threshold: float = MATCH_THRESHOLDS["FAIR"],
) -> MatchAnalytics:
    """
    Construye las analytics del dashboard.

    Args:
        clients: Clientes a evaluar (LEAD / ACTIVE normalmente)
        properties: Propiedades a evaluar (ACTIVE / PENDING normalmente)
        engine: Motor a usar (default: configuración global)
        top_limit: Cantidad de top matches
        list_limit: Largo de clientes sin match y propiedades hot
        threshold: Score a partir del cual un par cuenta como match

    Returns:
        MatchAnalytics
    """
    settings = get_settings()
    engine = engine or MatchingEngine()
    top_limit = top_limit or settings.analytics_top_matches
    list_limit = list_limit or settings.analytics_list_limit

    clients = [coerce_client(c) for c in clients]
    properties = [coerce_property(p) for p in properties]

    analytics = MatchAnalytics(
        total_clients=len(clients),
        total_properties=len(properties),
    )
    if not clients or not properties:
        return analytics

    # Índices en lugar de IDs: los registros pueden venir sin id
    pairs = [
        (ci, pi, engine.calculate(client, property))
        for ci, client in enumerate(clients)
        for pi, property in enumerate(properties)
    ]

    # Top matches
    above = [pair for pair in pairs if pair[2].score >= threshold]
    above.sort(key=lambda pair: pair[2].score, reverse=True)
    analytics.top_matches = [
        TopMatch(
            result=result,
            client=_client_summary(clients[ci]),
            listing=PropertySummary(**_property_summary(properties[pi])),
        )
        for ci, pi, result in above[:top_limit]
    ]

    # Distribución
    for _, _, result in pairs:
        bucket = _bucket_for(result.score, analytics.match_distribution)
        if bucket:
            bucket.count += 1

    # Clientes sin buenos matches
    best_scores = [0.0] * len(clients)
    for ci, _, result in pairs:
        best_scores[ci] = max(best_scores[ci], result.score)

    unmatched = [
        _client_summary(client, best_scores[ci])
        for ci, client in enumerate(clients)
        if best_scores[ci] < threshold
    ]
    unmatched.sort(key=lambda c: c.best_match_score or 0)
    analytics.unmatched_clients = unmatched[:list_limit]

    # Propiedades con más interés
    stats = [{"count": 0, "total": 0.0, "top": 0.0} for _ in properties]
    for _, pi, result in above:
        stats[pi]["count"] += 1
        stats[pi]["total"] += result.score
        stats[pi]["top"] = max(stats[pi]["top"], result.score)

    hot = [
        PropertyWithMatchStats(
            **_property_summary(property),
            match_count=stats[pi]["count"],
            average_match_score=_round_half_up(stats[pi]["total"] / stats[pi]["count"]),
            top_match_score=stats[pi]["top"],
        )
        for pi, property in enumerate(properties)
        if stats[pi]["count"] > 0
    ]
    hot.sort(key=lambda p: p.match_count, reverse=True)
    analytics.hot_properties = hot[:list_limit]

    # Totales
    analytics.average_match_score = _round_half_up(sum(r.score for _, _, r in pairs) / len(pairs))
    analytics.clients_with_matches = sum(1 for score in best_scores if score >= threshold)

    logger.info(
        "Analytics de matching calculadas",
        clients=len(clients),
        properties=len(properties),
        pairs=len(pairs),
        above_threshold=len(above),
    )
    return analytics


def get_match_summary_stats(analytics: MatchAnalytics) -> MatchSummaryStats:
    """Resumen rápido a partir de la distribución."""
    distribution = analytics.match_distribution
    return MatchSummaryStats(
        total_clients=analytics.total_clients,
        total_properties=analytics.total_properties,
        matches_above_50=sum(d.count for d in distribution if d.min >= 51),
        matches_above_70=sum(d.count for d in distribution if d.min >= 71),
        average_score=analytics.average_match_score,
    )
