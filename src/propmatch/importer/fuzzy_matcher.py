"""
Auto-mapeo de columnas de importación.

Asocia los headers de un CSV a los campos destino usando coincidencia
exacta, alias, distancia de Levenshtein y términos clave.
"""

import math
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Literal, Optional

from rapidfuzz.distance import Levenshtein

MatchConfidence = Literal["high", "medium", "low", "none"]
MatchType = Literal["exact", "alias", "fuzzy", "partial", "none"]

MIN_MATCH_SCORE = 50
FUZZY_MIN_SIMILARITY = 80
FUZZY_SCALE = 0.85

_SEPARATORS = re.compile(r"[\s\-_.]+")
_NON_WORD = re.compile(r"[^a-z0-9_]")


@dataclass(frozen=True)
class FieldDefinition:
    """Campo destino del importador."""
    key: str
    required: bool = False
    group: str = "basic"
    aliases: tuple[str, ...] = ()
    description: Optional[str] = None


@dataclass
class ColumnMatch:
    """Mejor campo encontrado para una columna de origen."""
    source_column: str
    target_field: Optional[str] = None
    confidence: MatchConfidence = "none"
    score: int = 0
    match_type: MatchType = "none"


@dataclass
class MatchStatistics:
    total: int = 0
    matched: int = 0
    high_confidence: int = 0
    medium_confidence: int = 0
    low_confidence: int = 0
    unmatched: int = 0


def _round(value: float) -> int:
    return math.floor(value + 0.5)


def normalize_string(value: str) -> str:
    """
    Normaliza un header para comparar.

    Minúsculas, separadores (espacio, guion, punto) a "_" y se
    descarta todo lo que no sea [a-z0-9_].
    """
    value = _SEPARATORS.sub("_", value.lower().strip())
    return _NON_WORD.sub("", value)


def levenshtein_distance(a: str, b: str) -> int:
    """Cantidad mínima de ediciones de un carácter entre a y b."""
    return Levenshtein.distance(a, b)


def calculate_similarity(a: str, b: str) -> int:
    """Similitud 0-100 normalizada por el largo del string más largo."""
    if a == b:
        return 100
    if not a or not b:
        return 0

    max_length = max(len(a), len(b))
    distance = levenshtein_distance(a, b)
    return _round((max_length - distance) / max_length * 100)


def contains_key_terms(source: str, target: str) -> bool:
    """
    True si al menos la mitad de los términos del origen aparecen
    en el destino ("street_address" vs "address_street").
    """
    source_terms = [t for t in source.split("_") if len(t) > 2]
    target_terms = [t for t in target.split("_") if len(t) > 2]
    if not source_terms or not target_terms:
        return False

    matched = [
        st for st in source_terms
        if any(tt in st or st in tt for tt in target_terms)
    ]
    return len(matched) >= math.ceil(len(source_terms) / 2)


def score_to_confidence(score: float) -> MatchConfidence:
    if score >= 95:
        return "high"
    if score >= 75:
        return "medium"
    if score >= MIN_MATCH_SCORE:
        return "low"
    return "none"


def _score_field(source: str, definition: FieldDefinition) -> tuple[int, MatchType]:
    key = normalize_string(definition.key)
    aliases = [normalize_string(a) for a in definition.aliases]

    if source == key:
        return 100, "exact"
    if source in aliases:
        return 95, "alias"

    similarity = max([calculate_similarity(source, key)] + [calculate_similarity(source, a) for a in aliases])
    if similarity >= FUZZY_MIN_SIMILARITY:
        return _round(similarity * FUZZY_SCALE), "fuzzy"

    if contains_key_terms(source, key):
        return 70, "partial"
    if any(contains_key_terms(source, a) for a in aliases):
        return 65, "partial"

    return 0, "none"


def find_best_match(
    source_column: str,
    field_definitions: Sequence[FieldDefinition],
    used_fields: Optional[set[str]] = None,
) -> ColumnMatch:
    """
    Mejor campo destino para una columna.

    Prioridad: exacto (100), alias (95), fuzzy >= 80 escalado x0.85,
    términos clave contra la key (70) o contra un alias (65).
    Ante empate gana el primer campo definido.
    """
    used_fields = used_fields or set()
    source = normalize_string(source_column)
    best = ColumnMatch(source_column=source_column)

    for definition in field_definitions:
        if definition.key in used_fields:
            continue

        score, match_type = _score_field(source, definition)
        if score > best.score:
            best = ColumnMatch(
                source_column=source_column,
                target_field=definition.key,
                confidence=score_to_confidence(score),
                score=score,
                match_type=match_type,
            )

    return best


def auto_match_columns(
    source_columns: Iterable[str],
    field_definitions: Sequence[FieldDefinition],
) -> dict[str, ColumnMatch]:
    """
    Asigna cada columna a lo sumo a un campo.

    Se calcula el mejor match de cada columna, se ordena por score y
    se asigna en ese orden; una columna cuyo campo ya fue tomado (o
    con score < 50) queda sin asignar.
    """
    candidates = [find_best_match(column, field_definitions) for column in source_columns]
    candidates.sort(key=lambda m: m.score, reverse=True)

    used: set[str] = set()
    results: dict[str, ColumnMatch] = {}
    for match in candidates:
        if match.target_field and match.target_field not in used and match.score >= MIN_MATCH_SCORE:
            used.add(match.target_field)
            results[match.source_column] = match
        else:
            results[match.source_column] = ColumnMatch(source_column=match.source_column)

    return results


def match_results_to_mapping(results: Mapping[str, ColumnMatch]) -> dict[str, str]:
    """Columna de origen -> campo destino, solo para matches válidos."""
    return {
        source: match.target_field
        for source, match in results.items()
        if match.target_field and match.score >= MIN_MATCH_SCORE
    }


def get_match_statistics(results: Mapping[str, ColumnMatch]) -> MatchStatistics:
    stats = MatchStatistics(total=len(results))
    for match in results.values():
        if not match.target_field:
            continue
        stats.matched += 1
        if match.confidence == "high":
            stats.high_confidence += 1
        elif match.confidence == "medium":
            stats.medium_confidence += 1
        elif match.confidence == "low":
            stats.low_confidence += 1

    stats.unmatched = stats.total - stats.matched
    return stats
