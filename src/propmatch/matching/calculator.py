"""
Calculador de compatibilidad cliente-propiedad.

Cada criterio se puntúa de forma independiente en escala 0-100 y el
score global es el promedio ponderado por CriterionWeights. Una
preferencia ausente del cliente es neutra (no penaliza); un dato
faltante en la propiedad da un score intermedio.

Nunca lanza: los registros mal formados degradan a valores neutros.
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

import structlog
from pydantic import ValidationError

from propmatch.config import get_settings
from propmatch.models import (
    ClientForMatching,
    ClientPropertyPreferences,
    CriterionScore,
    CriterionWeights,
    MatchResult,
    PropertyForMatching,
    ScoringCurves,
)
from propmatch.models.coercion import to_text
from propmatch.matching.normalizers import (
    extract_property_amenities,
    get_bedroom_range,
    get_budget_range,
    get_floor_range,
    get_property_locations,
    get_property_size_sqm,
    get_size_range,
    normalize_condition,
    normalize_energy_class,
    normalize_furnished,
    normalize_heating,
    parse_amenity_preferences,
    parse_areas_of_interest,
    parse_floor,
)
from propmatch.matching.weights import (
    INTENT_TO_TRANSACTION,
    PARKING_AMENITIES,
    PURPOSE_TO_PROPERTY_TYPE,
    meets_energy_requirement,
)

logger = structlog.get_logger()

ClientInput = Union[ClientForMatching, Mapping, Any]
PropertyInput = Union[PropertyForMatching, Mapping, Any]


def _record_id(record: Any) -> Optional[str]:
    if isinstance(record, Mapping):
        return to_text(record.get("id"))
    return to_text(getattr(record, "id", None))


def coerce_client(client: ClientInput) -> ClientForMatching:
    """Convierte un dict / objeto ORM en ClientForMatching."""
    if isinstance(client, ClientForMatching):
        return client
    try:
        return ClientForMatching.model_validate(client)
    except ValidationError as e:
        logger.warning(
            "Cliente inválido para matching, se usa registro neutro",
            client_id=_record_id(client),
            error=str(e),
        )
        return ClientForMatching(id=_record_id(client))


def coerce_property(property: PropertyInput) -> PropertyForMatching:
    """Convierte un dict / objeto ORM en PropertyForMatching."""
    if isinstance(property, PropertyForMatching):
        return property
    try:
        return PropertyForMatching.model_validate(property)
    except ValidationError as e:
        logger.warning(
            "Propiedad inválida para matching, se usa registro neutro",
            property_id=_record_id(property),
            error=str(e),
        )
        return PropertyForMatching(id=_record_id(property))


def _clamp(value: float) -> float:
    return max(0.0, min(100.0, value))


class MatchCalculator:
    """
    Calculador de match score con pesos y curvas configurables.

    Criterios: budget, location, transaction_type, property_type,
    bedrooms, size, amenities, condition, furnished, floor, elevator,
    pet_friendly, heating, energy_class, parking.
    """

    def __init__(
        self,
        weights: Optional[CriterionWeights] = None,
        curves: Optional[ScoringCurves] = None,
    ):
        settings = get_settings()
        self.weights = weights or settings.weights
        self.curves = curves or settings.scoring
        self._total_weight = self.weights.total

    def calculate(self, client: ClientInput, property: PropertyInput) -> MatchResult:
        """
        Calcula el score de compatibilidad entre un cliente y una propiedad.

        Args:
            client: ClientForMatching, dict o registro ORM
            property: PropertyForMatching, dict o registro ORM

        Returns:
            MatchResult con score global 0-100 y breakdown por criterio
        """
        client = coerce_client(client)
        property = coerce_property(property)
        prefs = client.property_preferences

        criteria = [
            self._score_budget(client, property),
            self._score_location(client, property),
            self._score_transaction_type(client, property),
            self._score_property_type(client, property),
            self._score_bedrooms(prefs, property),
            self._score_size(prefs, property),
            self._score_amenities(prefs, property),
            self._score_condition(prefs, property),
            self._score_furnished(prefs, property),
            self._score_floor(prefs, property),
            self._score_elevator(prefs, property),
            self._score_pet_friendly(prefs, property),
            self._score_heating(prefs, property),
            self._score_energy_class(prefs, property),
            self._score_parking(prefs, property),
        ]

        if self._total_weight > 0:
            overall = sum(c.score * c.weight for c in criteria) / self._total_weight
        else:
            overall = 0.0

        return MatchResult(
            client_id=client.id,
            property_id=property.id,
            score=round(_clamp(overall), 2),
            breakdown={c.criterion: c.score for c in criteria},
            criteria=criteria,
            matched_criteria=sum(1 for c in criteria if c.score > 0),
            total_criteria=len(criteria),
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _create_score(
        self,
        criterion: str,
        score: float,
        reason: str,
        matched: bool = False,
    ) -> CriterionScore:
        score = _clamp(score)
        weight = self.weights.get(criterion)
        weighted = score * weight / self._total_weight if self._total_weight > 0 else 0.0
        return CriterionScore(
            criterion=criterion,
            weight=weight,
            score=round(score, 2),
            weighted_score=round(_clamp(weighted), 2),
            matched=matched or score >= self.curves.matched_threshold,
            reason=reason,
        )

    @staticmethod
    def _range_gap(value: float, low: Optional[float], high: Optional[float]) -> float:
        """Distancia absoluta al rango [low, high] (0 si está adentro)."""
        if low is not None and value < low:
            return low - value
        if high is not None and value > high:
            return value - high
        return 0.0

    @staticmethod
    def _percent_off(value: float, bound: float) -> float:
        if bound <= 0:
            return float("inf")
        return abs(value - bound) / bound * 100

    # =========================================================================
    # Criterios principales
    # =========================================================================

    def _score_budget(
        self, client: ClientForMatching, property: PropertyForMatching
    ) -> CriterionScore:
        """Perfecto dentro del presupuesto, gradual fuera de él."""
        curves = self.curves
        price = property.price
        budget_min, budget_max = get_budget_range(client)

        if budget_min is None and budget_max is None:
            return self._create_score("budget", curves.neutral_score, "No budget constraints")

        if price is None:
            return self._create_score(
                "budget", curves.unknown_data_score, "Property has no price listed"
            )

        if (budget_min is None or price >= budget_min) and (
            budget_max is None or price <= budget_max
        ):
            return self._create_score("budget", 100, "Price within budget", True)

        if budget_max is not None and price > budget_max:
            over = self._percent_off(price, budget_max)
            if over >= curves.max_over_percent:
                return self._create_score("budget", 0, f"{over:.0f}% over budget")
            score = 100 - (over / curves.max_over_percent) * 100
            return self._create_score("budget", score, f"{over:.0f}% over budget")

        # Por debajo del mínimo: penalización suave
        under = self._percent_off(price, budget_min)
        if under >= curves.under_budget_penalty_start:
            return self._create_score(
                "budget", curves.min_under_budget_score, f"{under:.0f}% under budget"
            )
        score = 100 - (under / curves.under_budget_penalty_start) * (
            100 - curves.min_under_budget_score
        )
        return self._create_score("budget", score, f"{under:.0f}% under budget")

    def _score_location(
        self, client: ClientForMatching, property: PropertyForMatching
    ) -> CriterionScore:
        """Compara las zonas de interés con área/ciudad/municipio de la propiedad."""
        client_areas = parse_areas_of_interest(client.areas_of_interest)
        property_locations = get_property_locations(property)

        if not client_areas:
            return self._create_score(
                "location", self.curves.neutral_score, "No location preference"
            )

        if not property_locations:
            return self._create_score(
                "location", self.curves.unknown_data_score, "Property has no location data"
            )

        for area in client_areas:
            if area in property_locations:
                return self._create_score("location", 100, f"Exact match: {area}", True)

        for area in client_areas:
            for location in property_locations:
                if area in location or location in area:
                    return self._create_score(
                        "location",
                        self.curves.partial_location_score,
                        f"Partial match: {location}",
                    )

        return self._create_score("location", 0, "Location not in areas of interest")

    def _score_transaction_type(
        self, client: ClientForMatching, property: PropertyForMatching
    ) -> CriterionScore:
        """BUY ve SALE, RENT ve RENTAL, etc."""
        intent = client.intent
        transaction_type = property.transaction_type

        if not intent or not transaction_type:
            return self._create_score(
                "transaction_type",
                self.curves.optional_neutral_score,
                "Transaction type not specified",
            )

        if transaction_type in INTENT_TO_TRANSACTION.get(intent, ()):
            return self._create_score(
                "transaction_type", 100, f"{intent} matches {transaction_type}", True
            )

        return self._create_score(
            "transaction_type", 0, f"{intent} incompatible with {transaction_type}"
        )

    def _score_property_type(
        self, client: ClientForMatching, property: PropertyForMatching
    ) -> CriterionScore:
        purpose = client.purpose
        property_type = property.property_type

        if not purpose or not property_type:
            return self._create_score(
                "property_type",
                self.curves.optional_neutral_score,
                "Property type not specified",
            )

        if property_type in PURPOSE_TO_PROPERTY_TYPE.get(purpose, ()):
            return self._create_score(
                "property_type", 100, f"{property_type} matches {purpose}", True
            )

        if property_type == "OTHER" or purpose == "OTHER":
            return self._create_score(
                "property_type",
                self.curves.generic_property_type_score,
                "Generic property type",
            )

        return self._create_score(
            "property_type", 0, f"{property_type} doesn't match {purpose}"
        )

    def _score_bedrooms(
        self, prefs: ClientPropertyPreferences, property: PropertyForMatching
    ) -> CriterionScore:
        curves = self.curves
        low, high = get_bedroom_range(prefs)
        bedrooms = property.bedrooms

        if low is None and high is None:
            return self._create_score("bedrooms", curves.neutral_score, "No bedroom preference")

        if bedrooms is None:
            return self._create_score(
                "bedrooms", curves.unknown_data_score, "Bedroom count unknown"
            )

        diff = self._range_gap(bedrooms, low, high)
        if diff == 0:
            return self._create_score(
                "bedrooms", 100, f"{bedrooms} bedrooms within range", True
            )

        score = max(curves.bedrooms_min_score, 100 - diff * curves.score_per_bedroom_diff)
        return self._create_score(
            "bedrooms", score, f"{bedrooms} bedrooms ({diff:g} off preference)"
        )

    def _score_size(
        self, prefs: ClientPropertyPreferences, property: PropertyForMatching
    ) -> CriterionScore:
        curves = self.curves
        low, high = get_size_range(prefs)
        size = get_property_size_sqm(property)

        if low is None and high is None:
            return self._create_score("size", curves.neutral_score, "No size preference")

        if size is None:
            return self._create_score("size", curves.unknown_data_score, "Size unknown")

        if (low is None or size >= low) and (high is None or size <= high):
            return self._create_score("size", 100, f"{size:g} sqm within range", True)

        if low is not None and size < low:
            deviation = self._percent_off(size, low)
        else:
            deviation = self._percent_off(size, high)

        if deviation >= curves.size_max_deviation_percent:
            return self._create_score(
                "size", 0, f"{deviation:.0f}% outside size range"
            )

        score = 100 - (deviation / curves.size_max_deviation_percent) * 100
        return self._create_score("size", score, f"{size:g} sqm ({deviation:.0f}% off)")

    # =========================================================================
    # Criterios secundarios
    # =========================================================================

    def _score_amenities(
        self, prefs: ClientPropertyPreferences, property: PropertyForMatching
    ) -> CriterionScore:
        curves = self.curves
        required, preferred = parse_amenity_preferences(
            prefs.amenities_required, prefs.amenities_preferred
        )

        if not required and not preferred:
            return self._create_score(
                "amenities", curves.optional_neutral_score, "No amenity preferences"
            )

        available = extract_property_amenities(property.amenities)
        required_met = len(required & available)
        preferred_met = len(preferred & available)

        if required and required_met < len(required):
            score = required_met / len(required) * curves.amenities_required_weight
            return self._create_score(
                "amenities",
                score,
                f"Missing {len(required) - required_met} required amenities",
            )

        if not required:
            score = preferred_met / len(preferred) * 100
            return self._create_score(
                "amenities", score, f"{preferred_met}/{len(preferred)} preferred amenities"
            )

        score = curves.amenities_required_weight
        if preferred:
            score += preferred_met / len(preferred) * curves.amenities_preferred_weight
        return self._create_score(
            "amenities",
            score,
            f"All required met, {preferred_met}/{len(preferred)} preferred",
            True,
        )

    def _score_condition(
        self, prefs: ClientPropertyPreferences, property: PropertyForMatching
    ) -> CriterionScore:
        wanted = [normalize_condition(c) for c in prefs.condition_preferences]
        condition = normalize_condition(property.condition)

        if not wanted:
            return self._create_score(
                "condition", self.curves.optional_neutral_score, "No condition preference"
            )

        if not condition:
            return self._create_score(
                "condition", self.curves.unknown_data_score, "Property condition unknown"
            )

        if condition in wanted:
            return self._create_score("condition", 100, f"Condition: {condition}", True)

        return self._create_score("condition", 0, f"Condition {condition} not preferred")

    def _score_furnished(
        self, prefs: ClientPropertyPreferences, property: PropertyForMatching
    ) -> CriterionScore:
        pref = prefs.furnished_preference
        pref = None if pref == "ANY" else normalize_furnished(pref)
        status = normalize_furnished(property.furnished)

        if not pref:
            return self._create_score(
                "furnished", self.curves.optional_neutral_score, "No furnished preference"
            )

        if not status:
            return self._create_score(
                "furnished", self.curves.unknown_data_score, "Furnished status unknown"
            )

        if pref == status:
            return self._create_score("furnished", 100, f"Furnished: {status}", True)

        if {pref, status} == {"FULLY", "PARTIALLY"}:
            return self._create_score(
                "furnished",
                self.curves.partial_furnished_score,
                f"Furnished: {status} (wanted {pref})",
            )

        return self._create_score("furnished", 0, f"Furnished: {status} (wanted {pref})")

    def _score_floor(
        self, prefs: ClientPropertyPreferences, property: PropertyForMatching
    ) -> CriterionScore:
        curves = self.curves
        low, high, ground_only = get_floor_range(prefs)
        floor = parse_floor(property.floor)

        if low is None and high is None and not ground_only:
            return self._create_score(
                "floor", curves.optional_neutral_score, "No floor preference"
            )

        if floor is None:
            return self._create_score("floor", curves.unknown_data_score, "Floor level unknown")

        if ground_only:
            if floor == 0:
                return self._create_score("floor", 100, "Ground floor", True)
            return self._create_score(
                "floor", curves.ground_floor_mismatch_score, f"Floor {floor:g} (need ground)"
            )

        diff = self._range_gap(floor, low, high)
        if diff == 0:
            return self._create_score("floor", 100, f"Floor {floor:g} within range", True)

        score = max(0.0, 100 - diff * curves.score_per_floor_diff)
        return self._create_score("floor", score, f"Floor {floor:g} ({diff:g} floors off)")

    def _score_required_flag(
        self,
        criterion: str,
        required: bool,
        present: Optional[bool],
        label: str,
    ) -> CriterionScore:
        if not required:
            return self._create_score(
                criterion, self.curves.optional_neutral_score, f"No {label} requirement"
            )
        if present is None:
            return self._create_score(
                criterion, self.curves.unknown_data_score, f"{label.capitalize()} unknown"
            )
        if present:
            return self._create_score(criterion, 100, f"Has {label}", True)
        return self._create_score(criterion, 0, f"No {label} (required)")

    def _score_elevator(
        self, prefs: ClientPropertyPreferences, property: PropertyForMatching
    ) -> CriterionScore:
        return self._score_required_flag(
            "elevator", prefs.requires_elevator, property.elevator, "elevator"
        )

    def _score_pet_friendly(
        self, prefs: ClientPropertyPreferences, property: PropertyForMatching
    ) -> CriterionScore:
        return self._score_required_flag(
            "pet_friendly", prefs.requires_pet_friendly, property.accepts_pets, "pet-friendly policy"
        )

    def _score_heating(
        self, prefs: ClientPropertyPreferences, property: PropertyForMatching
    ) -> CriterionScore:
        wanted = [normalize_heating(h) for h in prefs.heating_preferences]
        heating = normalize_heating(property.heating_type)

        if not wanted:
            return self._create_score(
                "heating", self.curves.optional_neutral_score, "No heating preference"
            )

        if not heating:
            return self._create_score(
                "heating", self.curves.unknown_data_score, "Heating type unknown"
            )

        if heating in wanted:
            return self._create_score("heating", 100, f"Heating: {heating}", True)

        return self._create_score(
            "heating",
            self.curves.heating_mismatch_score,
            f"Heating: {heating} (not preferred)",
        )

    def _score_energy_class(
        self, prefs: ClientPropertyPreferences, property: PropertyForMatching
    ) -> CriterionScore:
        min_class = normalize_energy_class(prefs.energy_class_min)
        energy_class = normalize_energy_class(property.energy_cert_class)

        if not min_class:
            return self._create_score(
                "energy_class", self.curves.optional_neutral_score,
                "No energy class requirement",
            )

        if not energy_class:
            return self._create_score(
                "energy_class", self.curves.unknown_data_score, "Energy class unknown"
            )

        if meets_energy_requirement(energy_class, min_class):
            return self._create_score(
                "energy_class", 100, f"Energy class: {energy_class}", True
            )

        return self._create_score(
            "energy_class", 0, f"Energy class {energy_class} below {min_class}"
        )

    def _score_parking(
        self, prefs: ClientPropertyPreferences, property: PropertyForMatching
    ) -> CriterionScore:
        if not prefs.requires_parking:
            return self._create_score(
                "parking", self.curves.optional_neutral_score, "No parking requirement"
            )

        if property.property_type == "PARKING":
            return self._create_score("parking", 100, "Is a parking space", True)

        if extract_property_amenities(property.amenities) & PARKING_AMENITIES:
            return self._create_score("parking", 100, "Has parking", True)

        return self._create_score("parking", 0, "No parking (required)")


def calculate_match_score(
    client: ClientInput,
    property: PropertyInput,
    calculator: Optional[MatchCalculator] = None,
) -> MatchResult:
    """Atajo funcional: score de un par con la configuración global."""
    return (calculator or MatchCalculator()).calculate(client, property)
