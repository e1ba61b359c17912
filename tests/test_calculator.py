"""
Tests del calculador de match score.
"""

import pytest

from propmatch.matching import MatchCalculator, calculate_match_score
from propmatch.models import (
    MATCH_CRITERIA,
    ClientForMatching,
    CriterionWeights,
    PropertyForMatching,
    ScoringCurves,
)


def _with_prefs(client, **prefs):
    return {**client, "property_preferences": {**client["property_preferences"], **prefs}}


class TestOverallScore:
    """Score global y breakdown."""

    def test_ideal_match(self, calculator, sample_client, sample_property):
        result = calculator.calculate(sample_client, sample_property)

        for criterion in ("budget", "location", "transaction_type", "property_type", "bedrooms", "size"):
            assert result.breakdown[criterion] == 100

        # Criterios secundarios sin preferencia quedan en 80
        assert result.breakdown["amenities"] == 80
        assert result.score == 96.0

    def test_breakdown_has_every_criterion(self, calculator, sample_client, sample_property):
        result = calculator.calculate(sample_client, sample_property)
        assert set(result.breakdown) == set(MATCH_CRITERIA)
        assert result.total_criteria == len(MATCH_CRITERIA)

    def test_ids_are_carried(self, calculator, sample_client, sample_property):
        result = calculator.calculate(sample_client, sample_property)
        assert result.client_id == "client-001"
        assert result.property_id == "prop-001"

    def test_accepts_models(self, calculator, sample_client, sample_property):
        client = ClientForMatching.model_validate(sample_client)
        property = PropertyForMatching.model_validate(sample_property)
        assert calculator.calculate(client, property).score == 96.0

    def test_accepts_orm_like_objects(self, calculator, sample_property):
        class Record:
            id = "orm-1"
            intent = "RENT"
            budget_min = None
            budget_max = 1000
            areas_of_interest = "Kifisia, Marousi"
            property_preferences = None

        result = calculator.calculate(Record(), {**sample_property, "transaction_type": "RENTAL", "price": 900})
        assert result.client_id == "orm-1"
        assert result.breakdown["budget"] == 100
        assert result.breakdown["transaction_type"] == 100

    def test_weighted_average(self, sample_client, sample_property):
        weights = CriterionWeights(**{name: 0 for name in MATCH_CRITERIA}).model_copy(
            update={"budget": 1, "transaction_type": 1}
        )
        calc = MatchCalculator(weights=weights, curves=ScoringCurves())

        property = {**sample_property, "transaction_type": "RENTAL"}
        result = calc.calculate(sample_client, property)

        assert result.breakdown["budget"] == 100
        assert result.breakdown["transaction_type"] == 0
        assert result.score == 50.0

    def test_zero_weights_gives_zero(self, sample_client, sample_property):
        weights = CriterionWeights(**{name: 0 for name in MATCH_CRITERIA})
        calc = MatchCalculator(weights=weights, curves=ScoringCurves())
        assert calc.calculate(sample_client, sample_property).score == 0

    def test_functional_shortcut(self, calculator, sample_client, sample_property):
        result = calculate_match_score(sample_client, sample_property, calculator)
        assert result.score == 96.0

    def test_criterion_details(self, calculator, sample_client, sample_property):
        result = calculator.calculate(sample_client, sample_property)
        budget = result.get_criterion("budget")

        assert budget.matched is True
        assert budget.weight == 25
        assert budget.weighted_score == 25.0
        assert budget.reason == "Price within budget"
        assert result.get_criterion("unknown") is None


    def test_matched_criteria_counts_positive_scores(self, calculator):
        client = {"budget_max": 100000, "property_preferences": {"bedrooms_min": 3}}
        property = {"price": 115000, "bedrooms": 2}
        result = calculator.calculate(client, property)

        assert 0 < result.breakdown["budget"] < 80
        assert 0 < result.breakdown["bedrooms"] < 80
        assert result.matched_criteria == sum(1 for c in result.criteria if c.score > 0)
        assert result.matched_criteria == 15

    def test_zero_scores_not_counted(self, calculator, sample_client, sample_property):
        property = {**sample_property, "transaction_type": "RENTAL"}
        result = calculator.calculate(sample_client, property)

        assert result.breakdown["transaction_type"] == 0
        assert result.matched_criteria == result.total_criteria - 1

    def test_weighted_scores_sum_to_score(self, sample_client, sample_property):
        weights = CriterionWeights(**{name: 0 for name in MATCH_CRITERIA}).model_copy(
            update={"budget": 3, "transaction_type": 1}
        )
        calc = MatchCalculator(weights=weights, curves=ScoringCurves())
        result = calc.calculate(sample_client, {**sample_property, "transaction_type": "RENTAL"})

        assert result.get_criterion("budget").weighted_score == 75.0
        assert sum(c.weighted_score for c in result.criteria) == result.score


class TestNeverRaises:
    """Datos faltantes o mal formados degradan, nunca lanzan."""

    @pytest.mark.parametrize(
        "client, property",
        [
            (None, None),
            ({}, {}),
            (42, "not a property"),
            (
                {"budget_min": "abc", "budget_max": [], "property_preferences": "{bad json"},
                {"price": "n/a", "bedrooms": [1], "amenities": 7, "floor": {}},
            ),
            (
                {"areas_of_interest": 42, "intent": {"x": 1}, "property_preferences": {"bedrooms_min": "two"}},
                {"size_net_sqm": float("nan"), "square_feet": "-", "elevator": "maybe"},
            ),
        ],
    )
    def test_bounds(self, calculator, client, property):
        result = calculator.calculate(client, property)

        assert 0 <= result.score <= 100
        for score in result.breakdown.values():
            assert 0 <= score <= 100

    def test_empty_records_are_neutral(self, calculator):
        result = calculator.calculate({}, {})

        assert result.breakdown["budget"] == 100
        assert result.breakdown["location"] == 100
        assert result.breakdown["bedrooms"] == 100
        assert result.breakdown["size"] == 100
        assert result.breakdown["transaction_type"] == 80

    def test_invalid_record_keeps_id(self, calculator):
        result = calculator.calculate({"id": "c-9", "budget_min": 10}, "garbage")
        assert result.client_id == "c-9"
        assert result.property_id is None


class TestBudget:

    def test_null_budget_is_neutral(self, calculator, sample_client, sample_property):
        client = {**sample_client, "budget_min": None, "budget_max": None}
        result = calculator.calculate(client, sample_property)
        assert result.breakdown["budget"] == 100

    def test_null_budget_and_null_price_is_neutral(self, calculator, sample_client, sample_property):
        client = {**sample_client, "budget_min": None, "budget_max": None}
        result = calculator.calculate(client, {**sample_property, "price": None})
        assert result.breakdown["budget"] == 100

    def test_missing_price(self, calculator, sample_client, sample_property):
        result = calculator.calculate(sample_client, {**sample_property, "price": None})
        assert result.breakdown["budget"] == 50

    @pytest.mark.parametrize("price", [200000, 250000, 300000])
    def test_price_within_budget(self, calculator, sample_client, sample_property, price):
        result = calculator.calculate(sample_client, {**sample_property, "price": price})
        assert result.breakdown["budget"] == 100

    def test_only_max(self, calculator, sample_client, sample_property):
        client = {**sample_client, "budget_min": None}
        result = calculator.calculate(client, {**sample_property, "price": 1000})
        assert result.breakdown["budget"] == 100

    def test_slightly_over(self, calculator, sample_client, sample_property):
        result = calculator.calculate(sample_client, {**sample_property, "price": 330000})
        assert result.breakdown["budget"] == pytest.approx(66.67, abs=0.01)

    def test_far_over(self, calculator, sample_client, sample_property):
        result = calculator.calculate(sample_client, {**sample_property, "price": 400000})
        assert result.breakdown["budget"] == 0

    def test_under_minimum(self, calculator, sample_client, sample_property):
        result = calculator.calculate(sample_client, {**sample_property, "price": 150000})
        assert result.breakdown["budget"] == 80

    def test_far_under_minimum(self, calculator, sample_client, sample_property):
        result = calculator.calculate(sample_client, {**sample_property, "price": 50000})
        assert result.breakdown["budget"] == 60

    def test_string_amounts(self, calculator, sample_client, sample_property):
        client = {**sample_client, "budget_min": "200000", "budget_max": "300000.00"}
        result = calculator.calculate(client, {**sample_property, "price": "275000"})
        assert result.breakdown["budget"] == 100


class TestLocation:

    def test_no_preference(self, calculator, sample_client, sample_property):
        result = calculator.calculate({**sample_client, "areas_of_interest": []}, sample_property)
        assert result.breakdown["location"] == 100

    def test_property_without_location(self, calculator, sample_client, sample_property):
        property = {**sample_property, "area": None, "address_city": None}
        assert calculator.calculate(sample_client, property).breakdown["location"] == 50

    def test_partial_match(self, calculator, sample_client, sample_property):
        property = {**sample_property, "area": "Kifisia North", "address_city": None}
        assert calculator.calculate(sample_client, property).breakdown["location"] == 70

    def test_no_match(self, calculator, sample_client, sample_property):
        property = {**sample_property, "area": "Piraeus", "address_city": "Piraeus"}
        assert calculator.calculate(sample_client, property).breakdown["location"] == 0

    def test_accents_and_case_ignored(self, calculator, sample_client, sample_property):
        client = {**sample_client, "areas_of_interest": ["Κηφισιά"]}
        property = {**sample_property, "area": "ΚΗΦΙΣΙΑ"}
        assert calculator.calculate(client, property).breakdown["location"] == 100

    def test_municipality_prefix_removed(self, calculator, sample_client, sample_property):
        client = {**sample_client, "areas_of_interest": "City of Athens"}
        property = {**sample_property, "area": None, "municipality": "Athens Municipality"}
        assert calculator.calculate(client, property).breakdown["location"] == 100

    def test_json_encoded_areas(self, calculator, sample_client, sample_property):
        client = {**sample_client, "areas_of_interest": '["Glyfada", "Kifisia"]'}
        assert calculator.calculate(client, sample_property).breakdown["location"] == 100


class TestTransactionAndPropertyType:

    @pytest.mark.parametrize(
        "intent, transaction_type, expected",
        [
            ("BUY", "SALE", 100),
            ("RENT", "RENTAL", 100),
            ("RENT", "SHORT_TERM", 100),
            ("INVEST", "EXCHANGE", 100),
            ("RENT", "SALE", 0),
            ("BUY", "RENTAL", 0),
            (None, "SALE", 80),
            ("BUY", None, 80),
        ],
    )
    def test_intent(self, calculator, sample_client, sample_property, intent, transaction_type, expected):
        client = {**sample_client, "intent": intent}
        property = {**sample_property, "transaction_type": transaction_type}
        assert calculator.calculate(client, property).breakdown["transaction_type"] == expected

    def test_lowercase_intent(self, calculator, sample_client, sample_property):
        client = {**sample_client, "intent": "buy"}
        assert calculator.calculate(client, sample_property).breakdown["transaction_type"] == 100

    @pytest.mark.parametrize(
        "purpose, property_type, expected",
        [
            ("RESIDENTIAL", "HOUSE", 100),
            ("COMMERCIAL", "WAREHOUSE", 100),
            ("LAND", "PLOT", 100),
            ("RESIDENTIAL", "WAREHOUSE", 0),
            ("RESIDENTIAL", "OTHER", 50),
            (None, "HOUSE", 80),
        ],
    )
    def test_purpose(self, calculator, sample_client, sample_property, purpose, property_type, expected):
        client = {**sample_client, "purpose": purpose}
        property = {**sample_property, "property_type": property_type}
        assert calculator.calculate(client, property).breakdown["property_type"] == expected


class TestSizeAndRooms:

    def test_bedrooms_outside_range(self, calculator, sample_client, sample_property):
        result = calculator.calculate(sample_client, {**sample_property, "bedrooms": 5})
        assert result.breakdown["bedrooms"] == 50

    def test_bedrooms_far_outside_range(self, calculator, sample_client, sample_property):
        result = calculator.calculate(sample_client, {**sample_property, "bedrooms": 9})
        assert result.breakdown["bedrooms"] == 0

    def test_bedrooms_unknown(self, calculator, sample_client, sample_property):
        result = calculator.calculate(sample_client, {**sample_property, "bedrooms": None})
        assert result.breakdown["bedrooms"] == 50

    def test_size_from_square_feet(self, calculator, sample_client, sample_property):
        property = {**sample_property, "size_net_sqm": None, "square_feet": 1000}
        assert calculator.calculate(sample_client, property).breakdown["size"] == 100

    def test_gross_size_fallback(self, calculator, sample_client, sample_property):
        property = {**sample_property, "size_net_sqm": None, "size_gross_sqm": 110}
        assert calculator.calculate(sample_client, property).breakdown["size"] == 100

    def test_size_over_range(self, calculator, sample_client, sample_property):
        result = calculator.calculate(sample_client, {**sample_property, "size_net_sqm": 140})
        assert result.breakdown["size"] == pytest.approx(44.44, abs=0.01)

    def test_size_far_under_range(self, calculator, sample_client, sample_property):
        result = calculator.calculate(sample_client, {**sample_property, "size_net_sqm": 40})
        assert result.breakdown["size"] == 0


class TestSecondaryCriteria:

    def test_required_amenity_missing(self, calculator, sample_client, sample_property):
        client = _with_prefs(sample_client, amenities_required=["pool"])
        result = calculator.calculate(client, sample_property)
        assert result.breakdown["amenities"] == 0

    def test_required_and_preferred_amenities(self, calculator, sample_client, sample_property):
        client = _with_prefs(
            sample_client, amenities_required=["Parking"], amenities_preferred=["pool", "balcony"]
        )
        result = calculator.calculate(client, sample_property)
        assert result.breakdown["amenities"] == 85

    def test_amenities_as_list(self, calculator, sample_client, sample_property):
        client = _with_prefs(sample_client, amenities_preferred=["air conditioning"])
        property = {**sample_property, "amenities": ["Air-Conditioning"]}
        assert calculator.calculate(client, property).breakdown["amenities"] == 100

    def test_elevator_required(self, calculator, sample_client, sample_property):
        client = _with_prefs(sample_client, requires_elevator=True)

        assert calculator.calculate(client, sample_property).breakdown["elevator"] == 100
        assert calculator.calculate(client, {**sample_property, "elevator": False}).breakdown["elevator"] == 0
        assert calculator.calculate(client, {**sample_property, "elevator": None}).breakdown["elevator"] == 50

    def test_pets_required(self, calculator, sample_client, sample_property):
        client = _with_prefs(sample_client, requires_pet_friendly="yes")
        property = {**sample_property, "accepts_pets": "true"}
        assert calculator.calculate(client, property).breakdown["pet_friendly"] == 100

    def test_ground_floor_only(self, calculator, sample_client, sample_property):
        client = _with_prefs(sample_client, ground_floor_only=True)

        assert calculator.calculate(client, {**sample_property, "floor": "Ισόγειο"}).breakdown["floor"] == 100
        assert calculator.calculate(client, sample_property).breakdown["floor"] == 20

    def test_floor_range(self, calculator, sample_client, sample_property):
        client = _with_prefs(sample_client, floor_min=3, floor_max=5)
        assert calculator.calculate(client, sample_property).breakdown["floor"] == 80

    def test_energy_class_minimum(self, calculator, sample_client, sample_property):
        meets = _with_prefs(sample_client, energy_class_min="C")
        fails = _with_prefs(sample_client, energy_class_min="A+")

        assert calculator.calculate(meets, sample_property).breakdown["energy_class"] == 100
        assert calculator.calculate(fails, sample_property).breakdown["energy_class"] == 0

    def test_furnished(self, calculator, sample_client, sample_property):
        client = _with_prefs(sample_client, furnished_preference="FULLY")

        assert calculator.calculate(client, {**sample_property, "furnished": "fully"}).breakdown["furnished"] == 100
        assert calculator.calculate(client, {**sample_property, "furnished": "PARTIALLY"}).breakdown["furnished"] == 60
        assert calculator.calculate(client, {**sample_property, "furnished": "NO"}).breakdown["furnished"] == 0

    def test_any_furnished_is_no_preference(self, calculator, sample_client, sample_property):
        client = _with_prefs(sample_client, furnished_preference="ANY")
        property = {**sample_property, "furnished": "NO"}
        assert calculator.calculate(client, property).breakdown["furnished"] == 80

    def test_heating_mismatch(self, calculator, sample_client, sample_property):
        client = _with_prefs(sample_client, heating_preferences=["autonomous", "heat_pump"])

        assert calculator.calculate(client, {**sample_property, "heating_type": "CENTRAL"}).breakdown["heating"] == 30
        assert calculator.calculate(client, {**sample_property, "heating_type": "heat pump"}).breakdown["heating"] == 100

    def test_condition(self, calculator, sample_client, sample_property):
        client = _with_prefs(sample_client, condition_preferences=["EXCELLENT", "VERY_GOOD"])

        assert calculator.calculate(client, {**sample_property, "condition": "very good"}).breakdown["condition"] == 100
        assert calculator.calculate(client, {**sample_property, "condition": "GOOD"}).breakdown["condition"] == 0

    def test_parking_required(self, calculator, sample_client, sample_property):
        client = _with_prefs(sample_client, requires_parking=True)

        assert calculator.calculate(client, sample_property).breakdown["parking"] == 100
        assert calculator.calculate(client, {**sample_property, "amenities": None}).breakdown["parking"] == 0
        spot = {**sample_property, "amenities": None, "property_type": "PARKING"}
        assert calculator.calculate(client, spot).breakdown["parking"] == 100


class TestConfiguredCurves:

    def test_settings_from_environment(self, monkeypatch, sample_client, sample_property):
        monkeypatch.setenv("SCORING__MAX_OVER_PERCENT", "20")
        calc = MatchCalculator()

        result = calc.calculate(sample_client, {**sample_property, "price": 330000})
        assert result.breakdown["budget"] == 50

    def test_custom_neutral_score(self, sample_client, sample_property):
        calc = MatchCalculator(curves=ScoringCurves(optional_neutral_score=100))
        result = calc.calculate(sample_client, sample_property)
        assert result.score == 100
