"""
Tests de esquemas de importación y del pipeline.
"""

import pytest
from pydantic import ValidationError

from propmatch.importer import ClientImportRow, ImportPipeline, PropertyImportRow
from propmatch.models.enums import HeatingType, PropertyType


@pytest.fixture
def property_mapping():
    return {
        "Title": "property_name",
        "Type": "property_type",
        "Price": "price",
        "City": "address_city",
        "Heating": "heating_type",
        "Email": "primary_email",
    }


class TestPropertyImportRow:

    def test_coerces_csv_strings(self):
        row = PropertyImportRow.model_validate(
            {
                "property_name": " Villa Voula ",
                "price": "450000",
                "property_type": "HOUSE",
                "bedrooms": "3",
                "bathrooms": "1.5",
                "elevator": "yes",
                "address_zip": 16673,
                "primary_email": "",
                "available_from": "2025-06-01",
            }
        )

        assert row.property_name == "Villa Voula"
        assert row.price == 450000
        assert row.property_type is PropertyType.HOUSE
        assert row.bedrooms == 3
        assert row.bathrooms == 1.5
        assert row.elevator is True
        assert row.address_zip == "16673"
        assert row.primary_email is None
        assert row.available_from.isoformat() == "2025-06-01"

    def test_defaults(self):
        row = PropertyImportRow(property_name="Studio")
        assert row.elevator is False
        assert row.accepts_pets is False
        assert row.heating_type is None

    @pytest.mark.parametrize(
        "field, value",
        [
            ("price", "-100"),
            ("price", "abc"),
            ("bedrooms", "2.5"),
            ("primary_email", "not-an-email"),
            ("property_type", "villa"),
            ("size_net_sqm", "0"),
        ],
    )
    def test_invalid_values(self, field, value):
        with pytest.raises(ValidationError) as exc:
            PropertyImportRow.model_validate({"property_name": "X", field: value})
        assert exc.value.errors()[0]["loc"][0] == field

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_name_required(self, name):
        with pytest.raises(ValidationError):
            PropertyImportRow.model_validate({"property_name": name})


class TestClientImportRow:

    def test_valid_row(self):
        row = ClientImportRow.model_validate(
            {
                "client_name": "Nikos",
                "intent": "BUY",
                "budget_min": "100000",
                "budget_max": "",
                "areas_of_interest": "Glyfada, Voula",
                "primary_email": "nikos@example.com",
            }
        )
        assert row.budget_min == 100000
        assert row.budget_max is None
        assert row.areas_of_interest == ["Glyfada", "Voula"]

    def test_budget_order(self):
        with pytest.raises(ValidationError):
            ClientImportRow.model_validate(
                {"client_name": "Nikos", "budget_min": 500, "budget_max": 100}
            )


class TestImportPipeline:

    def test_run(self, property_mapping):
        rows = [
            {"Title": "Villa Voula", "Type": "μονοκατοικία", "Price": "450000", "City": "Voula",
             "Heating": "spaceship heat"},
            {"Title": "", "Type": "flat", "Price": "abc"},
            {"Title": "Flat Kifisia", "Type": "flat", "Price": "-100", "Email": "bad"},
        ]
        report = ImportPipeline("property").run(rows, property_mapping)

        assert report.total_rows == 3
        assert report.valid == 1
        assert report.failed == 2
        assert not report.success

        valid = report.valid_rows[0]
        assert valid["property_name"] == "Villa Voula"
        assert valid["property_type"] == "HOUSE"
        assert valid["heating_type"] is None
        assert report.valid_row_numbers == [2]

        assert [(w.row, w.field, w.value) for w in report.warnings] == [
            (2, "heating_type", "spaceship heat")
        ]

        errors = {(e.row, e.field) for e in report.errors}
        assert (3, "property_name") in errors
        assert (3, "price") in errors
        assert (4, "price") in errors
        assert (4, "primary_email") in errors

        price_error = next(e for e in report.errors if e.row == 3 and e.field == "price")
        assert price_error.value == "abc"

    def test_rows_already_keyed_by_field(self):
        rows = [{"property_name": "Loft", "heating_type": "Αυτόνομη", "condition": "like new"}]
        report = ImportPipeline().run(rows)

        assert report.success
        assert report.valid_rows[0]["heating_type"] == HeatingType.AUTONOMOUS.value
        assert report.valid_rows[0]["condition"] == "EXCELLENT"

    def test_unmapped_columns_dropped(self):
        rows = [{"Title": "Loft", "Internal Ref": "X-1"}]
        report = ImportPipeline().run(rows, {"Title": "property_name"})
        assert "Internal Ref" not in report.valid_rows[0]

    def test_detect_columns(self):
        pipeline = ImportPipeline()
        assert pipeline.detect_columns(["Title", "Price", "Beds"]) == {
            "Title": "property_name",
            "Price": "price",
            "Beds": "bedrooms",
        }

    def test_client_pipeline(self):
        rows = [
            {"client_name": "Maria", "intent": "αγορά", "lead_source": "Website", "timeline": "asap"},
            {"client_name": "Nikos", "budget_min": "500", "budget_max": "100"},
        ]
        report = ImportPipeline("client").run(rows)

        assert report.valid == 1
        assert report.valid_rows[0]["intent"] == "BUY"
        assert report.valid_rows[0]["lead_source"] == "WEB"
        assert report.valid_rows[0]["timeline"] == "IMMEDIATE"
        assert report.errors[0].row == 3
        assert report.errors[0].field == "row"

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            ImportPipeline("warehouse")

    def test_empty_input(self):
        report = ImportPipeline().run([])
        assert report.total_rows == 0
        assert report.success


class TestBatchWriter:

    def test_batches(self):
        calls = []

        def writer(batch):
            calls.append(len(batch))
            return len(batch)

        rows = [{"property_name": f"P{i}"} for i in range(5)]
        report = ImportPipeline(batch_size=2, writer=writer).run(rows)

        assert calls == [2, 2, 1]
        assert report.imported == 5
        assert report.skipped == 0

    def test_duplicates_skipped(self):
        rows = [{"property_name": f"P{i}"} for i in range(3)]
        report = ImportPipeline(writer=lambda batch: len(batch) - 1).run(rows)

        assert report.imported == 2
        assert report.skipped == 1

    def test_failed_batch_retried_row_by_row(self):
        def writer(batch):
            if len(batch) > 1:
                raise RuntimeError("batch insert failed")
            if batch[0]["property_name"] == "Broken":
                raise RuntimeError("duplicate key")
            return 1

        rows = [{"property_name": name} for name in ("A", "Broken", "C")]
        report = ImportPipeline(writer=writer).run(rows)

        assert report.imported == 2
        assert report.failed == 1
        assert report.skipped == 0
        assert [(e.row, e.error) for e in report.errors] == [(3, "duplicate key")]
