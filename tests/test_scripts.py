"""
Tests de los scripts de línea de comandos.
"""

import csv
import json
import sys

import pytest

from propmatch.scripts import run_import, run_matching


@pytest.fixture
def data_files(tmp_path, sample_client, sample_property):
    clients = tmp_path / "clients.json"
    properties = tmp_path / "properties.json"
    clients.write_text(json.dumps([sample_client]), encoding="utf-8")
    properties.write_text(
        json.dumps({"properties": [sample_property, {**sample_property, "id": "prop-002", "price": 900000}]}),
        encoding="utf-8",
    )
    return clients, properties


@pytest.fixture
def csv_file(tmp_path):
    path = tmp_path / "properties.csv"
    with open(path, "w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["Title", "Type", "Price", "Heating"])
        writer.writerow(["Villa Voula", "Μονοκατοικία", "450000", "central"])
        writer.writerow(["", "flat", "abc", ""])
    return path


class TestRunMatching:

    def test_load_records_unwraps_export(self, data_files):
        _, properties = data_files
        records = run_matching.load_records(properties)
        assert [r["id"] for r in records] == ["prop-001", "prop-002"]

    def test_client_mode(self, data_files):
        clients, properties = data_files
        output = run_matching.run_matching(
            run_matching.load_records(clients),
            run_matching.load_records(properties),
            client_id="client-001",
            min_score=90,
        )
        assert [m["property_id"] for m in output] == ["prop-001"]

    def test_unknown_client(self, data_files):
        clients, properties = data_files
        with pytest.raises(LookupError):
            run_matching.run_matching(
                run_matching.load_records(clients),
                run_matching.load_records(properties),
                client_id="missing",
            )

    def test_analytics_mode(self, data_files):
        clients, properties = data_files
        output = run_matching.run_matching(
            run_matching.load_records(clients),
            run_matching.load_records(properties),
            analytics=True,
        )
        assert output["analytics"]["total_properties"] == 2
        assert output["summary"]["total_clients"] == 1

    def test_main(self, data_files, monkeypatch, capsys):
        clients, properties = data_files
        monkeypatch.setattr(
            sys, "argv",
            ["run_matching", "--clients", str(clients), "--properties", str(properties), "--min-score", "0"],
        )

        with pytest.raises(SystemExit) as exc:
            run_matching.main()

        assert exc.value.code == 0
        output = json.loads(capsys.readouterr().out)
        assert len(output) == 2
        assert output[0]["score"] >= output[1]["score"]

    def test_main_missing_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(
            sys, "argv",
            ["run_matching", "--clients", str(tmp_path / "nope.json"), "--properties", str(tmp_path / "nope.json")],
        )
        with pytest.raises(SystemExit) as exc:
            run_matching.main()
        assert exc.value.code == 1


class TestRunImport:

    def test_read_csv(self, csv_file):
        headers, rows = run_import.read_csv(csv_file)
        assert headers == ["Title", "Type", "Price", "Heating"]
        assert len(rows) == 2

    def test_run_import_auto_mapping(self, csv_file):
        report = run_import.run_import(csv_file)

        assert report.column_mapping["Title"] == "property_name"
        assert report.valid == 1
        assert report.valid_rows[0]["property_type"] == "HOUSE"
        assert report.valid_rows[0]["heating_type"] == "CENTRAL"
        assert report.failed == 1

    def test_main_exit_code_reflects_failures(self, csv_file, tmp_path, monkeypatch, capsys):
        output_file = tmp_path / "valid.json"
        monkeypatch.setattr(sys, "argv", ["run_import", str(csv_file), "--output", str(output_file)])

        with pytest.raises(SystemExit) as exc:
            run_import.main()

        assert exc.value.code == 1
        report = json.loads(capsys.readouterr().out)
        assert report["valid"] == 1
        assert {e["row"] for e in report["errors"]} == {3}
        assert json.loads(output_file.read_text(encoding="utf-8"))[0]["property_name"] == "Villa Voula"
