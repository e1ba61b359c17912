"""
Script para validar un export CSV antes de importarlo al CRM.

Auto-detecta el mapeo de columnas (o usa uno dado), normaliza enums,
valida cada fila y escribe el reporte como JSON en stdout.

Uso:
    python -m propmatch.scripts.run_import properties.csv
    python -m propmatch.scripts.run_import clients.csv --kind client
    python -m propmatch.scripts.run_import properties.csv --mapping mapping.json
    python -m propmatch.scripts.run_import properties.csv --output valid_rows.json
"""

import argparse
import csv
import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Optional

import structlog

from propmatch.importer import (
    ImportPipeline,
    ImportReport,
    auto_match_columns,
    get_match_statistics,
    match_results_to_mapping,
)
from propmatch.log import configure_logging

logger = structlog.get_logger()


def read_csv(path: Path) -> tuple[list[str], list[dict]]:
    """Lee el CSV (acepta BOM de Excel) y devuelve headers y filas."""
    with open(path, encoding="utf-8-sig", newline="") as f:
        reader = csv.DictReader(f)
        rows = list(reader)
        headers = list(reader.fieldnames or [])
    return headers, rows


def run_import(
    path: Path,
    kind: str = "property",
    column_mapping: Optional[dict[str, str]] = None,
) -> ImportReport:
    """Procesa el archivo y devuelve el reporte."""
    pipeline = ImportPipeline(kind=kind)
    headers, rows = read_csv(path)

    if column_mapping is None:
        matches = auto_match_columns(headers, pipeline.field_definitions)
        stats = get_match_statistics(matches)
        logger.info(
            "Columnas auto-detectadas",
            total=stats.total,
            matched=stats.matched,
            high=stats.high_confidence,
            medium=stats.medium_confidence,
            low=stats.low_confidence,
        )
        column_mapping = match_results_to_mapping(matches)

    return pipeline.run(rows, column_mapping)


def report_to_dict(report: ImportReport) -> dict:
    return {
        "total_rows": report.total_rows,
        "valid": report.valid,
        "failed": report.failed,
        "column_mapping": report.column_mapping,
        "errors": [asdict(issue) for issue in report.errors],
        "warnings": [asdict(issue) for issue in report.warnings],
    }


def main():
    """Entry point del script."""
    parser = argparse.ArgumentParser(description="Validar un CSV de importación")
    parser.add_argument("file", type=Path, help="Archivo CSV")
    parser.add_argument(
        "--kind",
        choices=["property", "client"],
        default="property",
        help="Entidad a importar (default: property)",
    )
    parser.add_argument("--mapping", type=Path, default=None, help="JSON header -> campo")
    parser.add_argument("--output", type=Path, default=None, help="Guardar filas válidas como JSON")
    parser.add_argument("--log-level", default=None, help="Nivel de log (default: LOG_LEVEL)")
    args = parser.parse_args()

    configure_logging(args.log_level)
    logger.info("Iniciando importación...", file=str(args.file), kind=args.kind)

    try:
        column_mapping = None
        if args.mapping:
            with open(args.mapping, encoding="utf-8") as f:
                column_mapping = json.load(f)

        report = run_import(args.file, args.kind, column_mapping)

        if args.output:
            with open(args.output, "w", encoding="utf-8") as f:
                json.dump(report.valid_rows, f, ensure_ascii=False, indent=2)

        json.dump(report_to_dict(report), sys.stdout, ensure_ascii=False, indent=2)
        sys.stdout.write("\n")

        logger.info(
            "Importación completada",
            valid=report.valid,
            failed=report.failed,
            warnings=len(report.warnings),
        )
        sys.exit(0 if report.success else 1)

    except KeyboardInterrupt:
        logger.info("Importación interrumpida por usuario")
        sys.exit(130)
    except Exception as e:
        logger.error("Error fatal en importación", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
