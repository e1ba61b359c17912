"""
Pipeline de importación masiva.

Por cada fila del archivo:
1. Renombrar columnas según el mapeo (manual o auto-detectado)
2. Normalizar enums al vocabulario canónico
3. Marcar como warning los enums que no se reconocen
4. Validar contra el esquema de la entidad
5. Persistir las filas válidas por lotes (opcional)

Una fila inválida nunca corta la importación: se registra como
ImportIssue y se sigue con la siguiente.
"""

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Literal, Optional

import structlog
from pydantic import BaseModel, ValidationError

from propmatch.config import get_settings
from propmatch.importer.enum_mappings import (
    CLIENT_ENUM_MAPPINGS,
    PROPERTY_ENUM_MAPPINGS,
    EnumMapping,
)
from propmatch.importer.enum_normalizer import (
    find_unrecognized_enums,
    normalize_client_enums,
    normalize_property_enums,
)
from propmatch.importer.fuzzy_matcher import (
    FieldDefinition,
    auto_match_columns,
    match_results_to_mapping,
)
from propmatch.importer.schema import (
    CLIENT_IMPORT_FIELDS,
    PROPERTY_IMPORT_FIELDS,
    ClientImportRow,
    PropertyImportRow,
)

logger = structlog.get_logger()

EntityKind = Literal["property", "client"]

# Fila 1 del archivo es el header
HEADER_ROW_OFFSET = 2

BatchWriter = Callable[[list[dict[str, Any]]], int]


@dataclass(frozen=True)
class _EntityConfig:
    schema: type[BaseModel]
    mappings: Mapping[str, EnumMapping]
    fields: Sequence[FieldDefinition]
    normalize: Callable[[Mapping[str, Any]], dict[str, Any]]


_ENTITIES: dict[str, _EntityConfig] = {
    "property": _EntityConfig(
        schema=PropertyImportRow,
        mappings=PROPERTY_ENUM_MAPPINGS,
        fields=PROPERTY_IMPORT_FIELDS,
        normalize=normalize_property_enums,
    ),
    "client": _EntityConfig(
        schema=ClientImportRow,
        mappings=CLIENT_ENUM_MAPPINGS,
        fields=CLIENT_IMPORT_FIELDS,
        normalize=normalize_client_enums,
    ),
}


@dataclass
class ImportIssue:
    """Error o warning de una fila (numerada como en la planilla)."""
    row: int
    field: str
    error: str
    value: Optional[str] = None


@dataclass
class ImportReport:
    """Resultado de una corrida del pipeline."""
    total_rows: int = 0
    valid_rows: list[dict[str, Any]] = field(default_factory=list)
    valid_row_numbers: list[int] = field(default_factory=list)
    errors: list[ImportIssue] = field(default_factory=list)
    warnings: list[ImportIssue] = field(default_factory=list)
    failed: int = 0
    imported: int = 0
    skipped: int = 0
    column_mapping: dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> int:
        return len(self.valid_rows)

    @property
    def success(self) -> bool:
        return self.failed == 0


def _display(value: Any) -> str:
    return "" if value is None else str(value)


def _rename_columns(row: Mapping[str, Any], column_mapping: Mapping[str, str]) -> dict[str, Any]:
    # Las columnas sin mapeo se descartan
    renamed: dict[str, Any] = {}
    for source, value in row.items():
        target = column_mapping.get(source)
        if target and target not in renamed:
            renamed[target] = value
    return renamed


class ImportPipeline:
    """
    Pipeline de importación para una entidad (propiedades o clientes).

    Args:
        kind: "property" o "client"
        batch_size: Tamaño de lote para `writer` (default: configuración)
        writer: Callable que persiste un lote y devuelve cuántas filas
            se insertaron; las no insertadas cuentan como skipped
    """

    def __init__(
        self,
        kind: EntityKind = "property",
        batch_size: Optional[int] = None,
        writer: Optional[BatchWriter] = None,
    ):
        if kind not in _ENTITIES:
            raise ValueError(f"Tipo de entidad desconocido: {kind}")

        self.kind = kind
        self.entity = _ENTITIES[kind]
        self.batch_size = batch_size or get_settings().import_batch_size
        self.writer = writer

    @property
    def field_definitions(self) -> Sequence[FieldDefinition]:
        return self.entity.fields

    def detect_columns(self, headers: Iterable[str]) -> dict[str, str]:
        """Mapeo header -> campo sugerido por el fuzzy matcher."""
        return match_results_to_mapping(auto_match_columns(headers, self.entity.fields))

    def process_row(self, row: Mapping[str, Any], row_number: int, report: ImportReport) -> Optional[dict[str, Any]]:
        """Normaliza y valida una fila; registra los problemas en `report`."""
        for field_name, value in find_unrecognized_enums(row, self.entity.mappings).items():
            report.warnings.append(
                ImportIssue(
                    row=row_number,
                    field=field_name,
                    error="Unrecognized value, needs manual correction",
                    value=_display(value),
                )
            )

        normalized = self.entity.normalize(row)

        try:
            validated = self.entity.schema.model_validate(normalized)
        except ValidationError as e:
            report.failed += 1
            for err in e.errors():
                loc = err.get("loc") or ()
                field_name = ".".join(str(part) for part in loc) or "row"
                value = row.get(loc[0]) if loc else None
                report.errors.append(
                    ImportIssue(
                        row=row_number,
                        field=field_name,
                        error=err.get("msg", "Invalid value"),
                        value=_display(value),
                    )
                )
            return None

        return validated.model_dump(mode="json")

    def run(
        self,
        rows: Iterable[Mapping[str, Any]],
        column_mapping: Optional[Mapping[str, str]] = None,
    ) -> ImportReport:
        """
        Procesa todas las filas.

        Args:
            rows: Filas crudas (dicts header -> valor)
            column_mapping: Header -> campo destino. Si es None se usan
                los headers tal cual vienen

        Returns:
            ImportReport con filas válidas, errores y warnings
        """
        report = ImportReport(column_mapping=dict(column_mapping or {}))

        for index, row in enumerate(rows):
            report.total_rows += 1
            if column_mapping is not None:
                row = _rename_columns(row, column_mapping)

            row_number = index + HEADER_ROW_OFFSET
            validated = self.process_row(row, row_number, report)
            if validated is not None:
                report.valid_rows.append(validated)
                report.valid_row_numbers.append(row_number)

        if self.writer is not None:
            self._write(report)

        logger.info(
            "Importación procesada",
            kind=self.kind,
            total=report.total_rows,
            valid=report.valid,
            failed=report.failed,
            warnings=len(report.warnings),
            imported=report.imported,
        )
        return report

    def _write(self, report: ImportReport) -> None:
        for start in range(0, report.valid, self.batch_size):
            batch = report.valid_rows[start:start + self.batch_size]
            numbers = report.valid_row_numbers[start:start + self.batch_size]
            failed_before = report.failed
            try:
                inserted = self.writer(batch)
            except Exception as e:
                logger.warning("Falló el lote, reintentando fila por fila", error=str(e), size=len(batch))
                inserted = self._write_rows(batch, numbers, report)

            failed = report.failed - failed_before
            report.imported += inserted
            report.skipped += max(len(batch) - inserted - failed, 0)

    def _write_rows(self, batch: list[dict[str, Any]], numbers: list[int], report: ImportReport) -> int:
        inserted = 0
        for row, row_number in zip(batch, numbers):
            try:
                inserted += self.writer([row])
            except Exception as e:
                logger.error("Error insertando fila", row=row_number, error=str(e))
                report.failed += 1
                report.errors.append(ImportIssue(row=row_number, field="row", error=str(e)))
        return inserted
