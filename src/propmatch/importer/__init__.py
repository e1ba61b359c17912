"""
Importación masiva de propiedades y clientes.

Normaliza valores libres (inglés / griego) al vocabulario canónico,
auto-mapea headers de CSV y valida cada fila.
"""

from propmatch.importer.enum_mappings import CLIENT_ENUM_MAPPINGS, PROPERTY_ENUM_MAPPINGS
from propmatch.importer.enum_normalizer import (
    find_unrecognized_enums,
    normalize_client_enums,
    normalize_enum_value,
    normalize_property_enums,
)
from propmatch.importer.fuzzy_matcher import (
    ColumnMatch,
    FieldDefinition,
    auto_match_columns,
    find_best_match,
    get_match_statistics,
    match_results_to_mapping,
)
from propmatch.importer.schema import (
    CLIENT_IMPORT_FIELDS,
    PROPERTY_IMPORT_FIELDS,
    ClientImportRow,
    PropertyImportRow,
)
from propmatch.importer.pipeline import ImportIssue, ImportPipeline, ImportReport

__all__ = [
    "CLIENT_ENUM_MAPPINGS",
    "PROPERTY_ENUM_MAPPINGS",
    "normalize_enum_value",
    "normalize_property_enums",
    "normalize_client_enums",
    "find_unrecognized_enums",
    "ColumnMatch",
    "FieldDefinition",
    "auto_match_columns",
    "find_best_match",
    "get_match_statistics",
    "match_results_to_mapping",
    "PropertyImportRow",
    "ClientImportRow",
    "PROPERTY_IMPORT_FIELDS",
    "CLIENT_IMPORT_FIELDS",
    "ImportPipeline",
    "ImportReport",
    "ImportIssue",
]
