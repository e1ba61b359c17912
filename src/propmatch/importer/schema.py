"""
Esquemas de filas de importación.

Una fila ya normalizada (enums canónicos) se valida contra estos
modelos antes de persistirse. Los strings vacíos del CSV cuentan como
campo ausente.
"""

from datetime import date
from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    EmailStr,
    Field,
    field_validator,
    model_validator,
)

from propmatch.importer.fuzzy_matcher import FieldDefinition
from propmatch.models.coercion import to_bool, to_number, to_str_list, to_text
from propmatch.models.enums import (
    AddressPrivacyLevel,
    ClientIntent,
    ClientStatus,
    ClientType,
    EnergyCertClass,
    FinancingType,
    FurnishedStatus,
    HeatingType,
    LeadSource,
    LegalizationStatus,
    PersonType,
    PortalVisibility,
    PriceType,
    PropertyCondition,
    PropertyPurpose,
    PropertyStatus,
    PropertyType,
    Timeline,
    TransactionType,
)


def _blank_to_none(data: Any) -> Any:
    if not isinstance(data, dict):
        return data
    return {
        key: (None if isinstance(value, str) and not value.strip() else value)
        for key, value in data.items()
    }


def _number_or_raw(value: Any) -> Any:
    # Si no se puede convertir se deja el valor crudo para que falle la validación
    if value is None:
        return None
    number = to_number(value)
    if number is None:
        return value
    return int(number) if number.is_integer() else number


def _bool_or_raw(value: Any) -> Any:
    if value is None:
        return False
    flag = to_bool(value)
    return value if flag is None else flag


class _ImportRow(BaseModel):
    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    @model_validator(mode="before")
    @classmethod
    def _blank_strings(cls, data: Any) -> Any:
        return _blank_to_none(data)


class PropertyImportRow(_ImportRow):
    """Fila de importación de propiedades (CSV / Excel)."""

    property_name: str = Field(..., min_length=1)

    # Clasificación
    property_type: Optional[PropertyType] = None
    property_status: Optional[PropertyStatus] = None
    transaction_type: Optional[TransactionType] = None

    # Dirección
    address_street: Optional[str] = None
    address_city: Optional[str] = None
    address_state: Optional[str] = None
    address_zip: Optional[str] = None
    municipality: Optional[str] = None
    area: Optional[str] = None
    postal_code: Optional[str] = None

    # Precio
    price: Optional[int] = Field(None, gt=0)
    price_type: Optional[PriceType] = None

    # Detalles
    bedrooms: Optional[int] = Field(None, ge=0)
    bathrooms: Optional[float] = Field(None, ge=0)
    square_feet: Optional[int] = Field(None, ge=0)
    lot_size: Optional[float] = Field(None, ge=0)
    year_built: Optional[int] = None
    floor: Optional[str] = None
    floors_total: Optional[int] = Field(None, ge=0)

    # Superficies en m²
    size_net_sqm: Optional[float] = Field(None, gt=0)
    size_gross_sqm: Optional[float] = Field(None, gt=0)
    plot_size_sqm: Optional[float] = Field(None, gt=0)

    # Edificio
    heating_type: Optional[HeatingType] = None
    energy_cert_class: Optional[EnergyCertClass] = None
    condition: Optional[PropertyCondition] = None
    renovated_year: Optional[int] = None
    elevator: bool = False
    furnished: Optional[FurnishedStatus] = None

    # Legal
    building_permit_no: Optional[str] = None
    building_permit_year: Optional[int] = None
    land_registry_kaek: Optional[str] = None
    legalization_status: Optional[LegalizationStatus] = None
    inside_city_plan: bool = False

    # Terreno
    build_coefficient: Optional[float] = Field(None, gt=0)
    coverage_ratio: Optional[float] = Field(None, gt=0)
    frontage_m: Optional[float] = Field(None, gt=0)

    # Administración
    etaireia_diaxeirisis: Optional[str] = None
    monthly_common_charges: Optional[float] = Field(None, gt=0)

    # Alquiler
    available_from: Optional[date] = None
    accepts_pets: bool = False
    min_lease_months: Optional[int] = Field(None, ge=0)

    # Visibilidad
    is_exclusive: bool = False
    portal_visibility: Optional[PortalVisibility] = None
    address_privacy_level: Optional[AddressPrivacyLevel] = None

    description: Optional[str] = None
    primary_email: Optional[EmailStr] = None

    @field_validator(
        "address_street", "address_city", "address_state", "address_zip",
        "municipality", "area", "postal_code", "floor", "building_permit_no",
        "land_registry_kaek", "etaireia_diaxeirisis", "description",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        # Códigos postales y números de permiso llegan como números desde Excel
        return to_text(value)

    @field_validator(
        "price", "bedrooms", "bathrooms", "square_feet", "lot_size", "year_built",
        "floors_total", "size_net_sqm", "size_gross_sqm", "plot_size_sqm",
        "renovated_year", "building_permit_year", "build_coefficient",
        "coverage_ratio", "frontage_m", "monthly_common_charges", "min_lease_months",
        mode="before",
    )
    @classmethod
    def _coerce_number(cls, value: Any) -> Any:
        return _number_or_raw(value)

    @field_validator(
        "elevator", "inside_city_plan", "accepts_pets", "is_exclusive", mode="before"
    )
    @classmethod
    def _coerce_flag(cls, value: Any) -> Any:
        return _bool_or_raw(value)


class ClientImportRow(_ImportRow):
    """Fila de importación de clientes."""

    client_name: str = Field(..., min_length=1)
    full_name: Optional[str] = None
    primary_email: Optional[EmailStr] = None
    primary_phone: Optional[str] = None

    client_type: Optional[ClientType] = None
    client_status: Optional[ClientStatus] = None
    person_type: Optional[PersonType] = None

    intent: Optional[ClientIntent] = None
    purpose: Optional[PropertyPurpose] = None
    timeline: Optional[Timeline] = None
    financing_type: Optional[FinancingType] = None
    lead_source: Optional[LeadSource] = None

    budget_min: Optional[float] = Field(None, ge=0)
    budget_max: Optional[float] = Field(None, ge=0)
    areas_of_interest: list[str] = Field(default_factory=list)

    notes: Optional[str] = None

    @field_validator("full_name", "primary_phone", "notes", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return to_text(value)

    @field_validator("budget_min", "budget_max", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Any:
        return _number_or_raw(value)

    @field_validator("areas_of_interest", mode="before")
    @classmethod
    def _coerce_areas(cls, value: Any) -> list[str]:
        return to_str_list(value)

    @model_validator(mode="after")
    def _check_budget(self) -> "ClientImportRow":
        if (
            self.budget_min is not None
            and self.budget_max is not None
            and self.budget_min > self.budget_max
        ):
            raise ValueError("budget_min must not exceed budget_max")
        return self


def _fields(*definitions: tuple) -> tuple[FieldDefinition, ...]:
    return tuple(
        FieldDefinition(key=key, required=required, group=group, aliases=tuple(aliases))
        for key, required, group, aliases in definitions
    )


# Definiciones para el auto-mapeo de headers
PROPERTY_IMPORT_FIELDS: tuple[FieldDefinition, ...] = _fields(
    ("property_name", True, "basic", ["name", "title", "listing title", "property"]),
    ("property_type", False, "classification", ["type", "category"]),
    ("property_status", False, "classification", ["status", "listing status"]),
    ("transaction_type", False, "classification", ["transaction", "deal type", "listing type"]),
    ("address_street", False, "address", ["street", "address", "street address"]),
    ("address_city", False, "address", ["city", "town"]),
    ("address_state", False, "address", ["state", "region", "prefecture"]),
    ("address_zip", False, "address", ["zip", "zip code", "zipcode"]),
    ("municipality", False, "address", ["municipality", "dimos"]),
    ("area", False, "address", ["neighborhood", "neighbourhood", "district"]),
    ("postal_code", False, "address", ["postcode", "tk"]),
    ("price", False, "pricing", ["asking price", "list price", "amount"]),
    ("price_type", False, "pricing", ["pricing type"]),
    ("bedrooms", False, "details", ["beds", "bedroom count", "rooms"]),
    ("bathrooms", False, "details", ["baths", "bathroom count", "wc"]),
    ("square_feet", False, "details", ["sqft", "sq ft", "square footage"]),
    ("lot_size", False, "details", ["lot", "lot area"]),
    ("year_built", False, "details", ["built", "construction year"]),
    ("floor", False, "details", ["level", "floor number"]),
    ("floors_total", False, "details", ["total floors", "number of floors"]),
    ("size_net_sqm", False, "measurements", ["net size", "sqm", "size", "m2"]),
    ("size_gross_sqm", False, "measurements", ["gross size", "gross sqm"]),
    ("plot_size_sqm", False, "measurements", ["plot size", "plot sqm"]),
    ("heating_type", False, "building", ["heating"]),
    ("energy_cert_class", False, "building", ["energy class", "energy certificate", "epc"]),
    ("condition", False, "building", ["state of repair"]),
    ("renovated_year", False, "building", ["renovated", "renovation year"]),
    ("elevator", False, "building", ["lift", "has elevator"]),
    ("furnished", False, "building", ["furniture", "furnishing"]),
    ("building_permit_no", False, "legal", ["permit number", "building permit"]),
    ("building_permit_year", False, "legal", ["permit year"]),
    ("land_registry_kaek", False, "legal", ["kaek", "land registry"]),
    ("legalization_status", False, "legal", ["legalization", "legal status"]),
    ("inside_city_plan", False, "legal", ["city plan", "in city plan"]),
    ("build_coefficient", False, "land", ["building coefficient", "sd"]),
    ("coverage_ratio", False, "land", ["coverage"]),
    ("frontage_m", False, "land", ["frontage"]),
    ("etaireia_diaxeirisis", False, "management", ["management company"]),
    ("monthly_common_charges", False, "management", ["common charges", "koinoxrista", "hoa"]),
    ("available_from", False, "rental", ["available", "availability date"]),
    ("accepts_pets", False, "rental", ["pets", "pets allowed", "pet friendly"]),
    ("min_lease_months", False, "rental", ["minimum lease", "lease months"]),
    ("is_exclusive", False, "visibility", ["exclusive"]),
    ("portal_visibility", False, "visibility", ["visibility"]),
    ("address_privacy_level", False, "visibility", ["address privacy", "privacy"]),
    ("description", False, "other", ["details", "remarks", "notes"]),
    ("primary_email", False, "other", ["email", "contact email"]),
)

CLIENT_IMPORT_FIELDS: tuple[FieldDefinition, ...] = _fields(
    ("client_name", True, "basic", ["name", "client", "contact name"]),
    ("full_name", False, "basic", ["full name", "display name"]),
    ("primary_email", False, "contact", ["email", "e-mail", "email address"]),
    ("primary_phone", False, "contact", ["phone", "mobile", "telephone"]),
    ("client_type", False, "classification", ["type", "client category"]),
    ("client_status", False, "classification", ["status", "stage"]),
    ("person_type", False, "classification", ["entity type", "person"]),
    ("intent", False, "search", ["looking to", "goal", "interest"]),
    ("purpose", False, "search", ["property purpose", "use"]),
    ("timeline", False, "search", ["timeframe", "when"]),
    ("financing_type", False, "search", ["financing", "payment method"]),
    ("lead_source", False, "search", ["source", "origin", "channel"]),
    ("budget_min", False, "budget", ["min budget", "minimum budget", "price from"]),
    ("budget_max", False, "budget", ["max budget", "maximum budget", "budget", "price to"]),
    ("areas_of_interest", False, "search", ["areas", "locations", "preferred areas"]),
    ("notes", False, "other", ["comments", "remarks"]),
)
