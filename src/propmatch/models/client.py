"""
Modelo de Cliente para matching

Define los datos del cliente que usa el calculador: presupuesto,
intención, zonas de interés y preferencias estructuradas.
"""

from typing import Any, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from propmatch.models.coercion import (
    to_bool,
    to_dict,
    to_int,
    to_number,
    to_str_list,
    to_text,
    to_token,
)


class ClientPropertyPreferences(BaseModel):
    """
    Preferencias guardadas en el JSON `property_preferences` del cliente.

    Los requisitos (requires_*) y los mínimos/máximos se evalúan en el
    calculador; un campo ausente significa "sin preferencia".
    """

    model_config = ConfigDict(extra="ignore", from_attributes=True)

    # Ambientes
    bedrooms_min: Optional[int] = None
    bedrooms_max: Optional[int] = None
    bathrooms_min: Optional[int] = None
    bathrooms_max: Optional[int] = None

    # Superficie
    size_min_sqm: Optional[float] = None
    size_max_sqm: Optional[float] = None

    # Piso
    floor_min: Optional[float] = None
    floor_max: Optional[float] = None
    ground_floor_only: bool = False

    # Requisitos hard
    requires_elevator: bool = False
    requires_parking: bool = False
    requires_pet_friendly: bool = False

    # Preferencias soft
    furnished_preference: Optional[str] = Field(None, description="NO, PARTIALLY, FULLY o ANY")
    heating_preferences: list[str] = Field(default_factory=list)
    energy_class_min: Optional[str] = None
    condition_preferences: list[str] = Field(default_factory=list)

    # Amenities
    amenities_required: list[str] = Field(default_factory=list)
    amenities_preferred: list[str] = Field(default_factory=list)

    @field_validator(
        "bedrooms_min", "bedrooms_max", "bathrooms_min", "bathrooms_max", mode="before"
    )
    @classmethod
    def _coerce_int(cls, value: Any) -> Optional[int]:
        return to_int(value)

    @field_validator(
        "size_min_sqm", "size_max_sqm", "floor_min", "floor_max", mode="before"
    )
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[float]:
        return to_number(value)

    @field_validator(
        "ground_floor_only",
        "requires_elevator",
        "requires_parking",
        "requires_pet_friendly",
        mode="before",
    )
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        return bool(to_bool(value))

    @field_validator("furnished_preference", "energy_class_min", mode="before")
    @classmethod
    def _coerce_token(cls, value: Any) -> Optional[str]:
        return to_token(value)

    @field_validator("heating_preferences", "condition_preferences", mode="before")
    @classmethod
    def _coerce_token_list(cls, value: Any) -> list[str]:
        return [item.upper() for item in to_str_list(value)]

    @field_validator("amenities_required", "amenities_preferred", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> list[str]:
        return to_str_list(value)


class ClientForMatching(BaseModel):
    """Datos del cliente necesarios para calcular matches."""

    model_config = ConfigDict(extra="ignore", from_attributes=True, populate_by_name=True)

    # Identificadores
    id: Optional[str] = Field(None, description="ID del cliente en el CRM")
    client_name: Optional[str] = None
    full_name: Optional[str] = None

    # Intención de búsqueda
    intent: Optional[str] = Field(None, description="BUY, RENT, SELL, LEASE o INVEST")
    purpose: Optional[str] = Field(None, description="RESIDENTIAL, COMMERCIAL, LAND...")

    # Presupuesto
    budget_min: Optional[float] = None
    budget_max: Optional[float] = None

    # Ubicación
    areas_of_interest: list[str] = Field(
        default_factory=list, description="Zonas aceptables (lista, JSON o CSV)"
    )

    property_preferences: ClientPropertyPreferences = Field(
        default_factory=ClientPropertyPreferences
    )

    # Estado / asignación
    client_status: Optional[str] = None
    assigned_to: Optional[str] = None
    organization_id: Optional[str] = Field(
        None, validation_alias=AliasChoices("organization_id", "organizationId")
    )

    @field_validator(
        "id", "client_name", "full_name", "assigned_to", "organization_id", mode="before"
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return to_text(value)

    @field_validator("intent", "purpose", "client_status", mode="before")
    @classmethod
    def _coerce_token(cls, value: Any) -> Optional[str]:
        return to_token(value)

    @field_validator("budget_min", "budget_max", mode="before")
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[float]:
        return to_number(value)

    @field_validator("areas_of_interest", mode="before")
    @classmethod
    def _coerce_areas(cls, value: Any) -> list[str]:
        return to_str_list(value)

    @field_validator("property_preferences", mode="before")
    @classmethod
    def _coerce_preferences(cls, value: Any) -> Any:
        if isinstance(value, ClientPropertyPreferences):
            return value
        return to_dict(value) or {}

    @property
    def display_name(self) -> str:
        return self.full_name or self.client_name or (self.id or "")
