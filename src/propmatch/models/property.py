"""
Modelo de Propiedad para matching

Subconjunto del registro de propiedades (MLS) que participa en el
cálculo de compatibilidad: precio, ubicación, ambientes, superficie
y características.
"""

from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from propmatch.models.coercion import (
    parse_json,
    to_bool,
    to_int,
    to_number,
    to_str_list,
    to_text,
    to_token,
)


class PropertyForMatching(BaseModel):
    """Datos de la propiedad necesarios para calcular matches."""

    model_config = ConfigDict(extra="ignore", from_attributes=True, populate_by_name=True)

    # Identificación
    id: Optional[str] = Field(None, description="ID de la propiedad")
    property_name: Optional[str] = None

    # Clasificación
    price: Optional[float] = None
    property_type: Optional[str] = None
    transaction_type: Optional[str] = None
    property_status: Optional[str] = None

    # Ubicación
    area: Optional[str] = None
    address_city: Optional[str] = None
    address_state: Optional[str] = None
    municipality: Optional[str] = None

    # Ambientes
    bedrooms: Optional[int] = None
    bathrooms: Optional[float] = None

    # Superficie
    size_net_sqm: Optional[float] = None
    size_gross_sqm: Optional[float] = None
    square_feet: Optional[float] = None

    # Características
    floor: Optional[str] = Field(None, description="'3', 'Ground', 'Ισόγειο', 'Penthouse'...")
    elevator: Optional[bool] = None
    accepts_pets: Optional[bool] = None
    furnished: Optional[str] = None
    heating_type: Optional[str] = None
    energy_cert_class: Optional[str] = None
    condition: Optional[str] = None

    # Amenities: {"pool": true, "gym": false} o ["pool", "gym"]
    amenities: Optional[Union[dict[str, bool], list[str]]] = None

    # Meta
    assigned_to: Optional[str] = None
    organization_id: Optional[str] = Field(
        None, validation_alias=AliasChoices("organization_id", "organizationId")
    )
    image_url: Optional[str] = Field(
        None, validation_alias=AliasChoices("image_url", "imageUrl")
    )

    @field_validator(
        "id",
        "property_name",
        "area",
        "address_city",
        "address_state",
        "municipality",
        "floor",
        "assigned_to",
        "organization_id",
        "image_url",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        return to_text(value)

    @field_validator(
        "property_type",
        "transaction_type",
        "property_status",
        "furnished",
        "heating_type",
        "energy_cert_class",
        "condition",
        mode="before",
    )
    @classmethod
    def _coerce_token(cls, value: Any) -> Optional[str]:
        return to_token(value)

    @field_validator(
        "price", "bathrooms", "size_net_sqm", "size_gross_sqm", "square_feet", mode="before"
    )
    @classmethod
    def _coerce_number(cls, value: Any) -> Optional[float]:
        return to_number(value)

    @field_validator("bedrooms", mode="before")
    @classmethod
    def _coerce_int(cls, value: Any) -> Optional[int]:
        return to_int(value)

    @field_validator("elevator", "accepts_pets", mode="before")
    @classmethod
    def _coerce_bool(cls, value: Any) -> Optional[bool]:
        return to_bool(value)

    @field_validator("amenities", mode="before")
    @classmethod
    def _coerce_amenities(cls, value: Any) -> Any:
        parsed = parse_json(value)
        if isinstance(parsed, dict):
            return {str(key): to_bool(flag) is True for key, flag in parsed.items()}
        if isinstance(parsed, (list, tuple, set, str)):
            return to_str_list(parsed)
        return None
