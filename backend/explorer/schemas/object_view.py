"""Object view schemas: classified record fields and the assembled object view."""

from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field

FROZEN = {"frozen": True}


class SingleReference(BaseModel):
    kind: Literal["single_reference"] = "single_reference"
    name: str
    label: str
    target_id: str

    model_config = FROZEN


class ReferenceVector(BaseModel):
    kind: Literal["reference_vector"] = "reference_vector"
    name: str
    label: str
    target_ids: tuple[str, ...]

    model_config = FROZEN


class ScalarProperty(BaseModel):
    kind: Literal["scalar_property"] = "scalar_property"
    name: str
    label: str
    value: int | float | str

    model_config = FROZEN


class Suppressed(BaseModel):
    kind: Literal["suppressed"] = "suppressed"
    name: str

    model_config = FROZEN


class Unresolved(BaseModel):
    """Reference-like key whose value has no recognizable reference shape."""
    kind: Literal["unresolved"] = "unresolved"
    name: str
    label: str

    model_config = FROZEN


ReferenceField = Annotated[SingleReference | ReferenceVector, Field(discriminator="kind")]
ClassifiedField = SingleReference | ReferenceVector | ScalarProperty | Suppressed | Unresolved


class ObjectDescription(BaseModel):
    """Well-known fields shown in the description section."""
    contract_id: str | None = None
    eth_address: str | None = None
    eth_token_id: int | float | str | None = None

    model_config = FROZEN


class ObjectView(BaseModel):
    """Display-ready view of one ledger object. Built fresh per request."""
    object_id: str
    version: int | str | None = None
    type_label: str | None = None
    owner: str | None = None
    owner_hex: str | None = None
    title: str | None = None
    read_only: bool | None = None
    description: ObjectDescription = Field(default_factory=ObjectDescription)
    properties: tuple[ScalarProperty, ...] = Field(default_factory=tuple)
    references: tuple[ReferenceField, ...] = Field(default_factory=tuple)
    unresolved: tuple[Unresolved, ...] = Field(default_factory=tuple)
    display: Any = None

    model_config = FROZEN


class ObjectViewRequest(BaseModel):
    object_id: str = Field(..., min_length=1)
    version: int | str
    record: dict[str, Any]


class OwnerDecodeRequest(BaseModel):
    owner: Any = None


class OwnerDecodeRead(BaseModel):
    encoding: str
    owner: str | None = None
    owner_hex: str | None = None


class TypeNormalizeRequest(BaseModel):
    type_string: str


class TypeNormalizeRead(BaseModel):
    type_string: str
    label: str
