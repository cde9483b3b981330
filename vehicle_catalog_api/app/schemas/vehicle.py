"""
Vehicle value type and the pydantic models exchanged via the API.

``Vehicle`` is the immutable value handed around by the store and the
service.  Being a frozen dataclass it compares equal on all four
fields and is hashable, which the listing code relies on for
deduplication.

The request models (``VehicleCreate``, ``VehicleUpdate``) declare every
field optional.  A missing field is not a schema error here: the
validation rules decide which absence is fatal and with which error
kind.  ``make`` and ``model`` are normalised on the way in by
stripping surrounding whitespace; a blank string counts as absent.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, Field, field_validator


@dataclass(frozen=True)
class Vehicle:
    id: int
    year: int
    make: str
    model: str


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class VehicleCreate(BaseModel):
    """Schema for creating a vehicle."""

    id: Optional[int] = Field(None, examples=[1])
    year: Optional[int] = Field(None, examples=[2012])
    make: Optional[str] = Field(None, examples=["Tesla"])
    model: Optional[str] = Field(None, examples=["S"])

    @field_validator("make", "model")
    @classmethod
    def normalise_text(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)

    def missing_fields(self) -> list[str]:
        """Names of required fields that were not supplied."""
        return [name for name in ("id", "year", "make", "model") if getattr(self, name) is None]


class VehicleUpdate(BaseModel):
    """Schema for updating a vehicle.

    ``id`` selects the row; ``year``, ``make`` and ``model`` are applied
    only when present.
    """

    id: Optional[int] = Field(None, examples=[1])
    year: Optional[int] = None
    make: Optional[str] = None
    model: Optional[str] = None

    @field_validator("make", "model")
    @classmethod
    def normalise_text(cls, v: Optional[str]) -> Optional[str]:
        return _blank_to_none(v)


class VehicleRead(BaseModel):
    """Schema for reading a vehicle from the API."""

    id: int
    year: int
    make: str
    model: str

    model_config = {
        "from_attributes": True,
    }


class ErrorRead(BaseModel):
    """Body returned for every rejected vehicle request."""

    detail: str
    kind: str
