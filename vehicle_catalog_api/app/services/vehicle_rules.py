"""
Validation rules for vehicle mutations.

Pure functions, no I/O: the caller looks up whatever the rule needs
(usually whether the id already exists) and passes the answer in.
Each validator returns ``None`` when the request is acceptable and
raises the matching ``VehicleError`` subclass otherwise.

The check order inside ``validate_create`` and ``validate_update`` is
part of the contract: the most fundamental problem is reported first.
"""

from typing import Optional

from vehicle_catalog_api.app.core.exceptions import (
    IdConflictError,
    IdNotFoundError,
    InvalidYearError,
    MissingFieldsError,
    MissingIdError,
    VehicleNotFoundError,
)
from vehicle_catalog_api.app.schemas.vehicle import VehicleCreate, VehicleUpdate

MIN_YEAR = 1950
MAX_YEAR = 2050


def validate_year(year: int) -> bool:
    """Return ``True`` if ``year`` lies within ``MIN_YEAR``..``MAX_YEAR`` inclusive."""
    return MIN_YEAR <= year <= MAX_YEAR


def validate_create(data: VehicleCreate, id_exists: bool) -> None:
    """Check a create request.

    Missing fields win over an id conflict, which wins over an invalid
    year.
    """
    if data.missing_fields():
        raise MissingFieldsError()
    if id_exists:
        raise IdConflictError()
    if not validate_year(data.year):
        raise InvalidYearError()


def validate_update(data: VehicleUpdate, id_exists: bool) -> None:
    """Check an update request.

    Only fields that are present are validated; of those only ``year``
    has a rule.
    """
    if data.id is None:
        raise MissingIdError()
    if not id_exists:
        raise IdNotFoundError()
    if data.year is not None and not validate_year(data.year):
        raise InvalidYearError()


def validate_deletion(delete_count: int) -> None:
    if delete_count <= 0:
        raise VehicleNotFoundError("Cannot delete non-existent vehicle")


def validate_fetch(found: bool, message: Optional[str] = None) -> None:
    if not found:
        raise VehicleNotFoundError(message)
