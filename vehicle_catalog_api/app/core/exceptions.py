"""
Error taxonomy of the vehicle catalog.

Every rule violation is raised as a subclass of ``VehicleError``.  Each
subclass carries a machine readable ``kind`` and the HTTP status the
API layer answers with, so routers never have to inspect messages.
"""

from enum import Enum
from typing import Optional

from fastapi import status


class ErrorKind(str, Enum):
    MISSING_FIELDS = "MissingFields"
    ID_CONFLICT = "IdConflict"
    INVALID_YEAR = "InvalidYear"
    MISSING_ID = "MissingId"
    ID_NOT_FOUND = "IdNotFound"
    NOT_FOUND = "NotFound"


class VehicleError(Exception):
    """Base class for all vehicle catalog errors."""

    kind: ErrorKind
    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Invalid vehicle request"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFieldsError(VehicleError):
    kind = ErrorKind.MISSING_FIELDS
    default_message = "Cannot create vehicle with missing values in request body"


class IdConflictError(VehicleError):
    kind = ErrorKind.ID_CONFLICT
    status_code = status.HTTP_409_CONFLICT
    default_message = "ID of Vehicle Already Exists"


class InvalidYearError(VehicleError):
    kind = ErrorKind.INVALID_YEAR
    default_message = "Vehicle year must be between 1950 and 2050"


class MissingIdError(VehicleError):
    kind = ErrorKind.MISSING_ID
    default_message = "Cannot change vehicle properties without ID"


class IdNotFoundError(VehicleError):
    kind = ErrorKind.ID_NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Cannot update non-existent vehicle"


class VehicleNotFoundError(VehicleError):
    """Raised by get and delete when no row matches the id."""

    kind = ErrorKind.NOT_FOUND
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Cannot get non-existent vehicle"
