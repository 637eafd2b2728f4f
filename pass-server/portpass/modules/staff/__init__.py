"""Staff domain services and models."""

from .exceptions import StaffAlreadyExistsError, StaffNotFoundError
from .models import UNSET, Staff, StaffCreateInput, StaffUpdateInput
from .service import StaffService

__all__ = [
    "Staff",
    "StaffCreateInput",
    "StaffUpdateInput",
    "StaffService",
    "StaffAlreadyExistsError",
    "StaffNotFoundError",
    "UNSET",
]
