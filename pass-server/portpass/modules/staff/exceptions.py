"""Staff domain specific exceptions."""

from portpass.core.exceptions import DuplicateKeyError, NotFoundError


class StaffAlreadyExistsError(DuplicateKeyError):
    """Raised when attempting to create a staff account with a duplicate username."""


class StaffNotFoundError(NotFoundError):
    """Raised when the requested staff account cannot be found."""
