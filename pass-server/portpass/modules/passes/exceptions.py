"""Pass domain specific exceptions."""

from portpass.core.exceptions import DuplicateKeyError


class PassNumberTakenError(DuplicateKeyError):
    """Raised when a pass number has already been issued."""
