"""Transaction domain specific exceptions."""

from portpass.core.exceptions import NotFoundError


class TransactionNotFoundError(NotFoundError):
    """Raised when a referenced transaction does not exist."""
