"""Error taxonomy shared by every store operation."""


class StoreError(Exception):
    """Base class for entity store errors."""

    retryable = False


class NotFoundError(StoreError):
    """Raised when a referenced entity does not exist."""


class DuplicateKeyError(StoreError):
    """Raised when a unique key (username, pass number) is already taken."""


class ValidationFailureError(StoreError):
    """Raised when structurally invalid input reaches the store."""


class StorageUnavailableError(StoreError):
    """Raised when the backing database cannot be reached; safe to retry with backoff."""

    retryable = True


__all__ = [
    "StoreError",
    "NotFoundError",
    "DuplicateKeyError",
    "ValidationFailureError",
    "StorageUnavailableError",
]
