"""Transaction domain services and models."""

from .exceptions import TransactionNotFoundError
from .models import Transaction, TransactionCreateInput
from .service import TransactionService

__all__ = [
    "Transaction",
    "TransactionCreateInput",
    "TransactionNotFoundError",
    "TransactionService",
]
