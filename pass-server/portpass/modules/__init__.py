"""Domain modules and their public exports."""

from . import passes, reports, staff, transactions

__all__ = [
    "passes",
    "reports",
    "staff",
    "transactions",
]
