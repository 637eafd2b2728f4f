"""Repository protocol for transactions."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .models import Transaction


class TransactionRepository(Protocol):
    """Append-only persistence for payment transactions."""

    async def get_by_id(self, transaction_id: str) -> Transaction | None:
        ...

    async def exists(self, transaction_id: str) -> bool:
        ...

    async def create_transaction(
        self,
        *,
        payer_name: str,
        payer_email: str | None,
        payer_phone: str | None,
        total_amount_cents: int,
        slip_filename: str,
        created_at: datetime,
    ) -> Transaction:
        ...
