"""Repository protocol for passes."""

from __future__ import annotations

from datetime import date, datetime
from typing import Protocol, Sequence

from .models import Pass


class PassRepository(Protocol):
    """Persistence for issued passes. Passes are immutable once written."""

    async def pass_number_exists(self, pass_number: str) -> bool:
        ...

    async def create_pass(
        self,
        *,
        transaction_id: str,
        staff_id: str,
        customer_name: str,
        pass_type: str,
        id_number: str | None,
        plate_number: str | None,
        valid_date: date,
        pass_number: str,
        amount_cents: int,
        qr_code: str,
        created_at: datetime,
    ) -> Pass:
        ...

    async def list_by_transaction(self, transaction_id: str) -> Sequence[Pass]:
        ...

    async def list_recent(self, limit: int) -> Sequence[Pass]:
        ...

    async def list_created_between(self, start: datetime, end: datetime) -> Sequence[Pass]:
        ...
