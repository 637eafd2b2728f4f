"""Domain services for pass issuance."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from portpass.core.exceptions import ValidationFailureError
from portpass.core.money import to_cents
from portpass.core.time_utils import utcnow
from portpass.modules.transactions.exceptions import TransactionNotFoundError
from portpass.modules.transactions.repository import TransactionRepository

from .exceptions import PassNumberTakenError
from .models import Pass, PassCreateInput, PassType
from .repository import PassRepository

logger = logging.getLogger(__name__)


def _coerce_pass_type(value: PassType | str) -> PassType:
    try:
        return PassType(value)
    except ValueError:
        raise ValidationFailureError(f"unknown pass type: {value!r}") from None


def _coerce_date(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise ValidationFailureError(f"valid_date is not an ISO date: {value!r}") from exc


def pass_amount_cents(payload: PassCreateInput) -> int:
    cents = to_cents(payload.amount, field="amount")
    if cents < 0:
        raise ValidationFailureError("amount must not be negative")
    return cents


def validate_pass_input(payload: PassCreateInput) -> PassType:
    """Check the invariants a pass must satisfy before any database work."""
    pass_type = _coerce_pass_type(payload.pass_type)
    if not payload.customer_name or not payload.customer_name.strip():
        raise ValidationFailureError("customer_name must not be empty")
    if not payload.pass_number or not payload.pass_number.strip():
        raise ValidationFailureError("pass_number must not be empty")
    if pass_type.requires_id_number and not payload.id_number:
        raise ValidationFailureError("id_number is required for a daily pass")
    if pass_type.requires_plate_number and not payload.plate_number:
        raise ValidationFailureError(f"plate_number is required for a {pass_type.value} pass")
    pass_amount_cents(payload)
    _coerce_date(payload.valid_date)
    return pass_type


@dataclass(slots=True)
class PassService:
    repository: PassRepository
    transactions: TransactionRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "PassService":
        from portpass.infrastructure.database.repositories.pass_repository import SqlPassRepository
        from portpass.infrastructure.database.repositories.transaction_repository import SqlTransactionRepository

        return cls(SqlPassRepository(session), SqlTransactionRepository(session))

    async def create_pass(self, payload: PassCreateInput) -> Pass:
        pass_type = validate_pass_input(payload)
        valid_date = _coerce_date(payload.valid_date)

        if not await self.transactions.exists(payload.transaction_id):
            raise TransactionNotFoundError(payload.transaction_id)
        if await self.repository.pass_number_exists(payload.pass_number):
            raise PassNumberTakenError(f"pass number already issued: {payload.pass_number}")

        issued = await self.repository.create_pass(
            transaction_id=payload.transaction_id,
            staff_id=payload.staff_id,
            customer_name=payload.customer_name,
            pass_type=pass_type.value,
            id_number=payload.id_number or None,
            plate_number=payload.plate_number or None,
            valid_date=valid_date,
            pass_number=payload.pass_number,
            amount_cents=pass_amount_cents(payload),
            qr_code=payload.qr_code,
            created_at=utcnow(),
        )
        logger.info("Issued pass %s (%s) on transaction %s", issued.pass_number, issued.id, issued.transaction_id)
        return issued

    async def list_by_transaction(self, transaction_id: str) -> Sequence[Pass]:
        return await self.repository.list_by_transaction(transaction_id)

    async def list_recent(self, limit: int) -> Sequence[Pass]:
        if limit < 0:
            raise ValidationFailureError("limit must not be negative")
        if limit == 0:
            return []
        return await self.repository.list_recent(limit)

    async def list_created_between(self, start: datetime, end: datetime) -> Sequence[Pass]:
        return await self.repository.list_created_between(start, end)
