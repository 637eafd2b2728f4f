"""Domain services for payment transactions."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from portpass.core.exceptions import ValidationFailureError
from portpass.core.money import MAX_CENTS, to_cents
from portpass.core.time_utils import utcnow

from .models import Transaction, TransactionCreateInput
from .repository import TransactionRepository

logger = logging.getLogger(__name__)


class TransactionService:
    """Records payment transactions. Entries are never updated or removed."""

    def __init__(self, repository: TransactionRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "TransactionService":
        from portpass.infrastructure.database.repositories.transaction_repository import SqlTransactionRepository

        return cls(SqlTransactionRepository(session))

    async def get_by_id(self, transaction_id: str) -> Transaction | None:
        return await self._repository.get_by_id(transaction_id)

    async def exists(self, transaction_id: str) -> bool:
        return await self._repository.exists(transaction_id)

    async def create_transaction(
        self,
        payload: TransactionCreateInput,
        *,
        total_amount_cents: int | None = None,
    ) -> Transaction:
        if not payload.payer_name or not payload.payer_name.strip():
            raise ValidationFailureError("payer_name must not be empty")
        if total_amount_cents is None:
            if payload.total_amount is None:
                raise ValidationFailureError("total_amount is required")
            total_amount_cents = to_cents(payload.total_amount, field="total_amount")
        if total_amount_cents < 0:
            raise ValidationFailureError("total_amount must not be negative")
        if total_amount_cents > MAX_CENTS:
            raise ValidationFailureError("total_amount is out of range")

        transaction = await self._repository.create_transaction(
            payer_name=payload.payer_name,
            payer_email=payload.payer_email or None,
            payer_phone=payload.payer_phone or None,
            total_amount_cents=total_amount_cents,
            slip_filename=payload.slip_filename,
            created_at=utcnow(),
        )
        logger.info("Recorded transaction %s", transaction.id)
        return transaction
