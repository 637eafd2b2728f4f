"""SQLAlchemy implementation of the transaction repository."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portpass.core.money import from_cents
from portpass.core.time_utils import from_storage, to_storage
from portpass.db.models import Transaction as TransactionModel
from portpass.modules.transactions.models import Transaction
from portpass.modules.transactions.repository import TransactionRepository


class SqlTransactionRepository(TransactionRepository):
    """Transaction repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, transaction_id: str) -> Transaction | None:
        stmt = select(TransactionModel).where(TransactionModel.id == transaction_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def exists(self, transaction_id: str) -> bool:
        stmt = select(TransactionModel.seq).where(TransactionModel.id == transaction_id)
        result = await self._session.execute(stmt)
        return result.first() is not None

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
        model = TransactionModel(
            payer_name=payer_name,
            payer_email=payer_email,
            payer_phone=payer_phone,
            total_amount_cents=total_amount_cents,
            slip_filename=slip_filename,
            created_at=to_storage(created_at),
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_domain(model)

    @staticmethod
    def _to_domain(model: TransactionModel) -> Transaction:
        return Transaction(
            id=model.id,
            payer_name=model.payer_name,
            payer_email=model.payer_email,
            payer_phone=model.payer_phone,
            total_amount=from_cents(model.total_amount_cents),
            slip_filename=model.slip_filename,
            created_at=from_storage(model.created_at),
        )
