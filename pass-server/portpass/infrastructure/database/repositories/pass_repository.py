"""SQLAlchemy implementation of the pass repository."""

from __future__ import annotations

from datetime import date, datetime
from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from portpass.core.money import from_cents
from portpass.core.time_utils import from_storage, to_storage
from portpass.db.models import Pass as PassModel
from portpass.modules.passes.models import Pass
from portpass.modules.passes.repository import PassRepository


class SqlPassRepository(PassRepository):
    """Pass repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def pass_number_exists(self, pass_number: str) -> bool:
        stmt = select(PassModel.seq).where(PassModel.pass_number == pass_number)
        result = await self._session.execute(stmt)
        return result.first() is not None

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
        model = PassModel(
            transaction_id=transaction_id,
            staff_id=staff_id,
            customer_name=customer_name,
            pass_type=pass_type,
            id_number=id_number,
            plate_number=plate_number,
            valid_date=valid_date,
            pass_number=pass_number,
            amount_cents=amount_cents,
            qr_code=qr_code,
            created_at=to_storage(created_at),
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_domain(model)

    async def list_by_transaction(self, transaction_id: str) -> Sequence[Pass]:
        stmt = (
            select(PassModel)
            .where(PassModel.transaction_id == transaction_id)
            .order_by(PassModel.seq)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_recent(self, limit: int) -> Sequence[Pass]:
        stmt = (
            select(PassModel)
            .order_by(PassModel.created_at.desc(), PassModel.seq.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_created_between(self, start: datetime, end: datetime) -> Sequence[Pass]:
        stmt = (
            select(PassModel)
            .where(PassModel.created_at >= to_storage(start), PassModel.created_at < to_storage(end))
            .order_by(PassModel.created_at, PassModel.pass_number)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    @staticmethod
    def _to_domain(model: PassModel) -> Pass:
        return Pass(
            id=model.id,
            transaction_id=model.transaction_id,
            staff_id=model.staff_id,
            customer_name=model.customer_name,
            pass_type=model.pass_type,
            id_number=model.id_number,
            plate_number=model.plate_number,
            valid_date=model.valid_date,
            pass_number=model.pass_number,
            amount=from_cents(model.amount_cents),
            qr_code=model.qr_code,
            created_at=from_storage(model.created_at),
        )
