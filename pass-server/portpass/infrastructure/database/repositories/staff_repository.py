"""SQLAlchemy implementation of the staff repository."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Sequence

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from portpass.core.time_utils import from_storage, to_storage
from portpass.db.models import Staff as StaffModel
from portpass.modules.staff.exceptions import StaffNotFoundError
from portpass.modules.staff.models import Staff
from portpass.modules.staff.repository import StaffRepository


class SqlStaffRepository(StaffRepository):
    """Staff repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, staff_id: str) -> Staff | None:
        stmt = select(StaffModel).where(StaffModel.id == staff_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model)

    async def get_by_username(self, username: str) -> Staff | None:
        stmt = select(StaffModel).where(StaffModel.username == username)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model)

    async def list_staff(self) -> Sequence[Staff]:
        stmt = select(StaffModel).order_by(StaffModel.seq)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(StaffModel)
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def create_staff(
        self,
        *,
        username: str,
        password_hash: str,
        full_name: str,
        designation: str,
        department: str,
        is_admin: bool,
        is_active: bool,
        created_at: datetime,
    ) -> Staff:
        stored_at = to_storage(created_at)
        model = StaffModel(
            username=username,
            password_hash=password_hash,
            full_name=full_name,
            designation=designation,
            department=department,
            is_admin=is_admin,
            is_active=is_active,
            created_at=stored_at,
            updated_at=stored_at,
        )
        self._session.add(model)
        await self._session.flush()
        return self._to_domain(model)

    async def update_staff(self, staff_id: str, *, updated_at: datetime, **changes: Any) -> Staff:
        stmt = select(StaffModel).where(StaffModel.id == staff_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if model is None:
            raise StaffNotFoundError(staff_id)

        for name, value in changes.items():
            setattr(model, name, value)
        model.updated_at = to_storage(updated_at)

        await self._session.flush()
        return self._to_domain(model)

    async def delete_staff(self, staff_id: str) -> bool:
        stmt = delete(StaffModel).where(StaffModel.id == staff_id)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    @staticmethod
    def _to_domain(model: StaffModel | None) -> Staff | None:
        if model is None:
            return None
        return Staff(
            id=model.id,
            username=model.username,
            password_hash=model.password_hash,
            full_name=model.full_name,
            designation=model.designation,
            department=model.department,
            is_admin=bool(model.is_admin),
            is_active=bool(model.is_active),
            created_at=from_storage(model.created_at),
            updated_at=from_storage(model.updated_at),
        )
