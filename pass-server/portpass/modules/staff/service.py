"""Domain services for staff management."""

from __future__ import annotations

import logging
from typing import Any, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from portpass.core.crypto import CredentialManager
from portpass.core.exceptions import ValidationFailureError
from portpass.core.time_utils import advance, utcnow

from .exceptions import StaffAlreadyExistsError, StaffNotFoundError
from .models import UNSET, Staff, StaffCreateInput, StaffUpdateInput
from .repository import StaffRepository

logger = logging.getLogger(__name__)

_PROFILE_FIELDS = ("username", "full_name", "designation", "department", "is_admin", "is_active")


class StaffService:
    """Encapsulates core staff use cases.

    Password hashing is not done here: callers pass in a ready hash so that
    the expensive bcrypt work can happen before any write lock is taken.
    """

    def __init__(self, repository: StaffRepository) -> None:
        self._repository = repository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "StaffService":
        from portpass.infrastructure.database.repositories.staff_repository import SqlStaffRepository

        return cls(SqlStaffRepository(session))

    async def get_by_id(self, staff_id: str) -> Staff | None:
        return await self._repository.get_by_id(staff_id)

    async def get_by_username(self, username: str) -> Staff | None:
        return await self._repository.get_by_username(username)

    async def list_staff(self) -> Sequence[Staff]:
        return await self._repository.list_staff()

    async def count(self) -> int:
        return await self._repository.count()

    async def authenticate(self, username: str, password: str, credentials: CredentialManager) -> Staff | None:
        staff = await self._repository.get_by_username(username)
        if staff is None or not staff.is_active:
            return None
        if not await credentials.verify_async(password, staff.password_hash):
            return None
        return staff

    async def create_staff(self, payload: StaffCreateInput, *, password_hash: str) -> Staff:
        if not payload.username:
            raise ValidationFailureError("username must not be empty")
        existing = await self._repository.get_by_username(payload.username)
        if existing is not None:
            raise StaffAlreadyExistsError(f"username already exists: {payload.username}")

        staff = await self._repository.create_staff(
            username=payload.username,
            password_hash=password_hash,
            full_name=payload.full_name,
            designation=payload.designation,
            department=payload.department,
            is_admin=payload.is_admin,
            is_active=payload.is_active,
            created_at=utcnow(),
        )
        logger.info("Created staff %s (%s)", staff.username, staff.id)
        return staff

    async def update_staff(
        self,
        staff_id: str,
        payload: StaffUpdateInput,
        *,
        password_hash: str | None = None,
    ) -> Staff:
        current = await self._repository.get_by_id(staff_id)
        if current is None:
            raise StaffNotFoundError(staff_id)

        changes: dict[str, Any] = {}
        for name in _PROFILE_FIELDS:
            value = getattr(payload, name)
            if value is UNSET or value is None:
                continue
            changes[name] = value

        username = changes.get("username")
        if username is not None and username != current.username:
            if not username:
                raise ValidationFailureError("username must not be empty")
            if await self._repository.get_by_username(username) is not None:
                raise StaffAlreadyExistsError(f"username already exists: {username}")

        if password_hash is not None:
            changes["password_hash"] = password_hash

        staff = await self._repository.update_staff(
            staff_id,
            updated_at=advance(current.updated_at),
            **changes,
        )
        logger.info("Updated staff %s fields=%s", staff_id, sorted(changes))
        return staff

    async def delete_staff(self, staff_id: str) -> bool:
        removed = await self._repository.delete_staff(staff_id)
        if removed:
            logger.info("Deleted staff %s", staff_id)
        return removed
