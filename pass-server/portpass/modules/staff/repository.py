"""Repository protocol for staff accounts."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Protocol, Sequence

from .models import Staff


class StaffRepository(Protocol):
    """Abstract repository interface for staff persistence."""

    async def get_by_id(self, staff_id: str) -> Staff | None:
        ...

    async def get_by_username(self, username: str) -> Staff | None:
        ...

    async def list_staff(self) -> Sequence[Staff]:
        ...

    async def count(self) -> int:
        ...

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
        ...

    async def update_staff(self, staff_id: str, *, updated_at: datetime, **changes: Any) -> Staff:
        ...

    async def delete_staff(self, staff_id: str) -> bool:
        ...
