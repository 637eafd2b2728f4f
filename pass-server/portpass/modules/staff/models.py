"""Domain models for staff accounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(slots=True, frozen=True)
class Staff:
    id: str
    username: str
    full_name: str
    designation: str
    department: str
    is_admin: bool
    is_active: bool
    created_at: datetime
    updated_at: datetime
    password_hash: str = field(repr=False)


@dataclass(slots=True)
class StaffCreateInput:
    username: str
    password: str = field(repr=False)
    full_name: str
    designation: str
    department: str
    is_admin: bool = False
    is_active: bool = True


# Sentinel used to differentiate between "not provided" and explicit None.
UNSET = object()


@dataclass(slots=True)
class StaffUpdateInput:
    username: Optional[str] | object = UNSET
    password: Optional[str] | object = field(default=UNSET, repr=False)
    full_name: Optional[str] | object = UNSET
    designation: Optional[str] | object = UNSET
    department: Optional[str] | object = UNSET
    is_admin: Optional[bool] | object = UNSET
    is_active: Optional[bool] | object = UNSET

    def has_password(self) -> bool:
        return self.password is not UNSET and self.password is not None
