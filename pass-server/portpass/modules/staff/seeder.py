"""Bootstrap of the default administrator account."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from portpass.core.config import SeedSettings

from .models import Staff, StaffCreateInput

if TYPE_CHECKING:
    from portpass.core.store import EntityStore

logger = logging.getLogger(__name__)


def default_admin_input(settings: SeedSettings) -> StaffCreateInput:
    return StaffCreateInput(
        username=settings.username,
        password=settings.password,
        full_name=settings.full_name,
        designation=settings.designation,
        department=settings.department,
        is_admin=True,
        is_active=True,
    )


async def ensure_default_admin(store: "EntityStore", settings: SeedSettings) -> Staff | None:
    """Create the default administrator when the staff table is empty.

    Safe to run on every start: once any staff row exists nothing is written.
    Returns the created account, or ``None`` when seeding was skipped.
    """
    if not settings.enabled:
        logger.debug("Default admin seeding disabled")
        return None

    admin = await store.seed_staff(default_admin_input(settings))
    if admin is None:
        logger.info("Staff accounts already present, default admin not created")
        return None

    logger.warning(
        "Created default administrator %r; change its password after first login",
        admin.username,
    )
    return admin
