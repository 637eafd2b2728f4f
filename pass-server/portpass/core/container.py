"""Dependency container wiring the store and its collaborators.

Build one container at process start, ``await container.startup()``, and pass
``container.store`` / ``container.reports`` to whatever needs them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from portpass.core.config import Settings, get_settings
from portpass.core.crypto import CredentialManager
from portpass.core.store import EntityStore
from portpass.core.time_utils import resolve_timezone
from portpass.infrastructure.database.session import build_engine, build_session_factory, init_db
from portpass.modules.passes.pricing import PassPricing
from portpass.modules.reports.service import ReportService
from portpass.modules.staff.seeder import ensure_default_admin

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    credentials: CredentialManager
    store: EntityStore
    reports: ReportService
    pricing: PassPricing

    @classmethod
    def build(cls, settings: Settings | None = None) -> "ApplicationContainer":
        settings = settings or get_settings()
        engine = build_engine(settings)
        session_factory = build_session_factory(engine)
        credentials = CredentialManager(rounds=settings.bcrypt_rounds)
        store = EntityStore(session_factory, credentials)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=session_factory,
            credentials=credentials,
            store=store,
            reports=ReportService(store, resolve_timezone(settings.report_timezone)),
            pricing=PassPricing(settings.pricing),
        )

    async def startup(self, *, create_tables: bool = True) -> None:
        """Prepare the schema and seed the default administrator."""
        if create_tables:
            await init_db(self.engine)
        await ensure_default_admin(self.store, self.settings.seed)
        logger.info("%s ready (%s)", self.settings.project_name, self.settings.environment)

    async def shutdown(self) -> None:
        await self.engine.dispose()


__all__ = ["ApplicationContainer"]
