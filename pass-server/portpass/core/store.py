"""Entity store: the single entry point for reading and writing records.

One instance is built per process by the application container and handed to
request handlers explicitly. Every operation runs in its own database
transaction and either commits fully or leaves no trace. Writes are
serialized through one lock; reads use independent sessions and never wait
on it. Password hashing is finished before the lock is requested.
"""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from collections.abc import AsyncIterator, Sequence
from contextlib import asynccontextmanager
from datetime import datetime

from sqlalchemy.exc import DBAPIError, IntegrityError, InterfaceError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from portpass.core.crypto import CredentialManager
from portpass.core.exceptions import (
    DuplicateKeyError,
    NotFoundError,
    StorageUnavailableError,
    ValidationFailureError,
)
from portpass.modules.passes import Pass, PassCreateInput, PassNumberTakenError, PassService
from portpass.modules.passes.service import pass_amount_cents, validate_pass_input
from portpass.modules.staff import Staff, StaffCreateInput, StaffService, StaffUpdateInput
from portpass.modules.transactions import Transaction, TransactionCreateInput, TransactionService

logger = logging.getLogger(__name__)


class EntityStore:
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        credentials: CredentialManager,
    ) -> None:
        self._session_factory = session_factory
        self._credentials = credentials
        self._write_lock = asyncio.Lock()

    @property
    def credentials(self) -> CredentialManager:
        return self._credentials

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self._session_factory() as session:
                try:
                    yield session
                    await session.commit()
                except BaseException:
                    await session.rollback()
                    raise
        except IntegrityError as exc:
            message = str(exc.orig)
            if "FOREIGN KEY" in message.upper():
                raise NotFoundError(f"referenced record does not exist: {message}") from exc
            raise DuplicateKeyError(message) from exc
        except (OperationalError, InterfaceError) as exc:
            logger.warning("Storage unavailable: %s", exc)
            raise StorageUnavailableError(str(exc)) from exc
        except DBAPIError as exc:
            if exc.connection_invalidated:
                logger.warning("Storage connection lost: %s", exc)
                raise StorageUnavailableError(str(exc)) from exc
            raise

    @asynccontextmanager
    async def _writing(self) -> AsyncIterator[AsyncSession]:
        async with self._write_lock:
            async with self._session() as session:
                yield session

    # Transactions

    async def create_transaction(self, payload: TransactionCreateInput) -> Transaction:
        async with self._writing() as session:
            return await TransactionService.with_session(session).create_transaction(payload)

    async def get_transaction_by_id(self, transaction_id: str) -> Transaction | None:
        async with self._session() as session:
            return await TransactionService.with_session(session).get_by_id(transaction_id)

    # Passes

    async def create_pass(self, payload: PassCreateInput) -> Pass:
        async with self._writing() as session:
            return await PassService.with_session(session).create_pass(payload)

    async def issue_passes(
        self,
        transaction: TransactionCreateInput,
        passes: Sequence[PassCreateInput],
    ) -> tuple[Transaction, list[Pass]]:
        """Record a transaction and all of its passes in one database transaction.

        The ``transaction_id`` of each pass input is ignored and replaced with
        the id of the new transaction. When ``transaction.total_amount`` is
        omitted the total is the exact sum of the pass amounts.
        """
        if not passes:
            raise ValidationFailureError("at least one pass is required")

        seen: set[str] = set()
        total_cents = 0
        for payload in passes:
            validate_pass_input(payload)
            if payload.pass_number in seen:
                raise PassNumberTakenError(f"pass number repeated in batch: {payload.pass_number}")
            seen.add(payload.pass_number)
            total_cents += pass_amount_cents(payload)

        async with self._writing() as session:
            created = await TransactionService.with_session(session).create_transaction(
                transaction,
                total_amount_cents=total_cents if transaction.total_amount is None else None,
            )
            service = PassService.with_session(session)
            issued = [
                await service.create_pass(dataclasses.replace(payload, transaction_id=created.id))
                for payload in passes
            ]
        return created, issued

    async def get_passes_by_transaction(self, transaction_id: str) -> list[Pass]:
        async with self._session() as session:
            return list(await PassService.with_session(session).list_by_transaction(transaction_id))

    async def get_recent_passes(self, limit: int) -> list[Pass]:
        async with self._session() as session:
            return list(await PassService.with_session(session).list_recent(limit))

    async def list_passes_created_between(self, start: datetime, end: datetime) -> list[Pass]:
        async with self._session() as session:
            return list(await PassService.with_session(session).list_created_between(start, end))

    # Staff

    async def create_staff(self, payload: StaffCreateInput) -> Staff:
        password_hash = await self._credentials.hash_async(payload.password)
        async with self._writing() as session:
            return await StaffService.with_session(session).create_staff(payload, password_hash=password_hash)

    async def seed_staff(self, payload: StaffCreateInput) -> Staff | None:
        """Create ``payload`` only if no staff exist yet; returns ``None`` otherwise."""
        password_hash = await self._credentials.hash_async(payload.password)
        try:
            async with self._writing() as session:
                service = StaffService.with_session(session)
                if await service.count() > 0:
                    return None
                return await service.create_staff(payload, password_hash=password_hash)
        except DuplicateKeyError:
            # another process seeded the same username between our check and commit
            logger.info("Seed account %r created concurrently elsewhere", payload.username)
            return None

    async def get_staff_by_id(self, staff_id: str) -> Staff | None:
        async with self._session() as session:
            return await StaffService.with_session(session).get_by_id(staff_id)

    async def get_staff_by_username(self, username: str) -> Staff | None:
        async with self._session() as session:
            return await StaffService.with_session(session).get_by_username(username)

    async def get_all_staff(self) -> list[Staff]:
        async with self._session() as session:
            return list(await StaffService.with_session(session).list_staff())

    async def count_staff(self) -> int:
        async with self._session() as session:
            return await StaffService.with_session(session).count()

    async def update_staff(self, staff_id: str, payload: StaffUpdateInput) -> Staff:
        password_hash = None
        if payload.has_password():
            password_hash = await self._credentials.hash_async(payload.password)  # type: ignore[arg-type]
        async with self._writing() as session:
            return await StaffService.with_session(session).update_staff(
                staff_id, payload, password_hash=password_hash
            )

    async def delete_staff(self, staff_id: str) -> bool:
        async with self._writing() as session:
            return await StaffService.with_session(session).delete_staff(staff_id)

    async def authenticate(self, username: str, password: str) -> Staff | None:
        async with self._session() as session:
            return await StaffService.with_session(session).authenticate(username, password, self._credentials)


__all__ = ["EntityStore"]
