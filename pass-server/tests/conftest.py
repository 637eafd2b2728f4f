# tests/conftest.py
"""Shared fixtures: a fresh SQLite file database and container per test."""

from datetime import date
from decimal import Decimal

import pytest
import pytest_asyncio

from portpass.core.config import (
    DatabaseSettings,
    ReportSettings,
    SecuritySettings,
    SeedSettings,
    Settings,
)
from portpass.core.container import ApplicationContainer
from portpass.modules.passes import PassCreateInput
from portpass.modules.staff import StaffCreateInput
from portpass.modules.transactions import TransactionCreateInput


def build_settings(db_path, *, seed_enabled=False):
    return Settings(
        environment="test",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{db_path}"),
        security=SecuritySettings(bcrypt_rounds=4),
        reports=ReportSettings(timezone="UTC"),
        seed=SeedSettings(enabled=seed_enabled),
    )


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "portpass.db"


@pytest.fixture
def settings(db_path):
    return build_settings(db_path)


@pytest_asyncio.fixture
async def container(settings):
    app = ApplicationContainer.build(settings)
    await app.startup()
    try:
        yield app
    finally:
        await app.shutdown()


@pytest.fixture
def store(container):
    return container.store


def make_transaction_input(**overrides):
    values = dict(
        payer_name="Ahmed Ali",
        payer_email="ahmed@example.com",
        payer_phone="7771234",
        total_amount=Decimal("6.11"),
        slip_filename="slip-001.jpg",
    )
    values.update(overrides)
    return TransactionCreateInput(**values)


def make_pass_input(transaction_id, pass_number, **overrides):
    values = dict(
        transaction_id=transaction_id,
        staff_id="staff-1",
        customer_name="Mohamed Hassan",
        pass_type="daily",
        id_number="A123456",
        plate_number=None,
        valid_date=date(2024, 1, 15),
        pass_number=pass_number,
        amount=Decimal("6.11"),
        qr_code=f"QR:{pass_number}",
    )
    values.update(overrides)
    return PassCreateInput(**values)


def make_staff_input(username="officer", **overrides):
    values = dict(
        username=username,
        password="s3cret-pass",
        full_name="Aishath Naseer",
        designation="Gate Officer",
        department="Operations",
    )
    values.update(overrides)
    return StaffCreateInput(**values)
