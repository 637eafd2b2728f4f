# tests/test_seeder.py
"""Tests for the default administrator bootstrap."""

import pytest

from conftest import build_settings, make_staff_input
from portpass.core.config import SeedSettings
from portpass.core.container import ApplicationContainer
from portpass.modules.staff.seeder import ensure_default_admin


class TestEnsureDefaultAdmin:
    @pytest.mark.asyncio
    async def test_seeds_admin_into_empty_store(self, store):
        admin = await ensure_default_admin(store, SeedSettings())

        assert admin is not None
        assert admin.username == "admin"
        assert admin.is_admin is True
        assert admin.is_active is True
        assert admin.full_name == "System Administrator"
        assert admin.designation == "Port Administrator"
        assert admin.department == "Administration"
        assert store.credentials.verify("admin123", admin.password_hash)

    @pytest.mark.asyncio
    async def test_second_run_is_a_no_op(self, store):
        await ensure_default_admin(store, SeedSettings())
        assert await ensure_default_admin(store, SeedSettings()) is None
        assert await store.count_staff() == 1

    @pytest.mark.asyncio
    async def test_existing_staff_prevents_seeding(self, store):
        await store.create_staff(make_staff_input())
        assert await ensure_default_admin(store, SeedSettings()) is None
        assert await store.get_staff_by_username("admin") is None

    @pytest.mark.asyncio
    async def test_disabled(self, store):
        assert await ensure_default_admin(store, SeedSettings(enabled=False)) is None
        assert await store.count_staff() == 0

    @pytest.mark.asyncio
    async def test_custom_credentials(self, store):
        admin = await ensure_default_admin(store, SeedSettings(username="harbour", password="changeme"))
        assert admin.username == "harbour"
        assert await store.authenticate("harbour", "changeme") == admin


class TestStartupSeeding:
    @pytest.mark.asyncio
    async def test_restart_does_not_duplicate_admin(self, db_path):
        settings = build_settings(db_path, seed_enabled=True)

        for _ in range(3):
            app = ApplicationContainer.build(settings)
            await app.startup()
            try:
                staff = await app.store.get_all_staff()
            finally:
                await app.shutdown()

        assert [s.username for s in staff] == ["admin"]
