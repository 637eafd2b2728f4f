# tests/test_passes.py
"""Tests for pass issuance and listing."""

from datetime import date
from decimal import Decimal

import pytest

from conftest import make_pass_input, make_transaction_input
from portpass.core.exceptions import DuplicateKeyError, NotFoundError, ValidationFailureError
from portpass.modules.passes import PassNumberTakenError, PassType, pass_type_label
from portpass.modules.transactions import TransactionNotFoundError


class TestCreatePass:
    @pytest.mark.asyncio
    async def test_pass_is_stored(self, store):
        tx = await store.create_transaction(make_transaction_input())
        issued = await store.create_pass(make_pass_input(tx.id, "DP-0001"))

        assert issued.transaction_id == tx.id
        assert issued.pass_type == "daily"
        assert issued.amount == Decimal("6.11")
        assert issued.valid_date == date(2024, 1, 15)
        assert issued.qr_code == "QR:DP-0001"
        assert await store.get_passes_by_transaction(tx.id) == [issued]

    @pytest.mark.asyncio
    async def test_unknown_transaction_is_not_found(self, store):
        with pytest.raises(NotFoundError) as excinfo:
            await store.create_pass(make_pass_input("no-such-transaction", "DP-0001"))
        assert isinstance(excinfo.value, TransactionNotFoundError)
        assert await store.get_recent_passes(10) == []

    @pytest.mark.asyncio
    async def test_duplicate_pass_number(self, store):
        tx = await store.create_transaction(make_transaction_input())
        await store.create_pass(make_pass_input(tx.id, "DP-0001"))

        with pytest.raises(DuplicateKeyError) as excinfo:
            await store.create_pass(make_pass_input(tx.id, "DP-0001", customer_name="Other"))
        assert isinstance(excinfo.value, PassNumberTakenError)
        assert len(await store.get_passes_by_transaction(tx.id)) == 1

    @pytest.mark.asyncio
    async def test_valid_date_accepts_iso_string(self, store):
        tx = await store.create_transaction(make_transaction_input())
        issued = await store.create_pass(make_pass_input(tx.id, "DP-0002", valid_date="2024-02-01"))
        assert issued.valid_date == date(2024, 2, 1)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"pass_type": "helicopter"},
            {"pass_type": "daily", "id_number": None},
            {"pass_type": "vehicle", "plate_number": None},
            {"pass_type": "trailer40", "plate_number": ""},
            {"amount": "-6.11"},
            {"amount": "6.111"},
            {"customer_name": ""},
            {"valid_date": "15/01/2024"},
        ],
    )
    async def test_structurally_invalid_input(self, store, overrides):
        tx = await store.create_transaction(make_transaction_input())
        with pytest.raises(ValidationFailureError):
            await store.create_pass(make_pass_input(tx.id, "DP-0003", **overrides))

    @pytest.mark.asyncio
    async def test_vehicle_pass_needs_plate_not_id(self, store):
        tx = await store.create_transaction(make_transaction_input())
        issued = await store.create_pass(
            make_pass_input(
                tx.id,
                "VS-0001",
                pass_type=PassType.VEHICLE,
                id_number=None,
                plate_number="P-4455",
                amount="11.21",
            )
        )
        assert issued.pass_type == "vehicle"
        assert issued.plate_number == "P-4455"
        assert issued.id_number is None


class TestPassesByTransaction:
    @pytest.mark.asyncio
    async def test_returns_exactly_the_transactions_passes(self, store):
        first = await store.create_transaction(make_transaction_input())
        second = await store.create_transaction(make_transaction_input(payer_name="Other Payer"))

        mine = [await store.create_pass(make_pass_input(first.id, f"A-{i}")) for i in range(3)]
        await store.create_pass(make_pass_input(second.id, "B-1"))
        mine.append(await store.create_pass(make_pass_input(first.id, "A-3")))

        assert await store.get_passes_by_transaction(first.id) == mine
        assert [p.pass_number for p in await store.get_passes_by_transaction(second.id)] == ["B-1"]

    @pytest.mark.asyncio
    async def test_unknown_transaction_has_no_passes(self, store):
        assert await store.get_passes_by_transaction("missing") == []


class TestRecentPasses:
    @pytest.mark.asyncio
    async def test_newest_first(self, store):
        tx = await store.create_transaction(make_transaction_input())
        for i in range(5):
            await store.create_pass(make_pass_input(tx.id, f"R-{i}"))

        recent = await store.get_recent_passes(3)
        assert [p.pass_number for p in recent] == ["R-4", "R-3", "R-2"]
        stamps = [p.created_at for p in recent]
        assert stamps == sorted(stamps, reverse=True)

    @pytest.mark.asyncio
    async def test_limit_larger_than_count_returns_all(self, store):
        tx = await store.create_transaction(make_transaction_input())
        for i in range(2):
            await store.create_pass(make_pass_input(tx.id, f"R-{i}"))

        assert [p.pass_number for p in await store.get_recent_passes(50)] == ["R-1", "R-0"]

    @pytest.mark.asyncio
    async def test_zero_limit(self, store):
        tx = await store.create_transaction(make_transaction_input())
        await store.create_pass(make_pass_input(tx.id, "R-0"))
        assert await store.get_recent_passes(0) == []

    @pytest.mark.asyncio
    async def test_negative_limit_rejected(self, store):
        with pytest.raises(ValidationFailureError):
            await store.get_recent_passes(-1)


class TestIssuePasses:
    @pytest.mark.asyncio
    async def test_batch_creates_transaction_and_passes(self, store):
        tx, passes = await store.issue_passes(
            make_transaction_input(total_amount=None),
            [
                make_pass_input("", "B-1"),
                make_pass_input("", "B-2"),
                make_pass_input(
                    "", "B-3", pass_type="vehicle", id_number=None, plate_number="P-1", amount="11.21"
                ),
            ],
        )

        assert tx.total_amount == Decimal("23.43")
        assert {p.transaction_id for p in passes} == {tx.id}
        assert await store.get_passes_by_transaction(tx.id) == passes

    @pytest.mark.asyncio
    async def test_explicit_total_is_kept(self, store):
        tx, _ = await store.issue_passes(
            make_transaction_input(total_amount="10.00"),
            [make_pass_input("", "B-1")],
        )
        assert tx.total_amount == Decimal("10.00")

    @pytest.mark.asyncio
    async def test_duplicate_in_store_rolls_back_whole_batch(self, store):
        existing = await store.create_transaction(make_transaction_input())
        await store.create_pass(make_pass_input(existing.id, "TAKEN"))

        with pytest.raises(PassNumberTakenError):
            await store.issue_passes(
                make_transaction_input(payer_name="Batch Payer", total_amount=None),
                [make_pass_input("", "NEW-1"), make_pass_input("", "TAKEN")],
            )

        numbers = [p.pass_number for p in await store.get_recent_passes(10)]
        assert numbers == ["TAKEN"]

    @pytest.mark.asyncio
    async def test_duplicate_within_batch_rejected(self, store):
        with pytest.raises(DuplicateKeyError):
            await store.issue_passes(
                make_transaction_input(total_amount=None),
                [make_pass_input("", "SAME"), make_pass_input("", "SAME")],
            )
        assert await store.get_recent_passes(10) == []

    @pytest.mark.asyncio
    async def test_empty_batch_rejected(self, store):
        with pytest.raises(ValidationFailureError):
            await store.issue_passes(make_transaction_input(), [])


class TestLabels:
    def test_known_labels(self):
        assert pass_type_label("daily") == "Daily Pass"
        assert pass_type_label("trailer20") == "Trailer 20/Dump Truck Vehicle Sticker"
        assert PassType.CRANE.label == "Crane Lorry Vehicle Sticker"

    def test_unknown_type_passes_through(self):
        assert pass_type_label("ferry") == "ferry"
