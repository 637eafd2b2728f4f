"""Domain models for payment transactions."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(slots=True, frozen=True)
class Transaction:
    id: str
    payer_name: str
    total_amount: Decimal
    slip_filename: str
    created_at: datetime
    payer_email: Optional[str] = None
    payer_phone: Optional[str] = None


@dataclass(slots=True)
class TransactionCreateInput:
    payer_name: str
    slip_filename: str
    # None lets batch issuance derive the total from the pass amounts
    total_amount: Optional[Decimal | str] = None
    payer_email: Optional[str] = None
    payer_phone: Optional[str] = None
