"""Domain models for issued passes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class PassType(str, Enum):
    DAILY = "daily"
    VEHICLE = "vehicle"
    CRANE = "crane"
    TRAILER20 = "trailer20"
    TRAILER40 = "trailer40"

    @property
    def label(self) -> str:
        return PASS_TYPE_LABELS[self.value]

    @property
    def requires_id_number(self) -> bool:
        return self is PassType.DAILY

    @property
    def requires_plate_number(self) -> bool:
        return self is not PassType.DAILY


PASS_TYPE_LABELS: dict[str, str] = {
    "daily": "Daily Pass",
    "vehicle": "Vehicle Sticker",
    "crane": "Crane Lorry Vehicle Sticker",
    "trailer20": "Trailer 20/Dump Truck Vehicle Sticker",
    "trailer40": "Trailer 40 Vehicle Sticker",
}


def pass_type_label(pass_type: str) -> str:
    """Human readable label; unknown types are returned unchanged."""
    return PASS_TYPE_LABELS.get(pass_type, pass_type)


@dataclass(slots=True, frozen=True)
class Pass:
    id: str
    transaction_id: str
    staff_id: str
    customer_name: str
    pass_type: str
    valid_date: date
    pass_number: str
    amount: Decimal
    qr_code: str
    created_at: datetime
    id_number: Optional[str] = None
    plate_number: Optional[str] = None


@dataclass(slots=True)
class PassCreateInput:
    transaction_id: str
    staff_id: str
    customer_name: str
    pass_type: PassType | str
    valid_date: date | str
    pass_number: str
    amount: Decimal | str
    qr_code: str
    id_number: Optional[str] = None
    plate_number: Optional[str] = None
