"""Price table for pass types."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from portpass.core.config import PricingSettings
from portpass.core.exceptions import ValidationFailureError
from portpass.core.money import from_cents, to_cents

from .models import PassType


class PassPricing:
    def __init__(self, settings: PricingSettings) -> None:
        self._cents = {
            pass_type.value: to_cents(getattr(settings, pass_type.value), field=f"pricing.{pass_type.value}")
            for pass_type in PassType
        }

    def price_cents(self, pass_type: PassType | str) -> int:
        key = pass_type.value if isinstance(pass_type, PassType) else pass_type
        try:
            return self._cents[key]
        except KeyError:
            raise ValidationFailureError(f"unknown pass type: {key!r}") from None

    def price_for(self, pass_type: PassType | str) -> Decimal:
        return from_cents(self.price_cents(pass_type))

    def total_for(self, pass_types: Iterable[PassType | str]) -> Decimal:
        return from_cents(sum(self.price_cents(pass_type) for pass_type in pass_types))

    def as_table(self) -> dict[str, str]:
        return {key: f"{from_cents(cents):.2f}" for key, cents in self._cents.items()}
