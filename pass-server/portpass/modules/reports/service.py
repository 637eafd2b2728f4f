"""Daily issuance and revenue reporting."""

from __future__ import annotations

import logging
from datetime import date, datetime, tzinfo
from typing import TYPE_CHECKING, Iterable

from portpass.core.exceptions import ValidationFailureError
from portpass.core.money import format_cents, to_cents
from portpass.core.time_utils import day_bounds
from portpass.modules.passes.models import Pass, pass_type_label

from .models import DailyReport, TypeBreakdown

if TYPE_CHECKING:
    from portpass.core.store import EntityStore

logger = logging.getLogger(__name__)


def _coerce_day(value: date | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as exc:
        raise ValidationFailureError(f"report date is not an ISO date: {value!r}") from exc


def summarize_passes(day: date, passes: Iterable[Pass]) -> DailyReport:
    """Aggregate already-selected passes. All sums are integer cents."""
    ordered = sorted(passes, key=lambda item: (item.created_at, item.pass_number))

    total_cents = 0
    counts: dict[str, int] = {}
    revenue_cents: dict[str, int] = {}
    for item in ordered:
        label = pass_type_label(item.pass_type)
        cents = to_cents(item.amount)
        counts[label] = counts.get(label, 0) + 1
        revenue_cents[label] = revenue_cents.get(label, 0) + cents
        total_cents += cents

    return DailyReport(
        date=day.isoformat(),
        total_passes=len(ordered),
        pass_numbers=[item.pass_number for item in ordered],
        total_revenue=format_cents(total_cents),
        pass_by_type={
            label: TypeBreakdown(count=counts[label], revenue=format_cents(revenue_cents[label]))
            for label in counts
        },
    )


class ReportService:
    """Builds reports from the pass records held by the entity store."""

    def __init__(self, store: "EntityStore", tz: tzinfo | None = None) -> None:
        self._store = store
        self._tz = tz

    async def daily_report(self, day: date | str) -> DailyReport:
        """Summary of passes created during ``day`` in the report time zone."""
        day = _coerce_day(day)
        start, end = day_bounds(day, self._tz)
        passes = await self._store.list_passes_created_between(start, end)
        report = summarize_passes(day, passes)
        logger.debug("Daily report %s: %d passes, revenue %s", report.date, report.total_passes, report.total_revenue)
        return report
