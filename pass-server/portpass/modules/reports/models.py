"""Report shapes handed to presentation collaborators."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TypeBreakdown(BaseModel):
    model_config = ConfigDict(frozen=True)

    count: int = 0
    revenue: str = "0.00"


class DailyReport(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date: str
    total_passes: int = Field(0, alias="totalPasses")
    pass_numbers: list[str] = Field(default_factory=list, alias="passNumbers")
    total_revenue: str = Field("0.00", alias="totalRevenue")
    pass_by_type: dict[str, TypeBreakdown] = Field(default_factory=dict, alias="passByType")

    def as_payload(self) -> dict[str, Any]:
        """camelCase dict in the shape consumed by the reports page."""
        return self.model_dump(by_alias=True)
