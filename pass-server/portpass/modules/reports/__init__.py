"""Reporting over issued passes."""

from .models import DailyReport, TypeBreakdown
from .service import ReportService, summarize_passes

__all__ = ["DailyReport", "ReportService", "TypeBreakdown", "summarize_passes"]
