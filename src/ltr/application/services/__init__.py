"""Application services."""

from .report_service import ReportRequest, ReportService, build_report

__all__ = ["ReportRequest", "ReportService", "build_report"]
