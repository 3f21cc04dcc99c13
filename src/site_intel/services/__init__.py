"""Application services composing the research client and synthesis engine."""

from __future__ import annotations

from site_intel.services.report_service import IResearchClient, ReportService

__all__ = ["IResearchClient", "ReportService"]
