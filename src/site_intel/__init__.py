"""site-intel: structured site intelligence from AI-generated research reports.

Engine API::

    from site_intel import synthesize

    result = synthesize(markdown)
    result.risk_level, result.sources, result.findings(SectionName.PLANNING_ACTIVITY)

Service API::

    from site_intel import AppSettings, ReportService, ResearchClient

    async with ResearchClient(AppSettings().research) as client:
        report = await ReportService(client).generate("255 Elm St, Somerville MA")
"""

from __future__ import annotations

from site_intel.core.config import AppSettings
from site_intel.exceptions import (
    InvalidAddressError,
    NonRetryableError,
    ResearchClientError,
    ResearchTimeoutError,
    RetryableError,
    SiteIntelError,
)
from site_intel.research.client import ResearchClient
from site_intel.research.response import extract_markdown, resolve_payload
from site_intel.services.report_service import ReportService
from site_intel.synthesis import (
    Finding,
    RiskLevel,
    SectionName,
    SiteReport,
    Source,
    SynthesisResult,
    synthesize,
)

__all__ = [
    # Engine
    "Finding",
    "RiskLevel",
    "SectionName",
    "SiteReport",
    "Source",
    "SynthesisResult",
    "synthesize",
    # Research boundary
    "AppSettings",
    "ReportService",
    "ResearchClient",
    "extract_markdown",
    "resolve_payload",
    # Errors
    "SiteIntelError",
    "InvalidAddressError",
    "ResearchClientError",
    "RetryableError",
    "ResearchTimeoutError",
    "NonRetryableError",
]
