"""Research and synthesis endpoints."""

from __future__ import annotations

from typing import Literal, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from site_intel.services.report_service import ReportService
from site_intel.synthesis.models import SiteReport, SynthesisResult
from site_intel.synthesis.pipeline import synthesize as synthesize_markdown

router = APIRouter(tags=["research"])


class ResearchRequest(BaseModel):
    """Request to research a property address."""

    address: str = ""


class SynthesizeRequest(BaseModel):
    """Request to synthesize caller-provided report markdown."""

    markdown: str = ""


class FindingResponse(BaseModel):
    """A single displayable finding."""

    text: str
    date: Optional[str] = None


class SourceResponse(BaseModel):
    """A cited source."""

    title: str
    url: str


class SectionsResponse(BaseModel):
    """Findings for the four topical sections."""

    planning_activity: list[FindingResponse] = Field(default_factory=list)
    community_sentiment: list[FindingResponse] = Field(default_factory=list)
    development_news: list[FindingResponse] = Field(default_factory=list)
    tenant_expansion: list[FindingResponse] = Field(default_factory=list)


class SynthesisResponse(BaseModel):
    """Structured findings for one research report."""

    model_config = {"populate_by_name": True}

    summary: str = ""
    sections: SectionsResponse = Field(default_factory=SectionsResponse)
    sources: list[SourceResponse] = Field(default_factory=list)
    risk_level: Literal["low", "moderate", "high"] = Field(default="low", alias="riskLevel")

    @classmethod
    def from_result(cls, result: SynthesisResult) -> SynthesisResponse:
        return cls.model_validate(result.to_dict())


class SiteReportResponse(BaseModel):
    """Synthesized report for a property address."""

    address: str
    generated_at: str = ""
    report: SynthesisResponse

    @classmethod
    def from_report(cls, report: SiteReport) -> SiteReportResponse:
        return cls(
            address=report.address,
            generated_at=report.generated_at,
            report=SynthesisResponse.from_result(report.result),
        )


@router.post("/research", response_model=SiteReportResponse, response_model_exclude_none=True)
async def research(request: ResearchRequest, req: Request) -> SiteReportResponse:
    """Research an address upstream and synthesize the report.

    A blank address is rejected with 400; upstream timeouts map to 504.
    """
    service = ReportService(req.app.state.research_client)
    report = await service.generate(request.address)
    return SiteReportResponse.from_report(report)


@router.post("/synthesize", response_model=SynthesisResponse, response_model_exclude_none=True)
async def synthesize(request: SynthesizeRequest) -> SynthesisResponse:
    """Synthesize report markdown supplied by the caller (no upstream call)."""
    return SynthesisResponse.from_result(synthesize_markdown(request.markdown))
