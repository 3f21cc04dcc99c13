"""Site report domain models: enums and dataclasses.

This is the canonical location for all synthesis data structures.
Engine values are immutable; ``to_dict()`` renders the shape handed to the
presentation layer (``riskLevel`` keeps its camelCase wire name).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

# ── Section names ────────────────────────────────────────────────────


class SectionName(str, Enum):
    """The five fixed named regions of a research report."""

    EXECUTIVE_SUMMARY = "executive_summary"
    PLANNING_ACTIVITY = "planning_activity"
    COMMUNITY_SENTIMENT = "community_sentiment"
    DEVELOPMENT_NEWS = "development_news"
    TENANT_EXPANSION = "tenant_expansion"


TOPICAL_SECTIONS: tuple[SectionName, ...] = (
    SectionName.PLANNING_ACTIVITY,
    SectionName.COMMUNITY_SENTIMENT,
    SectionName.DEVELOPMENT_NEWS,
    SectionName.TENANT_EXPANSION,
)


class RiskLevel(str, Enum):
    """Coarse opposition/controversy signal for the community-sentiment section."""

    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


# ── Engine values ────────────────────────────────────────────────────


@dataclass(frozen=True)
class Finding:
    """One normalized, independently displayable fact."""

    text: str
    date: str | None = None

    def to_dict(self) -> dict[str, str]:
        data = {"text": self.text}
        if self.date:
            data["date"] = self.date
        return data


@dataclass(frozen=True)
class Source:
    """A cited reference harvested from an inline markdown link."""

    title: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "url": self.url}


@dataclass(frozen=True)
class SectionSplit:
    """Output of the section splitter: summary text plus raw topical bodies.

    ``sections`` always carries all four topical names; a missing heading
    yields an empty body.
    """

    summary: str = ""
    sections: dict[SectionName, str] = field(
        default_factory=lambda: {name: "" for name in TOPICAL_SECTIONS}
    )

    def body(self, name: SectionName) -> str:
        return self.sections.get(name, "")


@dataclass(frozen=True)
class SynthesisResult:
    """Structured findings for one research report."""

    summary: str = ""
    sections: dict[SectionName, list[Finding]] = field(
        default_factory=lambda: {name: [] for name in TOPICAL_SECTIONS}
    )
    sources: list[Source] = field(default_factory=list)
    risk_level: RiskLevel = RiskLevel.LOW

    def findings(self, name: SectionName) -> list[Finding]:
        return self.sections.get(name, [])

    def to_dict(self) -> dict[str, Any]:
        """Render the external shape: summary, sections, sources, riskLevel."""
        return {
            "summary": self.summary,
            "sections": {
                name.value: [f.to_dict() for f in self.findings(name)]
                for name in TOPICAL_SECTIONS
            },
            "sources": [s.to_dict() for s in self.sources],
            "riskLevel": self.risk_level.value,
        }


@dataclass(frozen=True)
class SiteReport:
    """A synthesized report for one property address."""

    address: str
    result: SynthesisResult
    generated_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "generated_at": self.generated_at,
            "report": self.result.to_dict(),
        }
