"""Report synthesis engine: markdown research report in, structured findings out.

Usage::

    from site_intel.synthesis import synthesize

    result = synthesize(markdown)
    result.to_dict()  # {"summary", "sections", "sources", "riskLevel"}
"""

from __future__ import annotations

from site_intel.synthesis.dates import extract_date
from site_intel.synthesis.links import extract_links
from site_intel.synthesis.models import (
    TOPICAL_SECTIONS,
    Finding,
    RiskLevel,
    SectionName,
    SectionSplit,
    SiteReport,
    Source,
    SynthesisResult,
)
from site_intel.synthesis.pipeline import synthesize
from site_intel.synthesis.risk import classify_risk
from site_intel.synthesis.sections import split_sections
from site_intel.synthesis.text import normalize, segment

__all__ = [
    # Models
    "Finding",
    "RiskLevel",
    "SectionName",
    "SectionSplit",
    "SiteReport",
    "Source",
    "SynthesisResult",
    "TOPICAL_SECTIONS",
    # Engine
    "classify_risk",
    "extract_date",
    "extract_links",
    "normalize",
    "segment",
    "split_sections",
    "synthesize",
]
