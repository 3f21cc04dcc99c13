"""Synthesis pipeline: turns one research report into structured findings.

The pipeline is pure: it takes a markdown string and returns a
``SynthesisResult`` without I/O or retained state, so it is safe to call
concurrently.
"""

from __future__ import annotations

import logging

from site_intel.synthesis.dates import extract_date
from site_intel.synthesis.links import extract_links
from site_intel.synthesis.models import (
    TOPICAL_SECTIONS,
    Finding,
    SectionName,
    SynthesisResult,
)
from site_intel.synthesis.risk import classify_risk
from site_intel.synthesis.sections import split_sections
from site_intel.synthesis.text import normalize, segment

log = logging.getLogger(__name__)


def build_findings(body: str) -> list[Finding]:
    """Normalize, segment and date one section body."""
    return [Finding(text=text, date=extract_date(text)) for text in segment(normalize(body))]


def synthesize(markdown: str) -> SynthesisResult:
    """Produce summary, per-section findings, sources and risk for *markdown*.

    Never raises for string input; missing headings yield empty sections and
    a document without links yields no sources.
    """
    markdown = markdown or ""
    split = split_sections(markdown)

    sections = {name: build_findings(split.body(name)) for name in TOPICAL_SECTIONS}
    sources = extract_links(markdown)
    risk_level = classify_risk(split.body(SectionName.COMMUNITY_SENTIMENT))

    log.debug(
        "Synthesized report: %s, %d sources, risk=%s",
        ", ".join(f"{name.value}={len(findings)}" for name, findings in sections.items()),
        len(sources),
        risk_level.value,
    )

    return SynthesisResult(
        summary=split.summary,
        sections=sections,
        sources=sources,
        risk_level=risk_level,
    )
