"""Tests for the JSONFormatter."""

from __future__ import annotations

import json

from site_intel.formatters.json_formatter import JSONFormatter
from site_intel.formatters.protocols import IOutputFormatter
from site_intel.synthesis.models import (
    TOPICAL_SECTIONS,
    Finding,
    RiskLevel,
    SectionName,
    SiteReport,
    Source,
    SynthesisResult,
)


def _make_result() -> SynthesisResult:
    sections = {name: [] for name in TOPICAL_SECTIONS}
    sections[SectionName.DEVELOPMENT_NEWS] = [
        Finding("Construction began on the Davis Square lab building.", "early 2025"),
        Finding("A café at 12 Elm St was sold to a new owner."),
    ]
    return SynthesisResult(
        summary="Busy corridor.",
        sections=sections,
        sources=[Source("Somerville Times", "https://thesomervilletimes.com/x")],
        risk_level=RiskLevel.HIGH,
    )


class TestJSONFormatter:
    def test_format_returns_bytes(self) -> None:
        assert isinstance(JSONFormatter().format(_make_result()), bytes)

    def test_result_fields(self) -> None:
        data = json.loads(JSONFormatter().format(_make_result()))
        assert data["summary"] == "Busy corridor."
        assert data["riskLevel"] == "high"
        assert data["sources"] == [{"title": "Somerville Times", "url": "https://thesomervilletimes.com/x"}]
        news = data["sections"]["development_news"]
        assert news[0] == {"text": "Construction began on the Davis Square lab building.", "date": "early 2025"}
        assert news[1] == {"text": "A café at 12 Elm St was sold to a new owner."}

    def test_keeps_non_ascii(self) -> None:
        assert "café".encode() in JSONFormatter().format(_make_result())

    def test_site_report_envelope(self) -> None:
        report = SiteReport("1 Main St", _make_result(), generated_at="2026-01-01T00:00:00+00:00")
        data = json.loads(JSONFormatter().format(report))
        assert data["address"] == "1 Main St"
        assert data["generated_at"] == "2026-01-01T00:00:00+00:00"
        assert data["report"]["riskLevel"] == "high"

    def test_format_to_file(self, tmp_path) -> None:
        path = JSONFormatter().format_to_file(_make_result(), tmp_path / "out.json")
        assert json.loads(path.read_bytes())["summary"] == "Busy corridor."

    def test_indent(self) -> None:
        assert b"\n    " in JSONFormatter(indent=4).format(_make_result())

    def test_satisfies_protocol(self) -> None:
        formatter = JSONFormatter()
        assert isinstance(formatter, IOutputFormatter)
        assert formatter.content_type == "application/json"
