"""Unit tests for heading-based section splitting."""

from __future__ import annotations

import pytest

from site_intel.synthesis.models import SectionName
from site_intel.synthesis.section_patterns import heading_key, section_for_heading
from site_intel.synthesis.sections import find_headings, split_sections


class TestSplitSections:
    def test_order_independent(self):
        markdown = (
            "## Tenant Expansion\nTenant body.\n"
            "## Planning Activity\nPlanning body.\n"
            "## Community Sentiment\nCommunity body.\n"
        )
        split = split_sections(markdown)
        assert split.body(SectionName.TENANT_EXPANSION) == "Tenant body."
        assert split.body(SectionName.PLANNING_ACTIVITY) == "Planning body."
        assert split.body(SectionName.COMMUNITY_SENTIMENT) == "Community body."
        assert split.body(SectionName.DEVELOPMENT_NEWS) == ""

    def test_missing_headings_yield_empty_bodies(self):
        split = split_sections("Just prose without any headings at all.")
        assert split.summary == ""
        assert all(body == "" for body in split.sections.values())
        assert len(split.sections) == 4

    def test_sources_heading_ends_last_section(self):
        markdown = "### Community Sentiment\nBody text\n### Sources\n- [a](https://a.com)"
        assert split_sections(markdown).body(SectionName.COMMUNITY_SENTIMENT) == "Body text"

    @pytest.mark.parametrize(
        "heading",
        [
            "### PLANNING ACTIVITY",
            "## planning activity",
            "### planning_activity",
            "### Planning Activity:",
            "### **Planning Activity**",
            "### Planning Activity ###",
            "###   Planning   Activity",
        ],
    )
    def test_heading_variants(self, heading):
        split = split_sections(f"{heading}\nThe board met twice.")
        assert split.body(SectionName.PLANNING_ACTIVITY) == "The board met twice."

    @pytest.mark.parametrize("heading", ["# Planning Activity", "#### Planning Activity"])
    def test_other_heading_levels_ignored(self, heading):
        split = split_sections(f"{heading}\nThe board met twice.")
        assert split.body(SectionName.PLANNING_ACTIVITY) == ""

    def test_unrecognized_headings_stay_in_body(self):
        markdown = "### Planning Activity\nFirst part.\n### Notes\nSecond part."
        body = split_sections(markdown).body(SectionName.PLANNING_ACTIVITY)
        assert "### Notes" in body
        assert body.endswith("Second part.")

    def test_duplicate_heading_first_wins(self):
        markdown = (
            "### Planning Activity\nfirst\n"
            "### Development News\nnews\n"
            "### Planning Activity\nsecond\n"
        )
        split = split_sections(markdown)
        assert split.body(SectionName.PLANNING_ACTIVITY) == "first"
        assert split.body(SectionName.DEVELOPMENT_NEWS) == "news"

    def test_summary_strips_links_and_whitespace(self):
        markdown = (
            "### Executive Summary\n"
            "The area is busy ([News](https://n.com)).\n\n"
            "More  [detail](https://d.com) here.\n"
            "### Planning Activity\nbody"
        )
        assert split_sections(markdown).summary == "The area is busy. More detail here."

    def test_empty_input(self):
        split = split_sections("")
        assert split.summary == ""
        assert set(split.sections) == {
            SectionName.PLANNING_ACTIVITY,
            SectionName.COMMUNITY_SENTIMENT,
            SectionName.DEVELOPMENT_NEWS,
            SectionName.TENANT_EXPANSION,
        }

    def test_sample_report(self, sample_report):
        split = split_sections(sample_report)
        assert split.summary.startswith("Activity near 255 Elm St")
        assert "https://" not in split.summary
        assert split.body(SectionName.TENANT_EXPANSION).endswith("second cafe nearby.")


class TestFindHeadings:
    def test_sources_marker_has_no_section(self):
        markers = find_headings("### Planning Activity\nx\n### Sources\n- y")
        assert [m.section for m in markers] == [SectionName.PLANNING_ACTIVITY, None]
        assert markers[0].start < markers[0].body_start <= markers[1].start


class TestSectionPatterns:
    def test_heading_key(self):
        assert heading_key("  Community_Sentiment: ") == "community sentiment"

    def test_unknown_heading(self):
        assert section_for_heading("Random Section") is None
