"""Heading labels and patterns for research report section detection.

These are used by ``split_sections`` to locate section boundaries without
parsing the markdown.
"""

from __future__ import annotations

import re
from typing import Optional, Pattern

from site_intel.synthesis.models import SectionName

# Level-2 or level-3 ATX headings only; closing hashes are optional.
HEADING_PATTERN: Pattern[str] = re.compile(
    r"^[ \t]{0,3}#{2,3}[ \t]+(.+?)(?:[ \t]+#+)?[ \t]*$", re.MULTILINE
)

SECTION_LABELS: dict[SectionName, str] = {
    SectionName.EXECUTIVE_SUMMARY: "Executive Summary",
    SectionName.PLANNING_ACTIVITY: "Planning Activity",
    SectionName.COMMUNITY_SENTIMENT: "Community Sentiment",
    SectionName.DEVELOPMENT_NEWS: "Development News",
    SectionName.TENANT_EXPANSION: "Tenant Expansion",
}

# Terminal heading: bounds the last section but is not a section itself.
SOURCES_LABEL = "Sources"


def heading_key(text: str) -> str:
    """Comparison key for heading text.

    Case-folded, ``_`` read as a space, bold markers and a trailing colon dropped.
    """
    text = text.replace("_", " ").strip().strip("*").strip().rstrip(":").strip()
    return " ".join(text.split()).casefold()


_LABEL_LOOKUP: dict[str, Optional[SectionName]] = {
    heading_key(label): name for name, label in SECTION_LABELS.items()
}
_LABEL_LOOKUP[heading_key(SOURCES_LABEL)] = None


def is_recognized_heading(text: str) -> bool:
    return heading_key(text) in _LABEL_LOOKUP


def section_for_heading(text: str) -> Optional[SectionName]:
    """Section named by a heading, or None for the Sources heading / unknown text."""
    return _LABEL_LOOKUP.get(heading_key(text))
