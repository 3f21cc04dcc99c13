"""Section splitting for research report markdown.

Two passes: first collect the offsets of every recognized heading, then
slice the document between consecutive offsets. Heading order does not
matter and a missing heading simply leaves its section empty.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from site_intel.synthesis.models import TOPICAL_SECTIONS, SectionName, SectionSplit
from site_intel.synthesis.section_patterns import (
    HEADING_PATTERN,
    is_recognized_heading,
    section_for_heading,
)
from site_intel.synthesis.text import normalize

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeadingMarker:
    """A recognized heading: the section it opens and where its body spans."""

    section: Optional[SectionName]
    start: int
    body_start: int


def find_headings(markdown: str) -> list[HeadingMarker]:
    """Locate every recognized heading in document order.

    The Sources heading is included with ``section=None`` so it still acts
    as a boundary.
    """
    markers: list[HeadingMarker] = []
    for match in HEADING_PATTERN.finditer(markdown):
        title = match.group(1)
        if not is_recognized_heading(title):
            continue
        markers.append(
            HeadingMarker(
                section=section_for_heading(title),
                start=match.start(),
                body_start=match.end(),
            )
        )
    return markers


def split_sections(markdown: str) -> SectionSplit:
    """Partition *markdown* into the executive summary and four topical bodies.

    The summary is normalized (links stripped, whitespace collapsed) since it
    is displayed verbatim; topical bodies are returned raw. When a label
    appears twice the first occurrence wins.
    """
    markdown = markdown or ""
    markers = find_headings(markdown)

    bodies: dict[SectionName, str] = {}
    for i, marker in enumerate(markers):
        if marker.section is None or marker.section in bodies:
            continue
        end = markers[i + 1].start if i + 1 < len(markers) else len(markdown)
        bodies[marker.section] = markdown[marker.body_start:end].strip()

    missing = [name.value for name in SectionName if name not in bodies]
    if missing:
        log.debug("Sections without a heading: %s", ", ".join(missing))

    return SectionSplit(
        summary=normalize(bodies.get(SectionName.EXECUTIVE_SUMMARY, "")),
        sections={name: bodies.get(name, "") for name in TOPICAL_SECTIONS},
    )
