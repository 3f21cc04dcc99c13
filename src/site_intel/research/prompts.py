"""Query and instruction templates sent to the research API for an address."""

from __future__ import annotations

from site_intel.synthesis.models import SectionName
from site_intel.synthesis.section_patterns import SECTION_LABELS, SOURCES_LABEL

EXAMPLE_ADDRESS = "255 Elm St, Somerville MA"

RESEARCH_QUERY_TEMPLATE = "Planning board decisions and development activity near {address}"

SECTION_GUIDANCE = {
    "Planning Activity": (
        "planning board decisions, zoning variances, and permit approvals with dates, "
        "outcomes, and brief descriptions"
    ),
    "Community Sentiment": (
        "public comments, neighborhood feedback, resident concerns, and any organized "
        "opposition to development projects"
    ),
    "Development News": (
        "new construction projects, renovations, proposed developments, and property "
        "transactions nearby"
    ),
    "Tenant Expansion": (
        "business openings, commercial lease announcements, retailer expansions, and "
        "relocations in the area"
    ),
}

RESEARCH_INSTRUCTIONS_TEMPLATE = """\
Research planning and development activity near {address}.

Focus on official government sources like .gov sites and municipal meeting minutes. \
Include PDF documents from city planning departments and zoning boards. Also search \
local news coverage for community sentiment and development announcements. \
Prioritize recent activity from the last 2 years.

Write the report in markdown using exactly these level-3 headings, in this order:

{headings}

What each section covers:

{guidance}

Under "{summary_heading}" write one short paragraph. Under each other heading write \
complete sentences, one fact per sentence, and state the month and year (or quarter) \
of each event when known. Cite sources inline as [title](url). Finish with the \
"{sources_heading}" heading followed by a list of every cited link.
"""


def build_query(address: str) -> str:
    return RESEARCH_QUERY_TEMPLATE.format(address=address.strip())


def build_instructions(address: str) -> str:
    headings = [f"### {label}" for label in SECTION_LABELS.values()]
    headings.append(f"### {SOURCES_LABEL}")
    guidance = [f"- {label}: {text}" for label, text in SECTION_GUIDANCE.items()]

    return RESEARCH_INSTRUCTIONS_TEMPLATE.format(
        address=address.strip(),
        headings="\n".join(headings),
        guidance="\n".join(guidance),
        summary_heading=SECTION_LABELS[SectionName.EXECUTIVE_SUMMARY],
        sources_heading=SOURCES_LABEL,
    )
