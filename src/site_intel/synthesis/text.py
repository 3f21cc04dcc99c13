"""Text normalization and sentence segmentation for section bodies."""

from __future__ import annotations

import re

from site_intel.synthesis.links import LINK_PATTERN

_LINK = r"\[[^\]]*\]\([^)]*\)"
_CITATION_CHUNK = rf"(?:[^()\[\]]|{_LINK})"

# "(see [Source](url))" and friends, including the whitespace before them.
CITATION_PATTERN = re.compile(rf"\s*\({_CITATION_CHUNK}*?{_LINK}{_CITATION_CHUNK}*\)")

_MARKER = r"(?:[-*+•·]|\d{1,2}[.)])"
LINE_MARKER_PATTERN = re.compile(rf"^[ \t]*(?:{_MARKER}[ \t]+)+", re.MULTILINE)
LEADING_MARKER_PATTERN = re.compile(rf"^(?:{_MARKER}\s+)+")

WHITESPACE_PATTERN = re.compile(r"\s+")

# A period followed by whitespace and an uppercase letter.
SENTENCE_BOUNDARY = re.compile(r"(?<=\.)\s+(?=[A-Z])")

MIN_FINDING_CHARS = 20


def strip_links(text: str) -> str:
    """Drop citation clauses, then reduce remaining links to their anchor text.

    Citation removal runs first because it is a superset match. Both passes
    repeat until the text stops changing.
    """
    while True:
        reduced = CITATION_PATTERN.sub("", text)
        reduced = LINK_PATTERN.sub(lambda m: m.group(1), reduced)
        if reduced == text:
            return reduced
        text = reduced


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def normalize(text: str) -> str:
    """Plain-text rendering of a markdown block.

    Links keep their anchor text, parenthesized citations vanish, list
    markers are dropped and whitespace collapses to single spaces.
    ``normalize(normalize(x)) == normalize(x)``.
    """
    if not text:
        return ""
    text = strip_links(text)
    text = LINE_MARKER_PATTERN.sub("", text)
    text = collapse_whitespace(text)
    return LEADING_MARKER_PATTERN.sub("", text)


def segment(text: str, min_chars: int = MIN_FINDING_CHARS) -> list[str]:
    """Split normalized prose into findings, in document order.

    Fragments shorter than *min_chars* are noise (stray markers, headings)
    and are dropped. When nothing survives the result is empty.
    """
    if not text:
        return []
    fragments = (fragment.strip() for fragment in SENTENCE_BOUNDARY.split(text))
    return [fragment for fragment in fragments if len(fragment) >= min_chars]
