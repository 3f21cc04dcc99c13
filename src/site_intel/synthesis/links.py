"""Inline markdown link extraction.

Only the ``[display](target)`` form is recognized: display text may not
contain ``]`` and the target may not contain ``)``, so nested brackets are
not supported.
"""

from __future__ import annotations

import re
from urllib.parse import urlparse

from site_intel.synthesis.models import Source

LINK_PATTERN = re.compile(r"\[([^\]]*)\]\(([^)]*)\)")


def link_target(raw_target: str) -> str:
    """Return the url part of a link target, dropping an optional ``"title"``."""
    parts = raw_target.strip().split()
    if not parts:
        return ""
    return parts[0].strip("<>")


def host_name(url: str) -> str:
    """Host name of *url*, or the url itself when it has none."""
    try:
        host = urlparse(url).hostname
    except ValueError:
        host = None
    return host or url


def extract_links(text: str) -> list[Source]:
    """Collect ``Source`` entries for every inline link in *text*.

    Deduplicated by url; the first occurrence supplies the title and the
    order is first-seen order. Empty anchor text falls back to the host name.
    """
    sources: list[Source] = []
    seen: set[str] = set()

    for match in LINK_PATTERN.finditer(text or ""):
        url = link_target(match.group(2))
        if not url or url in seen:
            continue
        seen.add(url)
        title = " ".join(match.group(1).split()) or host_name(url)
        sources.append(Source(title=title, url=url))

    return sources
