"""Upstream research boundary: prompts, API client and response adapter."""

from __future__ import annotations

from site_intel.research.client import ResearchClient
from site_intel.research.prompts import EXAMPLE_ADDRESS, build_instructions, build_query
from site_intel.research.response import (
    ResearchPayload,
    ResponseShape,
    extract_markdown,
    resolve_payload,
)

__all__ = [
    "EXAMPLE_ADDRESS",
    "ResearchClient",
    "ResearchPayload",
    "ResponseShape",
    "build_instructions",
    "build_query",
    "extract_markdown",
    "resolve_payload",
]
