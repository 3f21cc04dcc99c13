"""Research response adapter: resolves an upstream payload into markdown.

The research API has returned the report body in several layouts over
time. Shapes are probed in a fixed priority order and the first one present
is authoritative:

1. the payload itself is a string
2. ``payload.content``
3. ``payload.output.content``
4. ``payload.markdown``

Probing accepts both mappings and attribute-style objects (SDK responses)
and never raises; an unrecognized payload resolves to an empty string.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional


class ResponseShape(str, Enum):
    """Which payload layout carried the markdown."""

    TEXT = "text"
    CONTENT = "content"
    OUTPUT_CONTENT = "output_content"
    MARKDOWN = "markdown"
    EMPTY = "empty"


@dataclass(frozen=True)
class ResearchPayload:
    """Normalized upstream response."""

    shape: ResponseShape
    markdown: str = ""


def _field(obj: Any, name: str) -> Any:
    if obj is None or isinstance(obj, str):
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _as_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


_PROBES: list[tuple[ResponseShape, Callable[[Any], Optional[str]]]] = [
    (ResponseShape.TEXT, _as_text),
    (ResponseShape.CONTENT, lambda raw: _as_text(_field(raw, "content"))),
    (ResponseShape.OUTPUT_CONTENT, lambda raw: _as_text(_field(_field(raw, "output"), "content"))),
    (ResponseShape.MARKDOWN, lambda raw: _as_text(_field(raw, "markdown"))),
]


def resolve_payload(raw: Any) -> ResearchPayload:
    """Probe *raw* for the markdown body, in priority order."""
    for shape, probe in _PROBES:
        markdown = probe(raw)
        if markdown is not None:
            return ResearchPayload(shape=shape, markdown=markdown)
    return ResearchPayload(shape=ResponseShape.EMPTY)


def extract_markdown(raw: Any) -> str:
    """Markdown body of *raw*, or ``""`` when no known shape matches."""
    return resolve_payload(raw).markdown
