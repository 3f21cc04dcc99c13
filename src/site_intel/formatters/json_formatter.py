"""JSON output formatter for synthesis results and site reports."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Union

from site_intel.synthesis.models import SiteReport, SynthesisResult

Report = Union[SynthesisResult, SiteReport]


class JSONFormatter:
    """Renders a SynthesisResult or SiteReport as indented JSON bytes."""

    def __init__(self, indent: int = 2) -> None:
        self._indent = indent

    def format(self, report: Report, **kwargs: Any) -> bytes:
        """Serialize *report* to pretty-printed JSON bytes."""
        return json.dumps(report.to_dict(), indent=self._indent, ensure_ascii=False).encode()

    def format_to_file(self, report: Report, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(report, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"
