"""Output formatter protocol: defines the contract all formatters implement."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for output formatters.

    ``report`` is a ``SynthesisResult`` or a ``SiteReport``; both expose
    ``to_dict()``.
    """

    def format(self, report: Any, **kwargs: Any) -> bytes:
        """Render the report into output bytes."""
        ...

    def format_to_file(self, report: Any, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type for the output format."""
        ...


__all__ = ["IOutputFormatter"]
