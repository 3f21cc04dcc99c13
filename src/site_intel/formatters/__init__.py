"""Output formatters for rendering synthesis results.

Usage::

    from site_intel.formatters import JSONFormatter

    json_bytes = JSONFormatter().format(result)
"""

from __future__ import annotations

from site_intel.formatters.json_formatter import JSONFormatter
from site_intel.formatters.protocols import IOutputFormatter

__all__ = [
    "IOutputFormatter",
    "JSONFormatter",
]
