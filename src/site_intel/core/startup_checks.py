"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from urllib.parse import urlparse

if TYPE_CHECKING:
    from site_intel.core.config import AppSettings

log = logging.getLogger(__name__)


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_api_key(settings)
    _check_base_url(settings)
    _check_polling(settings)


def _check_api_key(settings: AppSettings) -> None:
    """The research API rejects anonymous calls, so an empty key is fatal."""
    if not settings.research.api_key.strip():
        raise ValueError(
            "SITE_INTEL_RESEARCH_API_KEY is required. "
            "Set it via environment variable or secrets manager."
        )


def _check_base_url(settings: AppSettings) -> None:
    parsed = urlparse(settings.research.base_url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ValueError(
            f"SITE_INTEL_RESEARCH_BASE_URL must be an absolute http(s) URL, "
            f"got {settings.research.base_url!r}"
        )
    if parsed.scheme == "http":
        log.warning("Research API base URL is not using TLS: %s", settings.research.base_url)


def _check_polling(settings: AppSettings) -> None:
    """Warn when the poll deadline cannot fit a single poll."""
    research = settings.research
    if research.poll_interval > research.poll_timeout:
        log.warning(
            "SITE_INTEL_RESEARCH_POLL_INTERVAL (%.1fs) exceeds POLL_TIMEOUT (%.1fs); "
            "research tasks will time out after the first status check.",
            research.poll_interval,
            research.poll_timeout,
        )
