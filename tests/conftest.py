"""Shared fixtures for site-intel tests."""

from __future__ import annotations

import pytest

from site_intel.core.config import ResearchConfig
from tests.fakes.sample_report import SAMPLE_REPORT


@pytest.fixture
def sample_report() -> str:
    """Full research report: summary, four topical sections, sources list."""
    return SAMPLE_REPORT


@pytest.fixture
def research_config() -> ResearchConfig:
    """Research config with no backoff or poll delays."""
    return ResearchConfig(
        api_key="test-key",
        base_url="https://research.test",
        max_retries=3,
        retry_max_delay=0.0,
        poll_interval=0.0,
        poll_timeout=5.0,
    )
