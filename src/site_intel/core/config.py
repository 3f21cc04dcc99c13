"""Nested pydantic-settings configuration for the application.

Each concern reads its own ``SITE_INTEL_<GROUP>_*`` env vars via a
sub-model env prefix; ``AppSettings`` aggregates them.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class ResearchConfig(BaseSettings):
    """Upstream research API configuration.

    Env vars use ``SITE_INTEL_RESEARCH_`` prefix::

        export SITE_INTEL_RESEARCH_API_KEY=...
        export SITE_INTEL_RESEARCH_MODEL=exa-research-fast
    """

    model_config = {"env_prefix": "SITE_INTEL_RESEARCH_"}

    api_key: str = ""
    base_url: str = "https://api.exa.ai"
    model: str = "exa-research-fast"
    timeout: float = Field(default=120.0, gt=0.0)
    max_retries: int = Field(default=3, ge=1)
    retry_jitter_factor: float = 0.5
    retry_max_delay: float = 30.0
    poll_interval: float = Field(default=2.0, ge=0.0)
    poll_timeout: float = Field(default=600.0, gt=0.0)


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``SITE_INTEL_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "SITE_INTEL_OBSERVABILITY_"}

    service_name: str = "site-intel"
    log_level: str = "INFO"
    # None means: JSON lines unless stderr is a TTY
    json_logs: bool | None = None


class APIConfig(BaseSettings):
    """HTTP API metadata.

    Env vars use ``SITE_INTEL_API_`` prefix.
    """

    model_config = {"env_prefix": "SITE_INTEL_API_"}

    title: str = "Site Intelligence"
    description: str = (
        "Planning activity, community sentiment, development news and tenant "
        "expansion near a property address"
    )
    port: int = 8080


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    research: ResearchConfig = Field(default_factory=ResearchConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    api: APIConfig = Field(default_factory=APIConfig)
