"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from site_intel.api.middleware.error_handler import register_error_handlers
from site_intel.api.routes import health, research
from site_intel.core.config import APIConfig, AppSettings
from site_intel.core.logging_config import setup_logging
from site_intel.core.startup_checks import validate_settings
from site_intel.research.client import ResearchClient


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("site-intel")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup/shutdown lifecycle."""
    settings = AppSettings()
    validate_settings(settings)
    setup_logging(settings.observability)

    app.state.settings = settings
    async with ResearchClient(settings.research) as client:
        app.state.research_client = client
        yield


def create_app(lifespan_handler=lifespan) -> FastAPI:
    """Build the application; tests pass their own lifespan to inject fakes."""
    api_config = APIConfig()
    application = FastAPI(
        title=api_config.title,
        description=api_config.description,
        version=_get_version(),
        lifespan=lifespan_handler,
    )
    register_error_handlers(application)
    application.include_router(health.router)
    application.include_router(research.router, prefix="/api")
    return application


app = create_app()
