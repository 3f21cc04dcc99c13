"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from site_intel.exceptions import (
    InvalidAddressError,
    ResearchTimeoutError,
    SiteIntelError,
)

log = logging.getLogger(__name__)

TIMEOUT_MESSAGE = "Research is taking longer than expected. Please try again."
GENERIC_MESSAGE = "An error occurred while generating the report. Please try again."


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(InvalidAddressError)
    async def handle_invalid_address(request: Request, exc: InvalidAddressError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"error": str(exc), "type": "invalid_address"})

    @app.exception_handler(ResearchTimeoutError)
    async def handle_timeout(request: Request, exc: ResearchTimeoutError) -> JSONResponse:
        log.error("Research API timeout: %s", exc)
        return JSONResponse(status_code=504, content={"error": TIMEOUT_MESSAGE, "type": "timeout"})

    @app.exception_handler(SiteIntelError)
    async def handle_generic_error(request: Request, exc: SiteIntelError) -> JSONResponse:
        log.error("Research API error: %s", exc)
        return JSONResponse(status_code=500, content={"error": GENERIC_MESSAGE, "type": "research_error"})
