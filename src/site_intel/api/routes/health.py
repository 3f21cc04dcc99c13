"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Liveness probe: always returns 200 if the process is up."""
    return {"status": "ok"}


@router.get("/ready")
async def ready(req: Request) -> dict[str, str]:
    """Readiness probe: confirms the research client is wired up."""
    if getattr(req.app.state, "research_client", None) is None:
        return {"status": "starting"}
    return {"status": "ready"}
