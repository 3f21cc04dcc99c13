"""Tests for the HTTP API: research, synthesize and health endpoints."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.testclient import TestClient

from site_intel.api.app import create_app
from site_intel.api.middleware.error_handler import GENERIC_MESSAGE, TIMEOUT_MESSAGE
from site_intel.exceptions import NonRetryableError, ResearchTimeoutError
from tests.fakes.fake_research_client import FakeResearchClient
from tests.fakes.sample_report import SAMPLE_REPORT


def _build_app(client: FakeResearchClient | None) -> FastAPI:
    """Build the full app with a lifespan that injects *client*."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        if client is not None:
            app.state.research_client = client
        yield

    return create_app(lifespan_handler=lifespan)


class TestResearchEndpoint:
    def test_returns_report(self) -> None:
        fake = FakeResearchClient(SAMPLE_REPORT)
        with TestClient(_build_app(fake)) as client:
            resp = client.post("/api/research", json={"address": "255 Elm St, Somerville MA"})

        assert resp.status_code == 200
        body = resp.json()
        assert body["address"] == "255 Elm St, Somerville MA"
        assert body["generated_at"]
        report = body["report"]
        assert report["riskLevel"] == "moderate"
        assert report["summary"].startswith("Activity near 255 Elm St")
        assert len(report["sources"]) == 4
        assert report["sections"]["planning_activity"][0]["date"] == "March 2024"
        assert "date" not in report["sections"]["planning_activity"][2]
        assert fake.calls == ["255 Elm St, Somerville MA"]

    def test_blank_address_is_400(self) -> None:
        fake = FakeResearchClient(SAMPLE_REPORT)
        with TestClient(_build_app(fake)) as client:
            resp = client.post("/api/research", json={"address": "   "})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Please provide a valid address", "type": "invalid_address"}
        assert fake.calls == []

    def test_missing_address_is_400(self) -> None:
        with TestClient(_build_app(FakeResearchClient())) as client:
            resp = client.post("/api/research", json={})
        assert resp.status_code == 400

    def test_timeout_is_504(self) -> None:
        fake = FakeResearchClient(error=ResearchTimeoutError("task still running"))
        with TestClient(_build_app(fake)) as client:
            resp = client.post("/api/research", json={"address": "1 Main St"})
        assert resp.status_code == 504
        assert resp.json()["error"] == TIMEOUT_MESSAGE

    def test_upstream_failure_is_500(self) -> None:
        fake = FakeResearchClient(error=NonRetryableError("bad key", status_code=401))
        with TestClient(_build_app(fake)) as client:
            resp = client.post("/api/research", json={"address": "1 Main St"})
        assert resp.status_code == 500
        body = resp.json()
        assert body["error"] == GENERIC_MESSAGE
        assert "bad key" not in body["error"]


class TestSynthesizeEndpoint:
    def test_synthesizes_markdown(self) -> None:
        with TestClient(_build_app(None)) as client:
            resp = client.post("/api/synthesize", json={"markdown": SAMPLE_REPORT})
        assert resp.status_code == 200
        body = resp.json()
        assert set(body) == {"summary", "sections", "sources", "riskLevel"}
        assert [f["date"] for f in body["sections"]["tenant_expansion"] if "date" in f] == ["Sep 2024"]

    def test_empty_markdown(self) -> None:
        with TestClient(_build_app(None)) as client:
            resp = client.post("/api/synthesize", json={"markdown": ""})
        assert resp.status_code == 200
        body = resp.json()
        assert body["summary"] == ""
        assert body["riskLevel"] == "low"
        assert body["sections"]["community_sentiment"] == []


class TestHealth:
    def test_health(self) -> None:
        with TestClient(_build_app(None)) as client:
            assert client.get("/health").json() == {"status": "ok"}

    def test_ready_with_client(self) -> None:
        with TestClient(_build_app(FakeResearchClient())) as client:
            assert client.get("/ready").json() == {"status": "ready"}

    def test_starting_without_client(self) -> None:
        with TestClient(_build_app(None)) as client:
            assert client.get("/ready").json() == {"status": "starting"}
