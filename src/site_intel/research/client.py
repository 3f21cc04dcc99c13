"""Async client for the third-party research API.

A research run is a task: it is created with the instructions, then polled
until it completes. The completed payload is handed to the response adapter,
which resolves it to the markdown report body.
"""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Mapping
from typing import Any

import httpx

from site_intel.core.config import ResearchConfig
from site_intel.exceptions import (
    NonRetryableError,
    ResearchClientError,
    ResearchTimeoutError,
    RetryableError,
)
from site_intel.research.prompts import build_instructions, build_query
from site_intel.research.response import ResponseShape, resolve_payload

log = logging.getLogger(__name__)

TASKS_PATH = "/research/v1"

_TERMINAL_FAILURES = frozenset({"failed", "canceled", "cancelled"})


class ResearchClient:
    """Async research API client with retry, backoff and task polling."""

    def __init__(
        self,
        config: ResearchConfig,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=config.timeout)

    @property
    def model(self) -> str:
        return self._config.model

    async def __aenter__(self) -> ResearchClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._http.aclose()

    # ── Public API ───────────────────────────────────────────────────

    async def research(self, address: str) -> str:
        """Run a research task for *address* and return the markdown report."""
        raw = await self.run_task(build_query(address), build_instructions(address))
        payload = resolve_payload(raw)
        if payload.shape == ResponseShape.EMPTY:
            log.warning("Research payload for %r carried no markdown body", address)
        else:
            log.info(
                "Research completed for %r (shape=%s, %d chars)",
                address, payload.shape.value, len(payload.markdown),
            )
        return payload.markdown

    async def run_task(self, query: str, instructions: str) -> Any:
        """Create a research task and poll it to completion.

        Returns:
            The raw final payload, in whatever shape the API produced.

        Raises:
            NonRetryableError: The task failed, was canceled, or the API
                rejected the request.
            ResearchTimeoutError: The task did not finish within
                ``poll_timeout`` or the API timed out repeatedly.
            RetryableError: The API kept failing after ``max_retries``.
        """
        created = await self._request(
            "POST",
            TASKS_PATH,
            json={"instructions": f"{query}\n\n{instructions}", "model": self._config.model},
        )
        if not isinstance(created, Mapping):
            return created

        status = created.get("status")
        if status == "completed":
            return created
        task_id = created.get("researchId") or created.get("id")
        if not task_id:
            raise NonRetryableError("Research API response did not include a task id")

        log.info("Research task %s created (model=%s)", task_id, self._config.model)
        return await self._poll(str(task_id))

    # ── Internals ────────────────────────────────────────────────────

    async def _poll(self, task_id: str) -> Any:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self._config.poll_timeout

        while True:
            payload = await self._request("GET", f"{TASKS_PATH}/{task_id}")
            status = payload.get("status") if isinstance(payload, Mapping) else None

            if status is None or status == "completed":
                return payload
            if status in _TERMINAL_FAILURES:
                detail = payload.get("error") or status
                raise NonRetryableError(f"Research task {task_id} {status}: {detail}")
            if loop.time() >= deadline:
                raise ResearchTimeoutError(
                    f"Research task {task_id} still {status!r} after "
                    f"{self._config.poll_timeout:.0f}s"
                )

            log.debug("Research task %s status=%s", task_id, status)
            await asyncio.sleep(self._config.poll_interval)

    def _url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}{path}"

    def _headers(self) -> dict[str, str]:
        return {"x-api-key": self._config.api_key, "Content-Type": "application/json"}

    @staticmethod
    def _classify_status(response: httpx.Response) -> ResearchClientError | None:
        """Map an HTTP status to the error it should raise, or None on success."""
        code = response.status_code
        if code < 400:
            return None
        message = f"Research API returned {code}: {response.text[:200]}"
        if code == 429 or code >= 500:
            return RetryableError(message)
        return NonRetryableError(message, status_code=code)

    async def _request(self, method: str, path: str, json: Any = None) -> Any:
        """Send one request with exponential backoff on retryable failures."""
        max_retries = self._config.max_retries
        jitter_factor = self._config.retry_jitter_factor
        max_delay = self._config.retry_max_delay

        last_error: ResearchClientError | None = None
        for attempt in range(max_retries):
            try:
                response = await self._http.request(
                    method,
                    self._url(path),
                    json=json,
                    headers=self._headers(),
                    timeout=self._config.timeout,
                )
            except httpx.TimeoutException as e:
                last_error = ResearchTimeoutError(f"Research API timed out: {e}")
            except httpx.TransportError as e:
                last_error = RetryableError(f"Research API transport error: {e}")
            else:
                error = self._classify_status(response)
                if error is None:
                    try:
                        return response.json()
                    except ValueError as e:
                        raise NonRetryableError(
                            f"Research API returned malformed JSON: {e}",
                            status_code=response.status_code,
                        ) from e
                if isinstance(error, NonRetryableError):
                    raise error
                last_error = error

            base_wait = min(2 ** attempt, max_delay)
            jitter = random.uniform(0, base_wait * jitter_factor)
            wait = base_wait + jitter

            log.warning(
                "Research API retry %d/%d: %s (wait=%.1fs)",
                attempt + 1, max_retries, last_error, wait,
            )
            if attempt < max_retries - 1:
                await asyncio.sleep(wait)

        if isinstance(last_error, ResearchTimeoutError):
            raise last_error
        raise RetryableError(
            f"Research API failed after {max_retries} retries: {last_error}"
        ) from last_error
