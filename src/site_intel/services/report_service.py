"""Report service: address in, synthesized site report out."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Protocol

from site_intel.exceptions import InvalidAddressError
from site_intel.synthesis.models import SiteReport
from site_intel.synthesis.pipeline import synthesize

log = logging.getLogger(__name__)


class IResearchClient(Protocol):
    """Anything that turns an address into a markdown research report."""

    async def research(self, address: str) -> str: ...


class ReportService:
    """Validates the address, runs upstream research, then the synthesis engine."""

    def __init__(self, client: IResearchClient) -> None:
        self._client = client

    async def generate(self, address: str) -> SiteReport:
        """Produce a ``SiteReport`` for *address*.

        Raises:
            InvalidAddressError: If the address is blank.
            ResearchClientError: If the upstream research call fails.
        """
        address = (address or "").strip()
        if not address:
            raise InvalidAddressError("Please provide a valid address")

        markdown = await self._client.research(address)
        result = synthesize(markdown)

        log.info(
            "Report generated for %r: %d sources, risk=%s, findings=%s",
            address,
            len(result.sources),
            result.risk_level.value,
            {name.value: len(findings) for name, findings in result.sections.items()},
        )

        return SiteReport(
            address=address,
            result=result,
            generated_at=datetime.now(timezone.utc).isoformat(),
        )
