"""Exception hierarchy for site-intel.

The synthesis engine never raises for malformed input; everything here
belongs to the address validation and upstream research boundary.
"""


class SiteIntelError(Exception):
    """Base exception for all site-intel errors."""


class InvalidAddressError(SiteIntelError):
    """Raised when a research request carries a blank address."""


class ResearchClientError(SiteIntelError):
    """Raised when research API calls fail after exhausting retries."""


class RetryableError(ResearchClientError):
    """Rate limits, timeouts and 5xx responses; retried with backoff."""


class ResearchTimeoutError(RetryableError):
    """The upstream request timed out or the research task never finished."""


class NonRetryableError(ResearchClientError):
    """4xx responses other than 429 and failed tasks; never retried."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


__all__ = [
    "SiteIntelError",
    "InvalidAddressError",
    "ResearchClientError",
    "RetryableError",
    "ResearchTimeoutError",
    "NonRetryableError",
]
