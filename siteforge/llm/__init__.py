"""Provider adapter layer: Gemini REST behind a common protocol."""

from siteforge.llm.base import SiteProvider
from siteforge.llm.gemini_provider import GeminiProvider
from siteforge.llm.retry import (
    InvalidProviderResponseError,
    ProviderError,
    ProviderRejectedError,
    QuotaExhaustedError,
    RequestFailedError,
    fetch_with_backoff,
)

__all__ = [
    "SiteProvider",
    "GeminiProvider",
    "fetch_with_backoff",
    "ProviderError",
    "QuotaExhaustedError",
    "ProviderRejectedError",
    "InvalidProviderResponseError",
    "RequestFailedError",
]
