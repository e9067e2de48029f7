"""Exponential-backoff wrapper for JSON-returning HTTP calls.

``fetch_with_backoff`` takes a zero-argument coroutine factory that performs one
HTTP request and returns the ``httpx.Response``. It knows nothing about what is
being requested:

* 2xx with a JSON content type: parsed body is returned.
* 429: retried after ``base_delay * 2**attempt``; on the final attempt
  ``QuotaExhaustedError`` is raised.
* any other status >= 400: raised immediately, as ``ProviderRejectedError``
  when the body is JSON and ``InvalidProviderResponseError`` when it is not.
* network errors (``httpx.HTTPError``): retried; re-raised on the final attempt.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable

import httpx

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[Any]]


class ProviderError(Exception):
    """Base class for failures talking to the generative provider."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class QuotaExhaustedError(ProviderError):
    """Provider kept answering 429 until the retry budget ran out."""


class ProviderRejectedError(ProviderError):
    """Provider answered with a structured (JSON) error."""


class InvalidProviderResponseError(ProviderError):
    """Provider answered with an error status and a body that is not JSON."""


class RequestFailedError(ProviderError):
    """Retry budget exhausted without a success or an explicit terminal error."""


def _is_json(response: httpx.Response) -> bool:
    return "application/json" in response.headers.get("content-type", "")


def _rejection(response: httpx.Response) -> ProviderError:
    try:
        body = response.json()
    except ValueError:
        return InvalidProviderResponseError(
            f"AI Service returned an invalid response (not JSON). Status: {response.status_code}",
            status_code=response.status_code,
        )
    message = None
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        message = body["error"].get("message")
    return ProviderRejectedError(
        f"AI Service Error: {message or response.reason_phrase}",
        status_code=response.status_code,
    )


async def fetch_with_backoff(
    operation: Callable[[], Awaitable[httpx.Response]],
    *,
    retries: int = 3,
    base_delay: float = 1.0,
    sleep: Sleep = asyncio.sleep,
) -> Any:
    """Run ``operation`` up to ``retries`` times and return the parsed JSON body."""
    for attempt in range(retries):
        delay = base_delay * (2 ** attempt)
        final = attempt == retries - 1
        try:
            response = await operation()
        except httpx.HTTPError as e:
            if final:
                raise
            logger.warning(
                "Request error (%s). Retrying in %.2fs... Attempt %d of %d.",
                e, delay, attempt + 1, retries,
            )
            await sleep(delay)
            continue

        if response.is_success and _is_json(response):
            return response.json()

        if response.status_code == 429:
            logger.warning(
                "Quota exceeded (429). Retrying in %.2fs... Attempt %d of %d.",
                delay, attempt + 1, retries,
            )
            if final:
                raise QuotaExhaustedError(
                    "AI Service Error: Quota Exhausted (429). Please check your API key usage.",
                    status_code=429,
                )
        elif response.status_code >= 400:
            logger.error("AI API error response: %s %s", response.status_code, response.text[:500])
            raise _rejection(response)
        else:
            logger.warning(
                "Request returned status %s (%s). Retrying in %.2fs... Attempt %d of %d.",
                response.status_code,
                response.headers.get("content-type", "no content-type"),
                delay, attempt + 1, retries,
            )

        if not final:
            await sleep(delay)

    raise RequestFailedError("Request failed after multiple retries.")
