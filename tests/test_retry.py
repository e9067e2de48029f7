"""Tests for the backoff transport."""

import asyncio

import httpx
import pytest

from siteforge.llm import (
    InvalidProviderResponseError,
    ProviderRejectedError,
    QuotaExhaustedError,
    RequestFailedError,
    fetch_with_backoff,
)


class ScriptedCalls:
    """Operation double that replays a list of responses/exceptions."""

    def __init__(self, script):
        self.script = list(script)
        self.count = 0

    async def __call__(self) -> httpx.Response:
        self.count += 1
        item = self.script.pop(0)
        if isinstance(item, Exception):
            raise item
        return item


class RecordingSleep:
    def __init__(self):
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def _run(script, **kwargs):
    calls = ScriptedCalls(script)
    sleep = RecordingSleep()
    result = asyncio.run(fetch_with_backoff(calls, sleep=sleep, **kwargs))
    return result, calls, sleep


def _ok(body=None):
    return httpx.Response(200, json=body if body is not None else {"ok": True})


def test_success_first_attempt_returns_body():
    result, calls, sleep = _run([_ok({"answer": 42})])
    assert result == {"answer": 42}
    assert calls.count == 1
    assert sleep.delays == []


def test_429_twice_then_success_waits_with_doubling_delays():
    result, calls, sleep = _run(
        [httpx.Response(429), httpx.Response(429), _ok({"done": True})],
        retries=3,
        base_delay=1.0,
    )
    assert result == {"done": True}
    assert calls.count == 3
    assert len(sleep.delays) == 2
    assert sleep.delays[1] >= 2 * sleep.delays[0]
    assert sleep.delays == [1.0, 2.0]


def test_429_on_every_attempt_raises_quota_exhausted():
    with pytest.raises(QuotaExhaustedError) as exc:
        _run([httpx.Response(429)] * 3, retries=3, base_delay=0.5)
    assert exc.value.status_code == 429
    assert "Quota Exhausted" in str(exc.value)


def test_json_error_body_is_rejected_without_retry():
    calls = ScriptedCalls([httpx.Response(400, json={"error": {"message": "API key not valid"}})])
    with pytest.raises(ProviderRejectedError) as exc:
        asyncio.run(fetch_with_backoff(calls, sleep=RecordingSleep()))
    assert "API key not valid" in str(exc.value)
    assert exc.value.status_code == 400
    assert calls.count == 1


def test_non_json_error_body_is_invalid_response():
    calls = ScriptedCalls([httpx.Response(502, text="<html>Bad Gateway</html>")])
    with pytest.raises(InvalidProviderResponseError) as exc:
        asyncio.run(fetch_with_backoff(calls, sleep=RecordingSleep()))
    assert exc.value.status_code == 502
    assert "502" in str(exc.value)
    assert calls.count == 1


def test_rejected_and_invalid_are_distinct_types():
    assert not issubclass(ProviderRejectedError, InvalidProviderResponseError)
    assert not issubclass(InvalidProviderResponseError, ProviderRejectedError)


def test_network_error_is_retried():
    request = httpx.Request("POST", "https://provider.test")
    result, calls, sleep = _run(
        [httpx.ConnectError("boom", request=request), _ok()],
        base_delay=0.25,
    )
    assert result == {"ok": True}
    assert calls.count == 2
    assert sleep.delays == [0.25]


def test_network_error_on_final_attempt_propagates():
    request = httpx.Request("POST", "https://provider.test")
    script = [httpx.ConnectError("down", request=request) for _ in range(3)]
    with pytest.raises(httpx.ConnectError):
        _run(script, retries=3)


def test_success_without_json_content_type_exhausts_budget():
    script = [httpx.Response(200, text="not json") for _ in range(3)]
    with pytest.raises(RequestFailedError):
        _run(script, retries=3)
