"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx
import pytest

from siteforge.config import Settings
from siteforge.state import build_state


def gemini_body(text: str) -> dict[str, Any]:
    """A minimal successful generateContent response."""
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


class FakeProvider:
    """Provider double. Each call consumes the next outcome: text, dict body, or exception."""

    def __init__(self, outcomes: list[Any] | None = None, delay: float = 0.0):
        self.outcomes = list(outcomes) if outcomes is not None else []
        self.delay = delay
        self.calls: list[tuple[str, str]] = []

    async def generate_content(self, system_prompt: str, user_prompt: str) -> dict[str, Any]:
        self.calls.append((system_prompt, user_prompt))
        if self.delay:
            await asyncio.sleep(self.delay)
        outcome = self.outcomes.pop(0) if self.outcomes else f"<html>site {len(self.calls)}</html>"
        if isinstance(outcome, Exception):
            raise outcome
        if isinstance(outcome, dict):
            return outcome
        return gemini_body(outcome)


def parse_sse(text: str) -> list[tuple[str | None, dict[str, Any]]]:
    """Split an SSE body into (event name, data) pairs."""
    messages = []
    for block in text.split("\n\n"):
        if not block.strip():
            continue
        event = None
        data = None
        for line in block.splitlines():
            if line.startswith("event: "):
                event = line[len("event: "):]
            elif line.startswith("data: "):
                data = json.loads(line[len("data: "):])
        messages.append((event, data))
    return messages


def collect(agen) -> list:
    async def _run():
        return [item async for item in agen]

    return asyncio.run(_run())


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        gemini_api_key="test-gemini-key",
        razorpay_key_id="rzp_test_key",
        razorpay_key_secret="rzp_test_secret",
        provider_base_delay_seconds=0.0,
        job_deadline_seconds=None,
        admin_password="letmein",
        seed_demo_orders=True,
    )


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()


@pytest.fixture
def razorpay_handler():
    """Default Razorpay double: every order create succeeds."""
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        body = json.loads(request.content)
        return httpx.Response(
            200,
            json={"id": "order_test_001", "amount": body["amount"], "currency": body["currency"]},
        )

    handler.requests = requests
    return handler


@pytest.fixture
def state(settings, provider, razorpay_handler):
    http = httpx.AsyncClient(transport=httpx.MockTransport(razorpay_handler))
    return build_state(settings, http=http, provider=provider)


@pytest.fixture
def client(state):
    from fastapi.testclient import TestClient

    from backend.main import create_app

    with TestClient(create_app(state)) as c:
        yield c
