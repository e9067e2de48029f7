"""Tests for the single-site generator."""

import asyncio

import httpx
import pytest

from conftest import FakeProvider
from siteforge.generation import GenerationFailedError, SiteGenerator, strip_code_fence
from siteforge.generation.generator import placeholder_logo_url
from siteforge.llm import GeminiProvider, ProviderRejectedError


def test_strip_code_fence_html_block():
    assert strip_code_fence("```html\n<div>x</div>\n```") == "<div>x</div>"


def test_strip_code_fence_surrounding_whitespace():
    assert strip_code_fence("  \n```html\n<div>x</div>\n```  \n") == "<div>x</div>"


def test_strip_code_fence_plain_markup_untouched():
    assert strip_code_fence("  <html><body>hi</body></html>\n") == "<html><body>hi</body></html>"


def test_strip_code_fence_bare_fence():
    assert strip_code_fence("```\n<p>a</p>\n```") == "<p>a</p>"


def test_placeholder_logo_url_is_url_safe():
    url = placeholder_logo_url("The  Green\tCafe")
    assert url == "https://placehold.co/150x50/FFFFFF/000000?text=The+Green+Cafe"


def test_generate_returns_normalized_html():
    provider = FakeProvider(["```html\n<html>ok</html>\n```"])
    html = asyncio.run(
        SiteGenerator(provider).generate("Green Cafe", "Restaurant", "Natural & Earthy", "Beige")
    )
    assert html == "<html>ok</html>"


def test_generate_prompts_embed_request_details():
    provider = FakeProvider(["<html></html>"])
    asyncio.run(
        SiteGenerator(provider).generate("Green Cafe", "Organic Restaurant", "Bold & Vibrant", "Dark Gray")
    )
    system_prompt, user_prompt = provider.calls[0]
    assert "Tailwind" in system_prompt
    assert "Hero" in system_prompt
    assert "No markdown" in system_prompt
    assert '"Bold & Vibrant" design style' in user_prompt
    assert '"Dark Gray" color palette' in user_prompt
    assert "Business Name: Green Cafe" in user_prompt
    assert "Business Type: Organic Restaurant" in user_prompt
    assert "text=Green+Cafe" in user_prompt


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"text": "   "}]}}]},
        {"error": {"message": "blocked"}},
    ],
)
def test_generate_missing_text_raises_generation_failed(body):
    provider = FakeProvider([body])
    with pytest.raises(GenerationFailedError) as exc:
        asyncio.run(SiteGenerator(provider).generate("A", "B", "Tech & Futuristic", "Cyan"))
    assert "Tech & Futuristic" in str(exc.value)
    assert exc.value.style == "Tech & Futuristic"


def test_gemini_provider_posts_payload_and_parses_body():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": "<p>hi</p>"}]}}]})

    async def _run():
        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as http:
            provider = GeminiProvider(
                http,
                "https://provider.test/v1beta/models/m:generateContent",
                api_key="k",
                base_delay=0.0,
            )
            return await SiteGenerator(provider).generate("A", "B", "Modern & Clean", "White")

    assert asyncio.run(_run()) == "<p>hi</p>"
    assert seen[0].headers["x-goog-api-key"] == "k"
    assert b"systemInstruction" in seen[0].content


def test_gemini_provider_without_key_is_rejected():
    async def _run():
        async with httpx.AsyncClient() as http:
            await GeminiProvider(http, "https://provider.test", api_key=None).generate_content("s", "u")

    with pytest.raises(ProviderRejectedError):
        asyncio.run(_run())
