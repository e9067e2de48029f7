"""Single-site HTML generator.

Renders the system/user prompts for one (business, style, palette) request,
calls the provider, and normalizes the answer to bare markup.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from siteforge.llm.base import SiteProvider

logger = logging.getLogger(__name__)

PROMPTS_DIR = Path(__file__).resolve().parent.parent / "prompts"
LOGO_PLACEHOLDER_URL = "https://placehold.co/150x50/FFFFFF/000000?text={text}"


class GenerationFailedError(Exception):
    """Provider answered, but without usable HTML."""

    def __init__(self, style: str):
        super().__init__(f"HTML generation failed for style: {style}. Invalid API response.")
        self.style = style


def strip_code_fence(raw: str) -> str:
    s = raw.strip()
    if s.startswith("```"):
        s = re.sub(r"^```\w*\n?", "", s)
    if s.endswith("```"):
        s = re.sub(r"\n?```\s*$", "", s)
    return s.strip()


def placeholder_logo_url(business_name: str) -> str:
    return LOGO_PLACEHOLDER_URL.format(text=re.sub(r"\s+", "+", business_name.strip()))


def _render_prompt(template_name: str, **kwargs: Any) -> str:
    env = Environment(loader=FileSystemLoader(str(PROMPTS_DIR)))
    return env.get_template(template_name).render(**kwargs)


def _extract_text(body: Any) -> str | None:
    """Pull ``candidates[0].content.parts[0].text`` out of a generateContent body."""
    try:
        text = body["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text if isinstance(text, str) and text.strip() else None


class SiteGenerator:
    """Produces one HTML mockup per call."""

    def __init__(self, provider: SiteProvider):
        self._provider = provider

    async def generate(
        self,
        business_name: str,
        business_type: str,
        style: str,
        color_theme: str,
    ) -> str:
        system_prompt = _render_prompt("site_system.j2")
        user_prompt = _render_prompt(
            "site_user.j2",
            business_name=business_name,
            business_type=business_type,
            style=style,
            color_theme=color_theme,
            logo_url=placeholder_logo_url(business_name),
        )
        body = await self._provider.generate_content(system_prompt, user_prompt)
        text = _extract_text(body)
        if text is None:
            logger.error("Unexpected API response structure: %s", str(body)[:500])
            raise GenerationFailedError(style)
        return strip_code_fence(text)
