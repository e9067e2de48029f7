"""Abstract provider protocol."""

from typing import Any, Protocol


class SiteProvider(Protocol):
    """Protocol for generative backends that answer a system + user prompt pair."""

    async def generate_content(self, system_prompt: str, user_prompt: str) -> dict[str, Any]:
        """Return the provider's parsed JSON response body."""
        ...
