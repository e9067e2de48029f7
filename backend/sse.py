"""Server-Sent Events framing for stream driver events."""

import json
from contextlib import aclosing
from typing import AsyncGenerator, AsyncIterator

from siteforge.generation import StreamEvent

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}


def encode_sse(event: StreamEvent) -> str:
    lines = []
    if event.event:
        lines.append(f"event: {event.event}")
    lines.append(f"data: {json.dumps(event.data)}")
    return "\n".join(lines) + "\n\n"


async def sse_body(events: AsyncGenerator[StreamEvent, None]) -> AsyncIterator[str]:
    """Frame events as SSE; closing this body closes the producer too."""
    async with aclosing(events):
        async for event in events:
            yield encode_sse(event)
