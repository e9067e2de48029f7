"""Stream driver: runs one job's variants in order and yields outbound events.

Each job walks the variant plan sequentially. Every finished variant becomes a
data event; the stream ends with exactly one ``done`` or ``error`` event, or
with nothing at all when the client has gone away. The job is removed from the
registry when the stream ends, whichever way it ends.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, AsyncIterator, Awaitable, Callable, Sequence

from pydantic import BaseModel, ConfigDict

from siteforge.generation.generator import SiteGenerator
from siteforge.generation.variants import DesignVariant, get_variant_plan
from siteforge.jobs import GenerationJob, JobStore

logger = logging.getLogger(__name__)

DONE_EVENT = "done"
ERROR_EVENT = "error"

Liveness = Callable[[], Awaitable[bool]]


class GeneratedSite(BaseModel):
    model_config = ConfigDict(frozen=True)

    html: str
    variant: DesignVariant
    index: int

    def to_payload(self) -> dict[str, Any]:
        return {
            "html": self.html,
            "design": self.variant.model_dump(by_alias=True),
            "index": self.index,
        }


@dataclass(frozen=True)
class StreamEvent:
    """One outbound message. ``event`` is None for plain data messages."""

    data: dict[str, Any]
    event: str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.event in (DONE_EVENT, ERROR_EVENT)


class GenerationTimeoutError(Exception):
    pass


class StreamDriver:
    def __init__(
        self,
        jobs: JobStore,
        generator: SiteGenerator,
        variants: Sequence[DesignVariant] | None = None,
        deadline_seconds: float | None = None,
    ):
        self.jobs = jobs
        self.generator = generator
        self.variants = list(variants) if variants is not None else get_variant_plan()
        self.deadline_seconds = deadline_seconds

    def release(self, job_id: str) -> bool:
        """Remove the job from the registry. Only the first call has an effect."""
        removed = self.jobs.delete(job_id)
        if removed:
            logger.info("Job %s: Closing connection.", job_id)
        return removed

    async def _generate(self, job: GenerationJob, variant: DesignVariant, deadline: float | None) -> str:
        call = self.generator.generate(
            job.business_name, job.business_type, variant.style, variant.color_theme
        )
        if deadline is None:
            return await call
        remaining = deadline - asyncio.get_running_loop().time()
        if remaining <= 0:
            call.close()
            raise GenerationTimeoutError("Generation timed out.")
        try:
            return await asyncio.wait_for(call, timeout=remaining)
        except asyncio.TimeoutError:
            raise GenerationTimeoutError("Generation timed out.") from None

    async def run(
        self,
        job: GenerationJob,
        is_disconnected: Liveness | None = None,
    ) -> AsyncIterator[StreamEvent]:
        deadline = None
        if self.deadline_seconds is not None:
            deadline = asyncio.get_running_loop().time() + self.deadline_seconds
        try:
            for index, variant in enumerate(self.variants):
                if is_disconnected is not None and await is_disconnected():
                    logger.info("Job %s: Client disconnected.", job.job_id)
                    return
                logger.info(
                    "Job %s: Generating design %d (%s)...", job.job_id, index + 1, variant.style
                )
                try:
                    html = await self._generate(job, variant, deadline)
                except Exception as e:
                    logger.error("Job %s: Error during generation: %s", job.job_id, e, exc_info=True)
                    yield StreamEvent(data={"error": str(e)}, event=ERROR_EVENT)
                    return
                site = GeneratedSite(html=html, variant=variant, index=index)
                yield StreamEvent(data=site.to_payload())

            logger.info("Job %s: All designs complete.", job.job_id)
            yield StreamEvent(data={"message": "complete"}, event=DONE_EVENT)
        except asyncio.CancelledError:
            logger.info("Job %s: Client disconnected.", job.job_id)
            raise
        finally:
            self.release(job.job_id)
