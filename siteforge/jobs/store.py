"""Generation job storage: in-memory registry keyed by job id."""

from __future__ import annotations

import logging
import uuid
from threading import Lock
from typing import Protocol

from siteforge.jobs.models import GenerationJob, JobStatus

logger = logging.getLogger(__name__)


class JobStore(Protocol):
    def create(self, business_name: str, business_type: str) -> GenerationJob: ...
    def get(self, job_id: str) -> GenerationJob | None: ...
    def take(self, job_id: str) -> GenerationJob | None: ...
    def delete(self, job_id: str) -> bool: ...
    def count(self) -> int: ...


class InMemoryJobStore:
    """Thread-safe in-memory job registry. Jobs never expire on their own."""

    def __init__(self) -> None:
        self._jobs: dict[str, GenerationJob] = {}
        self._lock = Lock()

    def create(self, business_name: str, business_type: str) -> GenerationJob:
        with self._lock:
            job_id = _new_job_id()
            while job_id in self._jobs:
                job_id = _new_job_id()
            job = GenerationJob(
                job_id=job_id,
                business_name=business_name,
                business_type=business_type,
            )
            self._jobs[job_id] = job
        logger.info("New generation job created: %s", job_id)
        return job

    def get(self, job_id: str) -> GenerationJob | None:
        with self._lock:
            return self._jobs.get(job_id)

    def take(self, job_id: str) -> GenerationJob | None:
        """Claim a pending job for streaming. Returns None if unknown or already claimed."""
        with self._lock:
            job = self._jobs.get(job_id)
            if job is None or job.status is not JobStatus.PENDING:
                return None
            job.status = JobStatus.STREAMING
            return job

    def delete(self, job_id: str) -> bool:
        with self._lock:
            return self._jobs.pop(job_id, None) is not None

    def count(self) -> int:
        with self._lock:
            return len(self._jobs)


def _new_job_id() -> str:
    return f"job_{uuid.uuid4().hex[:16]}"
