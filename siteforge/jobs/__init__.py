"""Generation job registry."""

from siteforge.jobs.models import GenerationJob, JobStatus
from siteforge.jobs.store import InMemoryJobStore, JobStore, _new_job_id

__all__ = ["GenerationJob", "JobStatus", "JobStore", "InMemoryJobStore", "_new_job_id"]
