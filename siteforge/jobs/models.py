"""Generation job schema and status."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field


class JobStatus(str, Enum):
    PENDING = "pending"
    STREAMING = "streaming"


class GenerationJob(BaseModel):
    """One request to generate the full set of design variants for a business."""

    job_id: str
    business_name: str
    business_type: str
    status: JobStatus = JobStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.utcnow)
