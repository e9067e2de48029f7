"""Generation API: start a job, then stream its designs over SSE.

POST /api/start-generation
  → Registers a pending job, returns { success, jobId }.

GET /api/generation-stream/{job_id}
  → text/event-stream: one data event per design (index 0..5), then a
    named ``done`` event, or a named ``error`` event on the first failure.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from starlette.background import BackgroundTask

from backend.deps import get_state
from backend.sse import SSE_HEADERS, sse_body
from siteforge.state import AppState

logger = logging.getLogger(__name__)
router = APIRouter()


class StartGenerationRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    business_name: str | None = None
    business_type: str | None = None


@router.post("/start-generation")
async def start_generation(request: StartGenerationRequest, state: AppState = Depends(get_state)):
    """Create a generation job for the business."""
    business_name = (request.business_name or "").strip()
    business_type = (request.business_type or "").strip()
    if not business_name or not business_type:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Business Name and Type are required.",
        )
    job = state.jobs.create(business_name, business_type)
    return {"success": True, "jobId": job.job_id}


@router.get("/generation-stream/{job_id}")
async def generation_stream(job_id: str, request: Request, state: AppState = Depends(get_state)):
    """Stream the job's designs. Each job can be streamed once."""
    job = state.jobs.take(job_id)
    if job is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Job not found.")

    events = state.driver.run(job, is_disconnected=request.is_disconnected)
    return StreamingResponse(
        sse_body(events),
        media_type="text/event-stream",
        headers=SSE_HEADERS,
        background=BackgroundTask(state.driver.release, job.job_id),
    )
