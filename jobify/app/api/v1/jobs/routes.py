"""
Jobs API - create, list/search, read, edit and delete the current user's job applications.
All endpoints require authentication. Mutations return the job or null; they never raise on bad input.
"""
import json
from typing import Any, Optional

from fastapi import APIRouter, Depends, Request, Response
from sqlalchemy.orm import Session

from jobify.app.core.config import INVALIDATE_HEADER
from jobify.app.core.dependencies import get_current_user_id, get_db
from jobify.app.core.exceptions import JobNotFoundRedirect
from jobify.app.core.logging_config import get_logger
from jobify.app.schemas.job import JobListOut, JobOut, job_model_to_out
from jobify.app.services import invalidation
from jobify.app.services.job_service import JobService

logger = get_logger("api.jobs")
router = APIRouter(prefix="/jobs", tags=["jobs"])


async def _read_form_values(request: Request) -> Any:
    """JSON body as-is; an empty or undecodable body becomes None and fails validation."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        logger.warning("Undecodable job body path=%s bytes=%d", request.url.path, len(raw))
        return None


async def _announce_mutation(response: Response, user_id: int) -> None:
    stale = await invalidation.publish(user_id, invalidation.JOB_MUTATION_RESOURCES)
    response.headers[INVALIDATE_HEADER] = invalidation.header_value(stale)


@router.post("", response_model=Optional[JobOut])
async def create_job(
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Create a job from form values. Returns null when the values are invalid or the insert fails."""
    job = JobService.create_job(db, user_id, await _read_form_values(request))
    if not job:
        return None
    await _announce_mutation(response, user_id)
    return job_model_to_out(job)


@router.get("", response_model=JobListOut)
def list_jobs(
    search: str | None = None,
    status: str | None = None,
    page: int = 1,
    limit: int | None = None,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """
    Paginated job list, newest first.

    - **search**: substring of position or company
    - **status**: pending | interview | declined | all
    - **page**: 1-based page number
    - **limit**: page size
    """
    result = JobService.list_jobs(db, user_id, search=search, status=status, page=page, limit=limit)
    return JobListOut(
        jobs=[job_model_to_out(j) for j in result["jobs"]],
        count=result["count"],
        page=result["page"],
        totalPages=result["totalPages"],
    )


@router.get("/{job_id}", response_model=JobOut)
def get_job(
    job_id: str,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Single job. Redirects to the job list when it does not exist or is not yours."""
    job = JobService.get_job(db, job_id, user_id)
    if not job:
        logger.info("Job not found user_id=%s job_id=%s", user_id, job_id)
        raise JobNotFoundRedirect(job_id)
    return job_model_to_out(job)


@router.patch("/{job_id}", response_model=Optional[JobOut])
async def update_job(
    job_id: str,
    request: Request,
    response: Response,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Replace position, company, location, status and mode. Returns null on failure."""
    job = JobService.update_job(db, job_id, user_id, await _read_form_values(request))
    if not job:
        return None
    await _announce_mutation(response, user_id)
    return job_model_to_out(job)


@router.delete("/{job_id}", response_model=Optional[JobOut])
async def delete_job(
    job_id: str,
    response: Response,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Delete a job and return it. Returns null when it does not exist or is not yours."""
    deleted = JobService.delete_job(db, job_id, user_id)
    if not deleted:
        return None
    await _announce_mutation(response, user_id)
    return deleted
