"""
jobs.py
- Purpose: API routes for jobs.
"""

from fastapi import APIRouter, Depends, status

from jobly.api.deps import get_job_filters, get_job_read, get_job_write
from jobly.auth.deps import require_admin_token
from jobly.core.request_context import set_context
from jobly.repos.job.read import JobReadRepo
from jobly.repos.job.write import JobWriteRepo
from jobly.schemas.job import (
    JobDeletedResponse,
    JobListResponse,
    JobNew,
    JobResponse,
    JobUpdate,
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.post(
    "",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin_token)],
)
def create_job(payload: JobNew, repo: JobWriteRepo = Depends(get_job_write)):
    set_context(handle=payload.company_handle)
    job = repo.create(
        title=payload.title,
        salary=payload.salary,
        equity=payload.equity,
        company_handle=payload.company_handle,
    )
    return {"job": job}


@router.get("", response_model=JobListResponse)
def list_jobs(
    filters: dict = Depends(get_job_filters),
    repo: JobReadRepo = Depends(get_job_read),
):
    """Optional filters: minSalary, hasEquity (true/false), title (case-insensitive, partial)."""
    return {"jobs": repo.find_all(filters)}


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int, repo: JobReadRepo = Depends(get_job_read)):
    return {"job": repo.get(job_id)}


@router.patch("/{job_id}", response_model=JobResponse, dependencies=[Depends(require_admin_token)])
def update_job(job_id: int, payload: JobUpdate, repo: JobWriteRepo = Depends(get_job_write)):
    return {"job": repo.update(job_id, payload.changes())}


@router.delete("/{job_id}", response_model=JobDeletedResponse, dependencies=[Depends(require_admin_token)])
def delete_job(job_id: int, repo: JobWriteRepo = Depends(get_job_write)):
    repo.remove(job_id)
    return {"deleted": job_id}
