"""Job catalog routes."""

from fastapi import APIRouter, Depends, Query, status

from app.core.security import RecruiterContext
from app.dependencies import get_current_company, get_job_service
from app.schemas.company import CompanySummary
from app.schemas.job import JobCreateRequest, JobOut, JobUpdateRequest, Pagination
from app.services.job_service import DEFAULT_LIMIT, DEFAULT_PAGE, JobService
from app.utils.filters import JobFilter

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get("")
async def list_jobs(
    category: str | None = Query(default=None),
    level: str | None = Query(default=None),
    location: str | None = Query(default=None, description="Substring, case-insensitive"),
    search: str | None = Query(default=None, description="Matches title or description"),
    page: int = Query(default=DEFAULT_PAGE, ge=1),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=100),
    service: JobService = Depends(get_job_service),
):
    """Visible jobs matching the filters, newest first."""
    filters = JobFilter(category=category, level=level, location=location, search=search)
    result = await service.list_visible(filters, page=page, limit=limit)
    return {
        "success": True,
        "jobs": [
            JobOut.from_model(job, CompanySummary.from_model(job.company))
            for job in result.jobs
        ],
        "pagination": Pagination(
            total=result.total, page=result.page, limit=result.limit, pages=result.pages
        ),
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_job(
    payload: JobCreateRequest,
    actor: RecruiterContext = Depends(get_current_company),
    service: JobService = Depends(get_job_service),
):
    """Create a job owned by the authenticated company."""
    job = await service.create(payload.model_dump(), actor)
    return {"success": True, "message": "Job created successfully.", "job": JobOut.from_model(job)}


@router.get("/company/list")
async def list_company_jobs(
    actor: RecruiterContext = Depends(get_current_company),
    service: JobService = Depends(get_job_service),
):
    """All jobs of the authenticated company, hidden ones included."""
    jobs = await service.list_for_company(actor.company_id)
    return {
        "success": True,
        "jobs": [JobOut.from_model(job) for job in jobs],
        "total": len(jobs),
    }


@router.get("/{job_id}")
async def get_job(job_id: str, service: JobService = Depends(get_job_service)):
    """Job detail, regardless of visibility."""
    job = await service.get_by_id(job_id)
    company = CompanySummary.from_model(job.company, include_email=True)
    return {"success": True, "job": JobOut.from_model(job, company)}


@router.put("/{job_id}")
async def update_job(
    job_id: str,
    payload: JobUpdateRequest,
    actor: RecruiterContext = Depends(get_current_company),
    service: JobService = Depends(get_job_service),
):
    """Update the allow-listed fields of an owned job."""
    job = await service.update(job_id, payload.model_dump(exclude_unset=True), actor)
    return {"success": True, "message": "Job updated successfully.", "job": JobOut.from_model(job)}


@router.delete("/{job_id}")
async def delete_job(
    job_id: str,
    actor: RecruiterContext = Depends(get_current_company),
    service: JobService = Depends(get_job_service),
):
    await service.delete(job_id, actor)
    return {"success": True, "message": "Job deleted successfully."}


@router.patch("/{job_id}/visibility")
async def toggle_job_visibility(
    job_id: str,
    actor: RecruiterContext = Depends(get_current_company),
    service: JobService = Depends(get_job_service),
):
    """Show or hide an owned job."""
    visible = await service.toggle_visibility(job_id, actor)
    return {
        "success": True,
        "message": f"Job is now {'visible' if visible else 'hidden'}.",
        "visible": visible,
    }
