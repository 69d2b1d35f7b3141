"""Job application routes."""

from fastapi import APIRouter, Depends, status

from app.core.security import ApplicantContext, RecruiterContext
from app.dependencies import (
    get_application_service,
    get_current_applicant,
    get_current_company,
)
from app.schemas.application import (
    ApplicantSummary,
    ApplicationOut,
    JobSummary,
    StatusUpdateRequest,
)
from app.schemas.company import CompanySummary
from app.services.application_service import ApplicationService

router = APIRouter(prefix="/applications", tags=["applications"])


@router.post("/{job_id}", status_code=status.HTTP_201_CREATED)
async def apply_for_job(
    job_id: str,
    actor: ApplicantContext = Depends(get_current_applicant),
    service: ApplicationService = Depends(get_application_service),
):
    """Apply to a visible job."""
    application = await service.apply(job_id, actor)
    return {
        "success": True,
        "message": "Application submitted successfully.",
        "application": ApplicationOut.from_model(application),
    }


@router.get("/user")
async def list_user_applications(
    actor: ApplicantContext = Depends(get_current_applicant),
    service: ApplicationService = Depends(get_application_service),
):
    """The caller's applications with job and company details."""
    applications = await service.list_for_applicant(actor)
    items = [
        ApplicationOut.from_model(
            a,
            job=JobSummary.from_model(a.job, company=CompanySummary.from_model(a.job.company)),
        )
        for a in applications
    ]
    return {"success": True, "applications": items, "total": len(items)}


@router.get("/company")
async def list_company_applications(
    actor: RecruiterContext = Depends(get_current_company),
    service: ApplicationService = Depends(get_application_service),
):
    """Applications across every job the caller owns."""
    applications = await service.list_for_company(actor)
    items = [
        ApplicationOut.from_model(
            a,
            job=JobSummary.from_model(a.job, brief=True),
            applicant=ApplicantSummary.from_model(a.user) if a.user else None,
        )
        for a in applications
    ]
    return {"success": True, "applications": items, "total": len(items)}


@router.get("/job/{job_id}")
async def list_job_applications(
    job_id: str,
    actor: RecruiterContext = Depends(get_current_company),
    service: ApplicationService = Depends(get_application_service),
):
    """Applications to one of the caller's jobs."""
    applications = await service.list_for_job(job_id, actor)
    items = [
        ApplicationOut.from_model(
            a, applicant=ApplicantSummary.from_model(a.user) if a.user else None
        )
        for a in applications
    ]
    return {"success": True, "applications": items, "total": len(items)}


@router.patch("/{application_id}/status")
async def update_application_status(
    application_id: str,
    payload: StatusUpdateRequest,
    actor: RecruiterContext = Depends(get_current_company),
    service: ApplicationService = Depends(get_application_service),
):
    """Set an application's status; any status may follow any other."""
    application = await service.set_status(application_id, payload.status, actor)
    return {
        "success": True,
        "message": f"Application {application.status}.",
        "application": ApplicationOut.from_model(application),
    }
