"""Application service for job applications."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.core.exceptions import (
    DuplicateApplicationError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from app.core.security import ApplicantContext, RecruiterContext
from app.models.application import ApplicationStatus, JobApplication
from app.models.job import Job

logger = logging.getLogger(__name__)

VALID_STATUSES = {s.value for s in ApplicationStatus}


class ApplicationService:
    """Core service for the job application workflow.

    Applicants submit and read their own applications. Companies read and
    decide on applications to the jobs they own. Any owning company may
    move an application to any status at any time.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _find(self, user_id: str, job_id: str) -> JobApplication | None:
        result = await self.session.execute(
            select(JobApplication).where(
                JobApplication.user_id == user_id,
                JobApplication.job_id == job_id,
            )
        )
        return result.scalar_one_or_none()

    async def apply(self, job_id: str, actor: ApplicantContext) -> JobApplication:
        """Submit an application to a visible job.

        The unique (user_id, job_id) index decides between concurrent
        submissions for the same pair; the loser gets
        DuplicateApplicationError.
        """
        job = await self.session.get(Job, job_id)
        if job is None or not job.visible:
            raise NotFoundError("Job not found or is no longer accepting applications.")

        application = JobApplication(
            user_id=actor.user_id,
            job_id=job.id,
            company_id=job.company_id,
            status=ApplicationStatus.PENDING.value,
        )
        self.session.add(application)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            if await self._find(actor.user_id, job_id) is not None:
                logger.info(f"{actor.log_label} already applied to job {job_id}")
                raise DuplicateApplicationError(job_id=job_id, user_id=actor.user_id)
            raise

        logger.info(f"{actor.log_label} applied to job {job_id}")
        return application

    async def list_for_applicant(self, actor: ApplicantContext) -> list[JobApplication]:
        """The applicant's applications with job and company loaded, newest first."""
        result = await self.session.execute(
            select(JobApplication)
            .options(joinedload(JobApplication.job).joinedload(Job.company))
            .where(JobApplication.user_id == actor.user_id)
            .order_by(JobApplication.date.desc())
        )
        return list(result.scalars())

    async def list_for_job(
        self, job_id: str, actor: RecruiterContext
    ) -> list[JobApplication]:
        """Applications to one owned job with applicants loaded.

        A missing job is reported as forbidden so job IDs of other companies
        cannot be probed.
        """
        job = await self.session.get(Job, job_id)
        if job is None or job.company_id != actor.company_id:
            logger.warning(f"{actor.log_label} denied applications of job {job_id}")
            raise ForbiddenError("Not authorized to view applications for this job.")

        result = await self.session.execute(
            select(JobApplication)
            .options(joinedload(JobApplication.user))
            .where(JobApplication.job_id == job_id)
            .order_by(JobApplication.date.desc())
        )
        return list(result.scalars())

    async def list_for_company(self, actor: RecruiterContext) -> list[JobApplication]:
        """Applications across every job the company owns."""
        result = await self.session.execute(
            select(JobApplication)
            .options(
                joinedload(JobApplication.user),
                joinedload(JobApplication.job),
            )
            .where(JobApplication.company_id == actor.company_id)
            .order_by(JobApplication.date.desc())
        )
        return list(result.scalars())

    async def set_status(
        self, application_id: str, new_status: str | None, actor: RecruiterContext
    ) -> JobApplication:
        """Set the status of an application owned by the acting company."""
        if new_status not in VALID_STATUSES:
            raise ValidationError(
                "Invalid status. Must be 'pending', 'accepted', or 'rejected'."
            )

        application = await self.session.get(JobApplication, application_id)
        if application is None:
            raise NotFoundError("Application not found.")

        if application.company_id != actor.company_id:
            logger.warning(
                f"{actor.log_label} denied status change on application {application_id}"
            )
            raise ForbiddenError("Not authorized to update this application.")

        previous = application.status
        application.status = new_status
        await self.session.commit()
        logger.info(
            f"Application {application_id} {previous} -> {new_status} by {actor.log_label}"
        )
        return application
