"""Job catalog service."""

import logging
import math
from dataclasses import dataclass
from typing import Any

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from app.core.exceptions import ForbiddenError, NotFoundError, ValidationError
from app.core.security import RecruiterContext
from app.models.application import JobApplication
from app.models.job import Job
from app.utils.filters import JobFilter
from app.utils.validators import validate_job_create, validate_job_update

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


@dataclass
class JobPage:
    """One page of the public job listing."""

    jobs: list[Job]
    total: int
    page: int
    limit: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0


class JobService:
    """Creation, listing and owner-scoped mutation of job postings."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, fields: dict[str, Any], actor: RecruiterContext) -> Job:
        validation = validate_job_create(fields)
        if not validation.is_valid:
            raise ValidationError(validation.error)

        job = Job(**validation.values, company_id=actor.company_id, visible=True)
        self.session.add(job)
        await self.session.commit()
        logger.info(f"Job {job.id} created by {actor.log_label}")
        return job

    async def list_visible(
        self,
        filters: JobFilter,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> JobPage:
        """Visible jobs matching ``filters``, newest first."""
        if page < 1 or limit < 1:
            raise ValidationError("Page and limit must be positive integers.")

        conditions = filters.clauses()
        total = await self.session.scalar(
            select(func.count()).select_from(Job).where(*conditions)
        )
        result = await self.session.execute(
            select(Job)
            .options(joinedload(Job.company))
            .where(*conditions)
            .order_by(Job.date.desc())
            .offset((page - 1) * limit)
            .limit(limit)
        )
        return JobPage(jobs=list(result.scalars()), total=total or 0, page=page, limit=limit)

    async def get_by_id(self, job_id: str) -> Job:
        """Job detail, returned whether or not it is visible."""
        result = await self.session.execute(
            select(Job).options(joinedload(Job.company)).where(Job.id == job_id)
        )
        job = result.scalar_one_or_none()
        if job is None:
            raise NotFoundError("Job not found.")
        return job

    async def list_for_company(self, company_id: str) -> list[Job]:
        result = await self.session.execute(
            select(Job).where(Job.company_id == company_id).order_by(Job.date.desc())
        )
        return list(result.scalars())

    async def _get_owned(self, job_id: str, actor: RecruiterContext, action: str) -> Job:
        job = await self.session.get(Job, job_id)
        if job is None:
            raise NotFoundError("Job not found.")
        if job.company_id != actor.company_id:
            logger.warning(f"{actor.log_label} denied {action} on job {job_id}")
            raise ForbiddenError(f"Not authorized to {action} this job.")
        return job

    async def update(
        self, job_id: str, fields: dict[str, Any], actor: RecruiterContext
    ) -> Job:
        """Apply the allow-listed fields present in ``fields``."""
        job = await self._get_owned(job_id, actor, "update")

        validation = validate_job_update(fields)
        if not validation.is_valid:
            raise ValidationError(validation.error)

        for name, value in validation.values.items():
            setattr(job, name, value)
        await self.session.commit()
        logger.info(f"Job {job_id} updated by {actor.log_label}")
        return job

    async def delete(self, job_id: str, actor: RecruiterContext) -> None:
        job = await self._get_owned(job_id, actor, "delete")
        await self.session.execute(
            delete(JobApplication).where(JobApplication.job_id == job.id)
        )
        await self.session.execute(delete(Job).where(Job.id == job.id))
        await self.session.commit()
        logger.info(f"Job {job_id} deleted by {actor.log_label}")

    async def toggle_visibility(self, job_id: str, actor: RecruiterContext) -> bool:
        """Flip the visibility flag and return the new value."""
        job = await self._get_owned(job_id, actor, "change visibility of")
        job.visible = not job.visible
        await self.session.commit()
        logger.info(f"Job {job_id} visible={job.visible} by {actor.log_label}")
        return job.visible
