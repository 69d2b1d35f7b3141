"""Schemas for job applications."""

from datetime import datetime

from pydantic import BaseModel, Field

from app.models.application import JobApplication
from app.models.job import Job
from app.models.user import User
from app.schemas.company import CompanySummary


class StatusUpdateRequest(BaseModel):
    status: str | None = Field(None, description="pending, accepted or rejected")


class ApplicantSummary(BaseModel):
    id: str
    name: str
    email: str
    image: str = ""
    resume: str = ""

    @classmethod
    def from_model(cls, user: User) -> "ApplicantSummary":
        return cls(**user.to_public())


class JobSummary(BaseModel):
    id: str
    title: str
    location: str
    category: str
    level: str
    salary: float | None = None
    date: datetime | None = None
    company: CompanySummary | None = None

    @classmethod
    def from_model(
        cls, job: Job, brief: bool = False, company: CompanySummary | None = None
    ) -> "JobSummary":
        """Summary of ``job``; ``brief`` leaves out salary and date."""
        return cls(
            id=job.id,
            title=job.title,
            location=job.location,
            category=job.category,
            level=job.level,
            salary=None if brief else job.salary,
            date=None if brief else job.date,
            company=company,
        )


class ApplicationOut(BaseModel):
    id: str
    user_id: str
    job_id: str
    company_id: str
    status: str
    date: datetime
    job: JobSummary | None = None
    applicant: ApplicantSummary | None = None

    @classmethod
    def from_model(
        cls,
        application: JobApplication,
        job: JobSummary | None = None,
        applicant: ApplicantSummary | None = None,
    ) -> "ApplicationOut":
        return cls(**application.to_dict(), job=job, applicant=applicant)
