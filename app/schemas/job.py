"""Schemas for job postings."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from app.models.job import Job
from app.schemas.company import CompanySummary


class JobCreateRequest(BaseModel):
    """Job definition; required fields are enforced by the service."""

    title: str | None = None
    description: str | None = None
    location: str | None = None
    category: str | None = Field(None, description="One of the job categories")
    level: str | None = Field(None, description="One of the job levels")
    salary: Any = Field(None, description="Non-negative number")


class JobUpdateRequest(JobCreateRequest):
    """Partial update; only fields present in the body are applied."""

    visible: Any = None


class JobOut(BaseModel):
    id: str
    title: str
    description: str
    location: str
    category: str
    level: str
    salary: float
    company_id: str
    visible: bool
    date: datetime
    company: CompanySummary | None = None

    @classmethod
    def from_model(cls, job: Job, company: CompanySummary | None = None) -> "JobOut":
        return cls(**job.to_dict(), company=company)


class Pagination(BaseModel):
    total: int
    page: int
    limit: int
    pages: int
