"""Pydantic schemas for request/response validation."""

from app.schemas.application import (
    ApplicantSummary,
    ApplicationOut,
    JobSummary,
    StatusUpdateRequest,
)
from app.schemas.company import (
    CompanyLoginRequest,
    CompanyOut,
    CompanyProfileOut,
    CompanySummary,
)
from app.schemas.job import JobCreateRequest, JobOut, JobUpdateRequest, Pagination
from app.schemas.user import UserOut, UserUpdateRequest

__all__ = [
    "ApplicantSummary",
    "ApplicationOut",
    "CompanyLoginRequest",
    "CompanyOut",
    "CompanyProfileOut",
    "CompanySummary",
    "JobCreateRequest",
    "JobOut",
    "JobSummary",
    "JobUpdateRequest",
    "Pagination",
    "StatusUpdateRequest",
    "UserOut",
    "UserUpdateRequest",
]
