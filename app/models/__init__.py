"""Database models."""

from app.models.application import ApplicationStatus, JobApplication
from app.models.company import Company
from app.models.job import Job, JobCategory, JobLevel
from app.models.user import User

__all__ = [
    "ApplicationStatus",
    "Company",
    "Job",
    "JobApplication",
    "JobCategory",
    "JobLevel",
    "User",
]
