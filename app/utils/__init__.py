"""Utility functions and classes."""

from app.utils.filters import JobFilter
from app.utils.uploads import ValidatedUpload, read_image_upload, read_resume_upload
from app.utils.validators import (
    ValidationResult,
    validate_job_create,
    validate_job_update,
)

__all__ = [
    "JobFilter",
    "ValidatedUpload",
    "ValidationResult",
    "read_image_upload",
    "read_resume_upload",
    "validate_job_create",
    "validate_job_update",
]
