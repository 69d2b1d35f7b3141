"""Application services."""

from app.services.application_service import ApplicationService
from app.services.company_service import CompanyService
from app.services.identity_client import IdentityProviderClient
from app.services.identity_sync import IdentitySyncService
from app.services.job_service import JobService
from app.services.user_service import UserService

__all__ = [
    "ApplicationService",
    "CompanyService",
    "IdentityProviderClient",
    "IdentitySyncService",
    "JobService",
    "UserService",
]
