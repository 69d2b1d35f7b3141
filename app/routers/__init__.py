"""API routers."""

from app.routers.applications import router as applications_router
from app.routers.company import router as company_router
from app.routers.jobs import router as jobs_router
from app.routers.users import router as users_router
from app.routers.webhooks import router as webhooks_router

__all__ = [
    "applications_router",
    "company_router",
    "jobs_router",
    "users_router",
    "webhooks_router",
]
