"""Job board API: companies post jobs, job seekers apply."""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, settings as default_settings
from app.core.errors import register_exception_handlers
from app.core.security import PasswordHasher, TokenIssuer
from app.core.storage import Database
from app.routers import (
    applications_router,
    company_router,
    jobs_router,
    users_router,
    webhooks_router,
)
from app.services.blob import BlobStore, create_blob_store
from app.services.identity_client import IdentityProviderClient
from app.services.webhook_verifier import WebhookVerifier

log_level = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "X-DNS-Prefetch-Control": "off",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
}


def create_app(
    settings: Settings | None = None,
    *,
    blob_store: BlobStore | None = None,
    identity_provider: IdentityProviderClient | None = None,
) -> FastAPI:
    """Build the application.

    Collaborators not passed in are constructed from ``settings`` when the
    application starts.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager."""
        logger.info(f"Initializing application ({settings.app_env})...")
        app.state.db = Database(settings.database_url)
        await app.state.db.init_models()

        app.state.blob_store = blob_store or create_blob_store(settings)
        app.state.identity_provider = identity_provider or IdentityProviderClient(
            settings.identity_api_base, settings.identity_secret_key
        )
        app.state.webhook_verifier = (
            WebhookVerifier(settings.identity_webhook_secret)
            if settings.identity_webhook_secret
            else None
        )
        if app.state.webhook_verifier is None:
            logger.warning("Identity webhook secret not set; user sync is disabled")
        logger.info("Application initialized")

        yield

        logger.info("Shutting down...")
        if identity_provider is None:
            await app.state.identity_provider.close()
        await app.state.db.dispose()
        logger.info("Shutdown complete")

    app = FastAPI(
        title="Job Board API",
        description="Companies post jobs, job seekers apply, recruiters review",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.password_hasher = PasswordHasher(settings.password_hash_rounds)
    app.state.token_issuer = TokenIssuer(settings.jwt_secret, settings.jwt_expire_days)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    register_exception_handlers(app, production=settings.is_production)

    app.include_router(company_router)
    app.include_router(jobs_router)
    app.include_router(applications_router)
    app.include_router(users_router)
    app.include_router(webhooks_router)

    @app.get("/")
    async def api_info():
        """API information endpoint."""
        return {
            "success": True,
            "message": "Job Board API is running",
            "version": VERSION,
            "endpoints": {
                "company": "/company",
                "jobs": "/jobs",
                "applications": "/applications",
                "users": "/users",
                "webhooks": "/webhooks",
            },
        }

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"success": True, "status": "healthy", "service": "jobboard"}

    return app


app = create_app()
