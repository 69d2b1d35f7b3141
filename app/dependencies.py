"""FastAPI dependencies: storage session, collaborators and auth schemes."""

from collections.abc import AsyncGenerator

from fastapi import Cookie, Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import AuthenticationError
from app.core.security import (
    ApplicantContext,
    PasswordHasher,
    RecruiterContext,
    TokenIssuer,
)
from app.models.company import Company
from app.services.application_service import ApplicationService
from app.services.blob.base import BlobStore
from app.services.company_service import CompanyService
from app.services.identity_client import IdentityProviderClient
from app.services.job_service import JobService
from app.services.user_service import UserService

SESSION_COOKIE = "__session"


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Database session for the current request."""
    async with request.app.state.db.sessionmaker() as session:
        yield session


def get_blob_store(request: Request) -> BlobStore:
    return request.app.state.blob_store


def get_token_issuer(request: Request) -> TokenIssuer:
    return request.app.state.token_issuer


def get_password_hasher(request: Request) -> PasswordHasher:
    return request.app.state.password_hasher


def get_identity_provider(request: Request) -> IdentityProviderClient:
    return request.app.state.identity_provider


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization[len("Bearer "):].strip()
    return token or None


async def get_current_applicant(
    authorization: str | None = Header(None),
    session_cookie: str | None = Cookie(None, alias=SESSION_COOKIE),
    identity_provider: IdentityProviderClient = Depends(get_identity_provider),
) -> ApplicantContext:
    """Applicant scheme: session token verified by the identity provider."""
    token = _bearer_token(authorization) or session_cookie
    if not token:
        raise AuthenticationError("Not authorized. Please log in.", reason="missing")
    user_id = await identity_provider.verify_session(token)
    return ApplicantContext(user_id=user_id)


async def get_current_company(
    authorization: str | None = Header(None),
    tokens: TokenIssuer = Depends(get_token_issuer),
    session: AsyncSession = Depends(get_session),
) -> RecruiterContext:
    """Recruiter scheme: locally issued token plus company lookup."""
    token = _bearer_token(authorization)
    if not token:
        raise AuthenticationError("Not authorized. Token missing.", reason="missing")

    company_id = tokens.decode(token)
    company = await session.get(Company, company_id)
    if company is None:
        raise AuthenticationError("Company not found. Token invalid.", reason="unknown")
    return RecruiterContext(company=company)


def get_company_service(
    session: AsyncSession = Depends(get_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenIssuer = Depends(get_token_issuer),
    blob_store: BlobStore = Depends(get_blob_store),
) -> CompanyService:
    return CompanyService(session, hasher, tokens, blob_store)


def get_job_service(session: AsyncSession = Depends(get_session)) -> JobService:
    return JobService(session)


def get_application_service(
    session: AsyncSession = Depends(get_session),
) -> ApplicationService:
    return ApplicationService(session)


def get_user_service(
    session: AsyncSession = Depends(get_session),
    blob_store: BlobStore = Depends(get_blob_store),
) -> UserService:
    return UserService(session, blob_store)
