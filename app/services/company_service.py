"""Company account service: registration, login and profile."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import (
    BlobStorageError,
    DuplicateEmailError,
    InvalidCredentialsError,
    ValidationError,
)
from app.core.security import PasswordHasher, TokenIssuer
from app.models.company import Company
from app.services.blob.base import BlobStore
from app.utils.uploads import ValidatedUpload

logger = logging.getLogger(__name__)

LOGO_FOLDER = "company-logos"


def normalize_email(email: str) -> str:
    return email.strip().lower()


class CompanyService:
    """Recruiter account management."""

    def __init__(
        self,
        session: AsyncSession,
        hasher: PasswordHasher,
        tokens: TokenIssuer,
        blob_store: BlobStore,
    ):
        self.session = session
        self.hasher = hasher
        self.tokens = tokens
        self.blob_store = blob_store

    async def _find_by_email(self, email: str) -> Company | None:
        result = await self.session.execute(
            select(Company).where(Company.email == email)
        )
        return result.scalar_one_or_none()

    async def register(
        self,
        name: str | None,
        email: str | None,
        password: str | None,
        logo: ValidatedUpload | None = None,
    ) -> tuple[str, Company]:
        """Create a company account and return ``(token, company)``."""
        if not name or not name.strip() or not email or not email.strip() or not password:
            raise ValidationError("Please provide name, email, and password.")

        email = normalize_email(email)
        if await self._find_by_email(email):
            raise DuplicateEmailError(email)

        password_hash = self.hasher.hash(password)

        image_url = ""
        if logo is not None:
            image_url = await self.blob_store.upload(
                logo.data, LOGO_FOLDER, logo.filename, logo.content_type
            )

        company = Company(
            name=name.strip(),
            email=email,
            password_hash=password_hash,
            image=image_url,
        )
        self.session.add(company)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            if image_url:
                await self._discard_logo(image_url)
            raise DuplicateEmailError(email) from e

        logger.info(f"Company registered: {company.id}")
        return self.tokens.issue(company.id), company

    async def _discard_logo(self, url: str) -> None:
        try:
            await self.blob_store.delete(url)
        except BlobStorageError as e:
            logger.warning(f"Could not delete orphaned logo {url}: {e}")

    async def login(self, email: str | None, password: str | None) -> tuple[str, Company]:
        """Authenticate by email and password."""
        if not email or not password:
            raise ValidationError("Please provide email and password.")

        company = await self._find_by_email(normalize_email(email))
        if company is None or not self.hasher.verify(password, company.password_hash):
            raise InvalidCredentialsError()

        logger.info(f"Company logged in: {company.id}")
        return self.tokens.issue(company.id), company

    async def update_profile(
        self,
        company: Company,
        name: str | None = None,
        logo: ValidatedUpload | None = None,
    ) -> Company:
        """Update only the provided profile fields."""
        company = await self.session.merge(company)
        if name and name.strip():
            company.name = name.strip()
        if logo is not None:
            company.image = await self.blob_store.upload(
                logo.data, LOGO_FOLDER, logo.filename, logo.content_type
            )
        await self.session.commit()
        return company

    @staticmethod
    def get_profile(company: Company) -> dict:
        """Public projection of the authenticated company."""
        return {**company.to_public(), "created_at": company.created_at}
