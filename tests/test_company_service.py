"""Tests for CompanyService."""

from unittest.mock import AsyncMock

import pytest

from app.core.exceptions import (
    BlobStorageError,
    DuplicateEmailError,
    InvalidCredentialsError,
    ValidationError,
)
from app.core.security import PasswordHasher, TokenIssuer
from app.services.company_service import CompanyService, normalize_email
from app.utils.uploads import ValidatedUpload
from tests.helpers import InMemoryBlobStore


@pytest.fixture
def tokens():
    return TokenIssuer("service-secret")


@pytest.fixture
def store():
    return InMemoryBlobStore()


@pytest.fixture
def service(db_session, tokens, store):
    return CompanyService(db_session, PasswordHasher(rounds=1000), tokens, store)


def test_normalize_email():
    assert normalize_email("  HR@Acme.COM ") == "hr@acme.com"


class TestRegister:
    """Tests for CompanyService.register."""

    @pytest.mark.asyncio
    async def test_register(self, service, tokens):
        token, company = await service.register("Acme", "HR@acme.com", "secret1")

        assert tokens.decode(token) == company.id
        assert company.email == "hr@acme.com"
        assert company.password_hash != "secret1"
        assert company.image == ""

    @pytest.mark.asyncio
    async def test_register_with_logo(self, service, store):
        logo = ValidatedUpload(b"png", "logo.png", "image/png")
        _, company = await service.register("Acme", "hr@acme.com", "secret1", logo)

        key = store.key_from_url(company.image)
        assert key.startswith("job-portal/company-logos/")
        assert store.objects[key] == b"png"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "name,email,password",
        [(None, "a@b.com", "pw"), ("Acme", "", "pw"), ("Acme", "a@b.com", None), ("  ", "a@b.com", "pw")],
    )
    async def test_register_missing_fields(self, service, name, email, password):
        with pytest.raises(ValidationError, match="Please provide name, email, and password"):
            await service.register(name, email, password)

    @pytest.mark.asyncio
    async def test_duplicate_email_any_case(self, service):
        await service.register("Acme", "hr@acme.com", "secret1")
        with pytest.raises(DuplicateEmailError):
            await service.register("Acme Again", "HR@ACME.com", "secret2")

    @pytest.mark.asyncio
    async def test_logo_upload_failure_creates_nothing(self, service, store):
        store.fail_upload = True
        logo = ValidatedUpload(b"png", "logo.png", "image/png")
        with pytest.raises(BlobStorageError):
            await service.register("Acme", "hr@acme.com", "secret1", logo)

        store.fail_upload = False
        _, company = await service.register("Acme", "hr@acme.com", "secret1")
        assert company.email == "hr@acme.com"


class TestConcurrentRegistration:
    """Tests for a registration losing the race on the unique email index."""

    @pytest.mark.asyncio
    async def test_losing_registration_discards_its_logo(self, service, store):
        await service.register("Acme", "hr@acme.com", "secret1")
        service._find_by_email = AsyncMock(return_value=None)
        logo = ValidatedUpload(b"png", "logo.png", "image/png")

        with pytest.raises(DuplicateEmailError):
            await service.register("Acme Twin", "hr@acme.com", "secret2", logo)

        assert store.objects == {}
        assert len(store.deleted) == 1
        assert store.deleted[0].startswith("job-portal/company-logos/")

    @pytest.mark.asyncio
    async def test_logo_delete_failure_still_reports_duplicate(self, service, store):
        await service.register("Acme", "hr@acme.com", "secret1")
        service._find_by_email = AsyncMock(return_value=None)
        store.fail_delete = True

        with pytest.raises(DuplicateEmailError):
            await service.register(
                "Acme Twin", "hr@acme.com", "secret2", ValidatedUpload(b"png", "logo.png", "image/png")
            )


class TestLogin:
    """Tests for CompanyService.login."""

    @pytest.mark.asyncio
    async def test_login(self, service, tokens):
        _, registered = await service.register("Acme", "hr@acme.com", "secret1")
        token, company = await service.login("HR@acme.com", "secret1")
        assert company.id == registered.id
        assert tokens.decode(token) == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_the_same(self, service):
        await service.register("Acme", "hr@acme.com", "secret1")

        with pytest.raises(InvalidCredentialsError) as wrong_password:
            await service.login("hr@acme.com", "nope")
        with pytest.raises(InvalidCredentialsError) as unknown_email:
            await service.login("nobody@acme.com", "secret1")

        assert wrong_password.value.message == unknown_email.value.message

    @pytest.mark.asyncio
    async def test_missing_fields(self, service):
        with pytest.raises(ValidationError):
            await service.login("hr@acme.com", None)


class TestProfile:
    """Tests for profile reads and updates."""

    @pytest.mark.asyncio
    async def test_update_name_only(self, service, store):
        _, company = await service.register("Acme", "hr@acme.com", "secret1")
        updated = await service.update_profile(company, name="Acme Corp")
        assert updated.name == "Acme Corp"
        assert updated.image == ""
        assert store.objects == {}

    @pytest.mark.asyncio
    async def test_update_logo_only(self, service):
        _, company = await service.register("Acme", "hr@acme.com", "secret1")
        updated = await service.update_profile(
            company, logo=ValidatedUpload(b"gif", "l.gif", "image/gif")
        )
        assert updated.name == "Acme"
        assert updated.image.endswith("l.gif")

    @pytest.mark.asyncio
    async def test_get_profile_has_no_password_hash(self, service):
        _, company = await service.register("Acme", "hr@acme.com", "secret1")
        profile = CompanyService.get_profile(company)
        assert "password_hash" not in profile
        assert profile["created_at"] is not None
