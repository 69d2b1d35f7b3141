"""Pytest configuration and fixtures."""

import os
import sys
import uuid

import pytest
import pytest_asyncio

# Add the app directory to the Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment variables before importing app modules
os.environ.setdefault("JWT_SECRET", "test-jwt-secret")
os.environ.setdefault("APP_ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test.db")

from fastapi.testclient import TestClient  # noqa: E402

from app.core.config import Settings  # noqa: E402
from app.core.security import ApplicantContext, RecruiterContext  # noqa: E402
from app.core.storage import Database  # noqa: E402
from app.main import create_app  # noqa: E402
from app.models.company import Company  # noqa: E402
from app.models.job import Job  # noqa: E402
from app.models.user import User  # noqa: E402
from tests.helpers import (  # noqa: E402
    WEBHOOK_SECRET,
    FakeIdentityProvider,
    InMemoryBlobStore,
    applicant_token,
    signed_webhook,
    user_event,
)


@pytest.fixture
def test_settings(tmp_path):
    """Settings pointing at a throwaway database."""
    return Settings(
        app_env="test",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'api.db'}",
        jwt_secret="test-jwt-secret",
        password_hash_rounds=1000,
        identity_webhook_secret=WEBHOOK_SECRET,
        _env_file=None,
    )


@pytest.fixture
def blob_store():
    return InMemoryBlobStore()


@pytest.fixture
def identity_provider():
    return FakeIdentityProvider(
        {applicant_token(uid): uid for uid in ("user_alice", "user_bob", "user_ghost")}
    )


@pytest.fixture
def test_client(test_settings, blob_store, identity_provider):
    """TestClient with the lifespan running against a fresh database."""
    app = create_app(
        test_settings, blob_store=blob_store, identity_provider=identity_provider
    )
    with TestClient(app) as client:
        yield client


@pytest.fixture
def sync_user(test_client):
    """Create a job seeker through the identity webhook."""

    def _sync(user_id: str, **kwargs) -> None:
        body, headers = signed_webhook(user_event("user.created", user_id, **kwargs))
        response = test_client.post(
            "/webhooks/identity-provider", content=body, headers=headers
        )
        assert response.status_code == 200, response.text

    return _sync


@pytest.fixture
def register_company(test_client):
    """Register a company and return (headers, company)."""

    def _register(name="Acme", email=None, password="secret1"):
        email = email or f"{name.lower().replace(' ', '')}@{uuid.uuid4().hex[:6]}.com"
        response = test_client.post(
            "/company/register",
            data={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return {"Authorization": f"Bearer {body['token']}"}, body["company"]

    return _register


@pytest.fixture
def applicant_headers():
    def _headers(user_id: str) -> dict:
        return {"Authorization": f"Bearer {applicant_token(user_id)}"}

    return _headers


@pytest.fixture
def sample_job_payload():
    """Valid job definition."""
    return {
        "title": "Product Designer",
        "description": "Design delightful interfaces for our hiring tools.",
        "location": "Remote - Europe",
        "category": "Design",
        "level": "Senior",
        "salary": 85000,
    }


@pytest.fixture
def create_job(test_client, sample_job_payload):
    """Create a job as the given company and return its JSON."""

    def _create(headers: dict, **overrides) -> dict:
        payload = {**sample_job_payload, **overrides}
        response = test_client.post("/jobs", json=payload, headers=headers)
        assert response.status_code == 201, response.text
        return response.json()["job"]

    return _create


@pytest_asyncio.fixture
async def database(tmp_path):
    """Initialized database for service tests."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'service.db'}")
    await db.init_models()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.sessionmaker() as session:
        yield session


@pytest_asyncio.fixture
async def seeded(db_session):
    """Two companies, a user, a visible job and a hidden job."""
    acme = Company(name="Acme", email="hr@acme.com", password_hash="x")
    globex = Company(name="Globex", email="jobs@globex.com", password_hash="x")
    db_session.add_all([acme, globex])
    await db_session.flush()

    user = User(id="user_alice", name="Alice Smith", email="alice@mail.com")
    visible_job = Job(
        title="Backend Engineer",
        description="Build APIs",
        location="Berlin",
        category="Programming",
        level="Senior",
        salary=90000,
        company_id=acme.id,
    )
    hidden_job = Job(
        title="Data Analyst",
        description="Crunch numbers",
        location="Remote",
        category="Data Science",
        level="Intermediate",
        salary=60000,
        company_id=acme.id,
        visible=False,
    )
    db_session.add_all([user, visible_job, hidden_job])
    await db_session.commit()

    return {
        "acme": RecruiterContext(company=acme),
        "globex": RecruiterContext(company=globex),
        "alice": ApplicantContext(user_id=user.id),
        "job": visible_job,
        "hidden_job": hidden_job,
    }
