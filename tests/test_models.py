"""Tests for database models."""

from app.models.application import ApplicationStatus, JobApplication
from app.models.company import Company, new_id
from app.models.job import Job, JobCategory, JobLevel
from app.models.user import User


class TestCompanyModel:
    """Tests for Company model."""

    def test_tablename(self):
        assert Company.__tablename__ == "companies"

    def test_public_projection_has_no_password_hash(self):
        company = Company(id="c1", name="Acme", email="hr@acme.com", password_hash="hashed")
        public = company.to_public()
        assert public["name"] == "Acme"
        assert "password_hash" not in public
        assert "hashed" not in public.values()

    def test_email_is_unique(self):
        assert Company.__table__.c.email.unique

    def test_new_id(self):
        first, second = new_id(), new_id()
        assert first != second
        assert len(first) == 32


class TestJobModel:
    """Tests for Job model."""

    def test_tablename(self):
        assert Job.__tablename__ == "jobs"

    def test_visible_defaults_to_true(self):
        assert Job.__table__.c.visible.default.arg is True

    def test_enumerations(self):
        assert JobCategory.DATA_SCIENCE.value == "Data Science"
        assert JobLevel.SENIOR.value == "Senior"
        assert len(JobLevel) == 5

    def test_to_dict(self):
        job = Job(
            id="j1",
            title="Designer",
            description="d",
            location="Remote",
            category="Design",
            level="Senior",
            salary=1.0,
            company_id="c1",
            visible=False,
        )
        data = job.to_dict()
        assert data["company_id"] == "c1"
        assert data["visible"] is False


class TestJobApplicationModel:
    """Tests for JobApplication model."""

    def test_tablename(self):
        assert JobApplication.__tablename__ == "job_applications"

    def test_unique_user_job_pair(self):
        constraints = {c.name for c in JobApplication.__table__.constraints}
        assert "uq_job_applications_user_job" in constraints

    def test_status_values(self):
        assert {s.value for s in ApplicationStatus} == {"pending", "accepted", "rejected"}
        assert JobApplication.__table__.c.status.default.arg == "pending"


class TestUserModel:
    """Tests for User model."""

    def test_tablename(self):
        assert User.__tablename__ == "users"

    def test_primary_key_has_no_generator(self):
        assert User.__table__.c.id.default is None

    def test_public_projection(self):
        user = User(id="user_1", name="Alice", email="a@mail.com", image="", resume="")
        assert user.to_public()["id"] == "user_1"
